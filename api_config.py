from __future__ import annotations

GITHUB_API_BASE_URL = "https://api.github.com"
BILLING_API_VERSION = "2022-11-28"

COPILOT_PROVIDER_PREFIX = "github-copilot"


def billing_headers(token: str) -> dict[str, str]:
    return {
        "Accept": "application/vnd.github+json",
        "Authorization": f"Bearer {token}",
        "X-GitHub-Api-Version": BILLING_API_VERSION,
    }


def copilot_user_headers(token: str) -> dict[str, str]:
    return {
        "Authorization": f"Bearer {token}",
        "Content-Type": "application/json",
    }


def premium_request_usage_url(username: str) -> str:
    return (
        f"{GITHUB_API_BASE_URL}/users/{username}"
        "/settings/billing/premium_request/usage"
    )


def copilot_user_url() -> str:
    return f"{GITHUB_API_BASE_URL}/copilot_internal/user"
