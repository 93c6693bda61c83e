"""Fakes and payload builders shared by the tests."""

from typing import Any

import httpx

from notifications import Toast


class RecordingSender:
    """ToastSender that keeps every toast it is asked to show."""

    def __init__(self):
        self.toasts: list[Toast] = []

    async def show_toast(self, toast: Toast) -> None:
        self.toasts.append(toast)


def json_transport(payload: Any, status_code: int = 200, calls: list | None = None):
    """MockTransport answering every request with the same JSON body."""

    def handler(request: httpx.Request) -> httpx.Response:
        if calls is not None:
            calls.append(request)
        return httpx.Response(status_code, json=payload)

    return httpx.MockTransport(handler)


def billing_payload(*quantities: float) -> dict:
    return {
        "timePeriod": {"year": 2026, "month": 10},
        "user": "octocat",
        "usageItems": [
            {
                "product": "Copilot",
                "sku": "Copilot Premium Request",
                "model": "claude-sonnet-4",
                "unitType": "requests",
                "grossQuantity": quantity,
                "netQuantity": 0,
            }
            for quantity in quantities
        ],
    }


def copilot_user_payload(entitlement=300, remaining=120, unlimited=False) -> dict:
    return {
        "login": "octocat",
        "quota_snapshots": {
            "premium_interactions": {
                "entitlement": entitlement,
                "remaining": remaining,
                "percent_remaining": remaining / entitlement * 100 if entitlement else 0,
                "unlimited": unlimited,
            }
        },
    }


