from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any

import httpx

from credentials import Credentials
from errors import HTTPError, error_detail
from services.github.get_copilot_user import get_copilot_user
from services.github.get_premium_request_usage import get_premium_request_usage
from settings import INTERNAL_BACKEND, PluginSettings

logger = logging.getLogger(__name__)

COPILOT_PRODUCT = "Copilot"
PREMIUM_REQUEST_SKU = "Premium Request"


@dataclass(frozen=True)
class UsageSnapshot:
    used: float
    quota: float
    remaining: float
    unlimited: bool = False


def sum_premium_requests(payload: dict[str, Any]) -> float:
    # grossQuantity, since netQuantity is 0 on fully discounted plans.
    used: float = 0
    for item in payload.get("usageItems") or []:
        if not isinstance(item, dict):
            continue
        if item.get("product") != COPILOT_PRODUCT:
            continue
        sku = item.get("sku")
        if not isinstance(sku, str) or PREMIUM_REQUEST_SKU not in sku:
            continue
        quantity = item.get("grossQuantity")
        if isinstance(quantity, (int, float)) and not isinstance(quantity, bool):
            used += quantity
    return used


def snapshot_from_billing(payload: dict[str, Any], quota: int) -> UsageSnapshot:
    used = sum_premium_requests(payload)
    return UsageSnapshot(used=used, quota=quota, remaining=max(0, quota - used))


def snapshot_from_copilot_user(payload: dict[str, Any]) -> UsageSnapshot | None:
    snapshots = payload.get("quota_snapshots") or {}
    premium = snapshots.get("premium_interactions")
    if not isinstance(premium, dict):
        return None

    if premium.get("unlimited"):
        return UsageSnapshot(used=0, quota=0, remaining=0, unlimited=True)

    entitlement = premium["entitlement"]
    remaining = premium["remaining"]
    return UsageSnapshot(
        used=max(0, entitlement - remaining),
        quota=entitlement,
        remaining=remaining,
    )


async def _fetch_billing_usage(
    settings: PluginSettings,
    credentials: Credentials,
    now: datetime,
    transport: httpx.AsyncBaseTransport | None,
) -> UsageSnapshot:
    payload = await get_premium_request_usage(
        credentials.username or "",
        credentials.token,
        now.year,
        now.month,
        timeout=settings.timeout,
        transport=transport,
    )
    return snapshot_from_billing(payload, settings.quota)


async def _fetch_internal_usage(
    settings: PluginSettings,
    credentials: Credentials,
    transport: httpx.AsyncBaseTransport | None,
) -> UsageSnapshot | None:
    payload = await get_copilot_user(
        credentials.token,
        timeout=settings.timeout,
        transport=transport,
    )
    snapshot = snapshot_from_copilot_user(payload)
    if snapshot is None:
        logger.warning("No premium_interactions quota snapshot in Copilot user response")
    return snapshot


async def fetch_usage(
    settings: PluginSettings,
    credentials: Credentials,
    *,
    now: datetime | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> UsageSnapshot | None:
    """Fetch the current premium request usage.

    Every failure (HTTP status, network error, timeout, malformed body) is
    logged and reported as ``None``.
    """
    try:
        if settings.backend == INTERNAL_BACKEND:
            return await _fetch_internal_usage(settings, credentials, transport)

        if now is None:
            now = datetime.now(timezone.utc)
        return await _fetch_billing_usage(settings, credentials, now, transport)

    except HTTPError as error:
        logger.error(
            "%s: %s %s",
            error.message,
            error.status_code,
            error_detail(error.response_text),
        )
        return None
    except Exception:
        logger.exception("Failed to fetch Copilot usage")
        return None
