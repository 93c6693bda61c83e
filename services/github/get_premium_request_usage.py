from __future__ import annotations

from typing import Any

import httpx

from api_config import billing_headers, premium_request_usage_url
from errors import HTTPError


async def get_premium_request_usage(
    username: str,
    token: str,
    year: int,
    month: int,
    *,
    timeout: float,
    transport: httpx.AsyncBaseTransport | None = None,
) -> dict[str, Any]:
    async with httpx.AsyncClient(timeout=timeout, transport=transport) as client:
        response = await client.get(
            premium_request_usage_url(username),
            headers=billing_headers(token),
            params={"year": year, "month": month},
        )

    if not response.is_success:
        raise HTTPError(
            message="Failed to get premium request usage",
            status_code=response.status_code,
            response_text=response.text,
        )

    return response.json()
