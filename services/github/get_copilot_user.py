from __future__ import annotations

from typing import Any

import httpx

from api_config import copilot_user_headers, copilot_user_url
from errors import HTTPError


async def get_copilot_user(
    token: str,
    *,
    timeout: float,
    transport: httpx.AsyncBaseTransport | None = None,
) -> dict[str, Any]:
    async with httpx.AsyncClient(timeout=timeout, transport=transport) as client:
        response = await client.get(
            copilot_user_url(),
            headers=copilot_user_headers(token),
        )

    if not response.is_success:
        raise HTTPError(
            message="Failed to get Copilot user",
            status_code=response.status_code,
            response_text=response.text,
        )

    return response.json()
