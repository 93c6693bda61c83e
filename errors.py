from __future__ import annotations

import json
from dataclasses import dataclass


@dataclass
class HTTPError(Exception):
    message: str
    status_code: int
    response_text: str

    def __str__(self) -> str:
        return self.message


def error_detail(text: str) -> str:
    try:
        payload = json.loads(text)
    except ValueError:
        return text

    if isinstance(payload, dict) and isinstance(payload.get("message"), str):
        return payload["message"]
    return text
