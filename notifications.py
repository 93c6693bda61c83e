from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Protocol

logger = logging.getLogger(__name__)

USAGE_TITLE = "Copilot Premium Requests"
WARNING_TITLE = "Copilot Usage"
FETCH_FAILED_MESSAGE = "Failed to fetch quota"

WARNING_DURATION_MS = 5000
USAGE_DURATION_MS = 8000


@dataclass(frozen=True)
class Toast:
    title: str
    message: str
    variant: str
    duration: int

    def as_body(self) -> dict[str, Any]:
        return {
            "title": self.title,
            "message": self.message,
            "variant": self.variant,
            "duration": self.duration,
        }


class ToastSender(Protocol):
    async def show_toast(self, toast: Toast) -> None: ...


class HostToastSender:
    """Sends toasts through the host client's ``tui.show_toast``."""

    def __init__(self, client: Any) -> None:
        self.client = client

    async def show_toast(self, toast: Toast) -> None:
        try:
            await self.client.tui.show_toast(body=toast.as_body())
        except Exception:
            logger.exception("Failed to show toast %r", toast.title)


def warning_toast(message: str) -> Toast:
    return Toast(
        title=WARNING_TITLE,
        message=message,
        variant="warning",
        duration=WARNING_DURATION_MS,
    )


def usage_toast(message: str, variant: str) -> Toast:
    return Toast(
        title=USAGE_TITLE,
        message=message,
        variant=variant,
        duration=USAGE_DURATION_MS,
    )
