from __future__ import annotations

import logging
from typing import Any, Mapping

import httpx

from api_config import COPILOT_PROVIDER_PREFIX
from credentials import CredentialSource, credential_source_for
from formatting import format_usage_message, select_variant, usage_percentage
from notifications import (
    FETCH_FAILED_MESSAGE,
    HostToastSender,
    ToastSender,
    usage_toast,
    warning_toast,
)
from settings import PluginSettings
from state import PluginState
from usage import fetch_usage

logger = logging.getLogger(__name__)

MESSAGE_UPDATED = "message.updated"
SESSION_IDLE = "session.idle"


class CopilotUsagePlugin:
    """Shows remaining Copilot premium requests when a Copilot session goes idle.

    The host delivers events one at a time and awaits each call, so the
    handler state is never touched concurrently.
    """

    def __init__(
        self,
        sender: ToastSender,
        settings: PluginSettings,
        credential_source: CredentialSource | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.sender = sender
        self.settings = settings
        self.credential_source = credential_source or credential_source_for(settings)
        self.transport = transport
        self.state = PluginState()

    async def event(self, event: Mapping[str, Any]) -> None:
        event_type = event.get("type")
        properties = event.get("properties")
        if not isinstance(properties, Mapping):
            properties = {}

        if event_type == MESSAGE_UPDATED:
            self._track_provider(properties)
        elif event_type == SESSION_IDLE:
            await self._report_usage()

    def _track_provider(self, properties: Mapping[str, Any]) -> None:
        info = properties.get("info")
        if not isinstance(info, Mapping) or info.get("role") != "assistant":
            return

        self.state.last_provider_id = info.get("providerID")
        logger.debug("Tracking provider %s", self.state.last_provider_id)

    def _uses_copilot(self) -> bool:
        provider_id = self.state.last_provider_id
        return isinstance(provider_id, str) and provider_id.startswith(
            COPILOT_PROVIDER_PREFIX
        )

    async def _report_usage(self) -> None:
        if not self._uses_copilot():
            return

        credentials = await self.credential_source.resolve()
        if credentials is None:
            if not self.state.credentials_warning_shown:
                await self.sender.show_toast(
                    warning_toast(self.credential_source.missing_message)
                )
                self.state.credentials_warning_shown = True
            return

        usage = await fetch_usage(self.settings, credentials, transport=self.transport)
        if usage is None:
            await self.sender.show_toast(warning_toast(FETCH_FAILED_MESSAGE))
            return

        if usage.unlimited:
            logger.debug("Premium requests are unlimited, nothing to show")
            return

        variant = select_variant(usage_percentage(usage.used, usage.quota))
        await self.sender.show_toast(usage_toast(format_usage_message(usage), variant))


async def create_plugin(
    client: Any, settings: PluginSettings | None = None
) -> CopilotUsagePlugin:
    if settings is None:
        settings = PluginSettings.from_env()

    logger.debug("Copilot usage plugin loaded with %s backend", settings.backend)
    return CopilotUsagePlugin(HostToastSender(client), settings)
