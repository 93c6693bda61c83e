from __future__ import annotations

from dataclasses import dataclass


@dataclass
class PluginState:
    last_provider_id: str | None = None
    credentials_warning_shown: bool = False
