from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Protocol

import anyio

from paths import COPILOT_AUTH_KEY
from settings import INTERNAL_BACKEND, PluginSettings

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Credentials:
    token: str
    username: str | None = None


class CredentialSource(Protocol):
    missing_message: str

    async def resolve(self) -> Credentials | None: ...


class EnvCredentialSource:
    """GitHub username and personal access token taken from the environment."""

    missing_message = "Missing GITHUB_USERNAME or GITHUB_PAT"

    def __init__(self, username: str | None, token: str | None) -> None:
        self.username = username
        self.token = token

    async def resolve(self) -> Credentials | None:
        if not self.username or not self.token:
            return None
        return Credentials(token=self.token, username=self.username)


class StoredCredentialSource:
    """Copilot refresh token read from the host's auth.json."""

    def __init__(self, path: Path) -> None:
        self.path = path
        self.missing_message = f"No Copilot credentials found in {path}"

    def _read(self) -> Any:
        return json.loads(self.path.read_text(encoding="utf-8"))

    async def resolve(self) -> Credentials | None:
        try:
            payload = await anyio.to_thread.run_sync(self._read)
        except (OSError, ValueError) as error:
            logger.debug("Could not read %s: %s", self.path, error)
            return None

        entry = payload.get(COPILOT_AUTH_KEY) if isinstance(payload, dict) else None
        token = entry.get("refresh") if isinstance(entry, dict) else None
        if not isinstance(token, str) or not token:
            logger.debug("No %s refresh token in %s", COPILOT_AUTH_KEY, self.path)
            return None

        return Credentials(token=token)


def credential_source_for(settings: PluginSettings) -> CredentialSource:
    if settings.backend == INTERNAL_BACKEND:
        return StoredCredentialSource(settings.auth_path)
    return EnvCredentialSource(settings.username, settings.token)
