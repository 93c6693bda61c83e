from __future__ import annotations

import logging
import os
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Mapping

from paths import AUTH_PATH

logger = logging.getLogger(__name__)

BILLING_BACKEND = "billing"
INTERNAL_BACKEND = "internal"
BACKENDS = (BILLING_BACKEND, INTERNAL_BACKEND)

DEFAULT_BACKEND = BILLING_BACKEND
DEFAULT_QUOTA = 300
DEFAULT_TIMEOUT = 10.0

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")


def _env(environ: Mapping[str, str], name: str) -> str | None:
    # Empty strings count as unset.
    value = environ.get(name)
    return value or None


def parse_quota(value: str | None) -> int:
    if not value:
        return DEFAULT_QUOTA

    match = _INT_PREFIX.match(value)
    if match is None:
        return DEFAULT_QUOTA

    quota = int(match.group(1))
    return quota if quota > 0 else DEFAULT_QUOTA


def parse_timeout(value: str | None) -> float:
    if not value:
        return DEFAULT_TIMEOUT

    try:
        timeout = float(value)
    except ValueError:
        logger.warning("Ignoring invalid COPILOT_USAGE_TIMEOUT: %r", value)
        return DEFAULT_TIMEOUT

    if timeout <= 0:
        logger.warning("Ignoring non-positive COPILOT_USAGE_TIMEOUT: %r", value)
        return DEFAULT_TIMEOUT
    return timeout


def parse_backend(value: str | None) -> str:
    if not value:
        return DEFAULT_BACKEND

    backend = value.strip().lower()
    if backend not in BACKENDS:
        logger.warning(
            "Unknown COPILOT_USAGE_BACKEND %r, using %s", value, DEFAULT_BACKEND
        )
        return DEFAULT_BACKEND
    return backend


@dataclass
class PluginSettings:
    backend: str = DEFAULT_BACKEND
    quota: int = DEFAULT_QUOTA
    username: str | None = None
    token: str | None = None
    auth_path: Path = field(default_factory=lambda: AUTH_PATH)
    timeout: float = DEFAULT_TIMEOUT

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> PluginSettings:
        if environ is None:
            environ = os.environ

        return cls(
            backend=parse_backend(_env(environ, "COPILOT_USAGE_BACKEND")),
            quota=parse_quota(_env(environ, "COPILOT_QUOTA")),
            username=_env(environ, "GITHUB_USERNAME"),
            token=_env(environ, "GITHUB_PAT"),
            timeout=parse_timeout(_env(environ, "COPILOT_USAGE_TIMEOUT")),
        )
