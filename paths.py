from __future__ import annotations

from pathlib import Path

OPENCODE_DATA_DIR = Path.home() / ".local" / "share" / "opencode"
AUTH_PATH = OPENCODE_DATA_DIR / "auth.json"

COPILOT_AUTH_KEY = "github-copilot"
