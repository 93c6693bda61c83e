"""Pytest configuration and shared fixtures."""

import json

import pytest

from settings import INTERNAL_BACKEND, PluginSettings
from tests.helpers import RecordingSender


@pytest.fixture
def sender():
    return RecordingSender()


@pytest.fixture
def billing_settings():
    return PluginSettings(username="octocat", token="ghp_test", quota=300)


@pytest.fixture
def auth_file(tmp_path):
    path = tmp_path / "auth.json"
    path.write_text(
        json.dumps({"github-copilot": {"type": "oauth", "refresh": "gho_stored"}}),
        encoding="utf-8",
    )
    return path


@pytest.fixture
def internal_settings(auth_file):
    return PluginSettings(backend=INTERNAL_BACKEND, auth_path=auth_file)
