"""Shared fixtures for unit and feature tests."""

from __future__ import annotations

import pytest

_ENV_VARS = (
    "GHACTIVITY_API_BASE",
    "GHACTIVITY_TIMEOUT_S",
    "GHACTIVITY_USER_AGENT",
    "GHACTIVITY_LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def _clean_ghactivity_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep developer environment settings out of every test."""
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
