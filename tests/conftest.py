"""Shared pytest fixtures for credseal tests."""

from __future__ import annotations

import pytest

from credseal import ENV_VAR, encrypt_secret


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Every test starts without an environment-sourced key."""
    monkeypatch.delenv(ENV_VAR, raising=False)


@pytest.fixture
def envelope() -> str:
    """Envelope for ``"hunter2"`` sealed under ``"test-key"``."""
    return encrypt_secret("hunter2", "test-key")
