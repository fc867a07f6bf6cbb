"""Pytest configuration and fixtures."""

import pytest

from trafficcontrol_client.utils.env import CAPTURE_STACK_ENV, ENABLE_SUPPRESSION_ENV


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Run every test with the diagnostic defaults unset."""
    monkeypatch.delenv(CAPTURE_STACK_ENV, raising=False)
    monkeypatch.delenv(ENABLE_SUPPRESSION_ENV, raising=False)
