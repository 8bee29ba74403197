"""
Global pytest configuration and fixtures.

This file configures pytest behavior for all tests in the project.
"""

import pytest

from event_emitter.config.settings import reset_settings


# Register custom pytest marks to avoid warnings
def pytest_configure(config):
    """Register custom marks."""
    config.addinivalue_line("markers", "slow: mark test as slow running test")


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch):
    """
    Keep every test on default settings, regardless of the developer's
    environment or any .env file.
    """
    monkeypatch.delenv("EVENT_EMITTER_LOG_LEVEL", raising=False)
    monkeypatch.delenv("EVENT_EMITTER_LOG_DISPATCH", raising=False)
    monkeypatch.setattr("dotenv.load_dotenv", lambda *args, **kwargs: False)
    reset_settings()
    yield
    reset_settings()
