"""
Unit test configuration.

Patches dotenv so pydantic-settings never reads a real .env file during unit
tests, and resets structlog so tests never inherit an application's setup.
"""

import pytest
import structlog


@pytest.fixture(autouse=True)
def disable_dotenv_loading(monkeypatch):
    """Prevent pydantic-settings from loading .env files in all unit tests."""
    import pydantic_settings.sources.providers.dotenv as ps_dotenv

    monkeypatch.setattr(ps_dotenv, "dotenv_values", lambda *a, **kw: {})


@pytest.fixture(autouse=True)
def reset_structlog():
    yield
    structlog.reset_defaults()
