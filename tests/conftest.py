"""
Pytest configuration and shared fixtures for extent tests.
"""

import pytest

from extent.constants import ENV_DEBUG, ENV_DEFAULT_KIND, ENV_LOG_LEVEL
from extent.utils.logger import configure_logging, disable_logging


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Each test starts with no EXTENT_* switches set and logging disabled."""
    for name in (ENV_DEBUG, ENV_LOG_LEVEL, ENV_DEFAULT_KIND):
        monkeypatch.delenv(name, raising=False)
    yield
    disable_logging()


@pytest.fixture
def log_messages():
    """Capture extent's log output at DEBUG level."""
    messages: list[str] = []
    configure_logging(level="DEBUG", sink=messages.append)
    yield messages
    disable_logging()
