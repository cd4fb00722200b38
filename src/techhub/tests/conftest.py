"""
Core pytest configuration for the entire test suite.

Only the cross-cutting setup lives here (settings, logging, the application and
its clients). Domain fixtures are kept in:
- tests/test_fixtures/repository_fixtures.py
- tests/test_fixtures/api_fixtures.py

and re-exported at the bottom of this module so every test can use them.
"""

from __future__ import annotations

import logging

# -------------------------------
# Early logging tuning
# -------------------------------
# Silence chatty third-party loggers before anything imports them.
NOISY_LOGGERS = (
    "faker",
    "faker.factory",
    "asyncio",
    "httpx",
    "httpcore",
)
for _name in NOISY_LOGGERS:
    logging.getLogger(_name).setLevel(logging.WARNING)

import pytest

from techhub.config.settings import Settings
from techhub.core.logging.builder import setup_logging, stop_queue_logging


def make_test_settings(**overrides) -> Settings:
    """
    Settings for tests: never read the developer's .env file, log as text to the
    console only.
    """
    values = {
        "ENV": "testing",
        "LOG_LEVEL": "INFO",
        "LOG_FORMAT": "text",
        "LOG_TO_STDOUT": True,
        "LOG_USE_QUEUE": False,
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


@pytest.fixture(scope="session")
def test_settings() -> Settings:
    return make_test_settings()


@pytest.fixture(scope="session", autouse=True)
def configure_logging(test_settings: Settings):
    """
    Install the application logging once for the whole session, so formatters and
    filters (request_id, redaction) are active exactly as in the running app.
    """
    setup_logging(test_settings)
    yield
    stop_queue_logging()


@pytest.fixture
def restore_logging(test_settings: Settings):
    """For tests that call setup_logging() themselves: put the session config back."""
    yield
    stop_queue_logging()
    setup_logging(test_settings)


# Domain fixtures
from .test_fixtures.repository_fixtures import (  # noqa: E402,F401
    framework_repository,
    pair_repository,
    sample_framework_input,
    create_framework,
    created_framework,
    multiple_frameworks,
)
from .test_fixtures.api_fixtures import (  # noqa: E402,F401
    app,
    client,
    async_client,
    framework_payload,
)
