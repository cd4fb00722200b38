"""Fixtures for HTTP-level tests."""

import httpx
import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from techhub.config.settings import Settings
from techhub.main import create_app


@pytest.fixture
def app(test_settings: Settings) -> FastAPI:
    """A new application (and therefore a new, empty store) per test."""
    return create_app(test_settings, configure_logging=False)


@pytest.fixture
def client(app: FastAPI):
    # raise_server_exceptions=False: let the INTERNAL handler answer instead of
    # re-raising into the test
    with TestClient(app, raise_server_exceptions=False) as c:
        yield c


@pytest.fixture
async def async_client(app: FastAPI):
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as c:
        yield c


@pytest.fixture
def framework_payload() -> dict:
    return {
        "name": "Playwright",
        "currentVersion": "1.45.0",
        "category": "WEB_AUTOMATION",
        "primaryLanguage": "TYPESCRIPT",
        "description": "Modern framework for end-to-end web automation testing.",
        "officialSite": "https://playwright.dev/",
    }
