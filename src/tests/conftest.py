"""Pytest fixtures."""

from collections.abc import AsyncGenerator

import httpx
import pytest
from fake_backend import FakeBackend

from deskboard.core.config import Settings
from deskboard.main import Dashboard
from deskboard.ui.dom import Document
from deskboard.ui.markup import build_page

QUOTE_API_BASE = "http://quotes.test/api/v1"
LOCAL_API_BASE = "http://local.test/api/v1"


@pytest.fixture
def backend() -> FakeBackend:
    """Fresh in-memory backend per test."""
    return FakeBackend()


@pytest.fixture
def test_settings() -> Settings:
    return Settings(
        quote_api_base=QUOTE_API_BASE,
        local_api_base=LOCAL_API_BASE,
        default_category="general",
        request_timeout=5.0,
    )


@pytest.fixture
async def http(backend: FakeBackend) -> AsyncGenerator[httpx.AsyncClient, None]:
    """
    AsyncClient routed into the fake backend's ASGI app.

    Both base URLs resolve to the same app, so the real API clients run
    end to end without a network.
    """
    transport = httpx.ASGITransport(app=backend.app)
    async with httpx.AsyncClient(transport=transport) as client:
        yield client


@pytest.fixture
def document() -> Document:
    return build_page()


@pytest.fixture
def dashboard(
    document: Document, http: httpx.AsyncClient, test_settings: Settings
) -> Dashboard:
    """Dashboard bound to the default page, not yet initialized."""
    return Dashboard(document, http, test_settings)
