"""Shared pytest fixtures for Race Radar tests."""

import json
from typing import Callable

import httpx
import pytest
import structlog
from fastapi.testclient import TestClient

from api.config import Settings, get_settings
from api.fixtures import load_mock_events
from api.main import app, get_race_provider
from providers.models import Event
from providers.sources.eventbrite import EventbriteProvider

MOCK_EVENTS_PATH = Settings.model_fields["mock_events_path"].default


@pytest.fixture(autouse=True)
def reset_logging():
    """Undo structlog configuration made by the app or a CLI callback."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def mock_events() -> tuple[Event, ...]:
    return load_mock_events(MOCK_EVENTS_PATH)


@pytest.fixture
def mock_events_json() -> list[dict]:
    """The fixture file exactly as it sits on disk."""
    with open(MOCK_EVENTS_PATH, encoding="utf-8") as f:
        return json.load(f)


@pytest.fixture
def settings() -> Settings:
    """Settings with no credential, ignoring the process environment."""
    return Settings(_env_file=None, eventbrite_token=None)


@pytest.fixture
def client(settings: Settings):
    app.dependency_overrides[get_settings] = lambda: settings
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def make_provider() -> Callable[[Callable[[httpx.Request], httpx.Response]], EventbriteProvider]:
    """Build an Eventbrite provider whose HTTP traffic goes to *handler*."""

    def _make(handler):
        return EventbriteProvider(
            "test-token", transport=httpx.MockTransport(handler)
        )

    return _make


@pytest.fixture
def live_client(client: TestClient, make_provider):
    """Client whose race route talks to a fake Eventbrite via *handler*."""

    def _install(handler):
        provider = make_provider(handler)
        app.dependency_overrides[get_race_provider] = lambda: provider
        return client

    return _install


@pytest.fixture
def eventbrite_payload() -> dict:
    """A search response with one complete event and two without coordinates."""
    return {
        "pagination": {"object_count": 3, "page_number": 1, "page_count": 1},
        "events": [
            {
                "id": "111",
                "name": {"text": "Riverside 5K", "html": "Riverside 5K"},
                "start": {"local": "2026-05-10T08:00:00", "utc": "2026-05-10T12:00:00Z"},
                "url": "https://www.eventbrite.com/e/riverside-5k-111",
                "venue": {
                    "name": "Riverside Park",
                    "latitude": "40.8007",
                    "longitude": "-73.9707",
                    "address": {
                        "address_1": "Riverside Dr",
                        "city": "New York",
                        "region": "NY",
                        "postal_code": "10025",
                    },
                },
            },
            {
                "id": "222",
                "name": {"text": "Virtual Marathon"},
                "start": {"local": "2026-05-11T00:00:00"},
                "url": "https://www.eventbrite.com/e/virtual-marathon-222",
            },
            {
                "id": "333",
                "name": {"text": "Null Island Dash"},
                "start": {"local": "2026-05-12T09:00:00"},
                "url": "https://www.eventbrite.com/e/null-island-333",
                "venue": {"name": "Gulf of Guinea", "latitude": "0", "longitude": "0"},
            },
        ],
    }
