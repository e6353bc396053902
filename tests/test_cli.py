"""Tests for the command-line entry points."""

import functools
import json
from unittest.mock import patch

import httpx
from typer.testing import CliRunner

from api.__main__ import app as api_app
from api.config import Settings
from providers.__main__ import app
from providers.sources.eventbrite import EventbriteProvider

runner = CliRunner()


def test_list():
    result = runner.invoke(app, ["list"])
    assert result.exit_code == 0
    assert "eventbrite" in result.output


def test_search_requires_token(monkeypatch):
    monkeypatch.delenv("EVENTBRITE_TOKEN", raising=False)
    result = runner.invoke(app, ["search", "--lat", "40.7", "--lon", "-74.0"])
    assert result.exit_code != 0


def test_search_prints_events(eventbrite_payload):
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json=eventbrite_payload)

    fake = functools.partial(EventbriteProvider, transport=httpx.MockTransport(handler))
    with patch("providers.__main__.get_provider", return_value=fake):
        result = runner.invoke(
            app, ["search", "--lat", "40.7", "--lon", "-74.0", "--token", "t"]
        )

    assert result.exit_code == 0
    data = json.loads(result.stdout)
    assert [e["id"] for e in data["events"]] == ["111"]


def test_search_upstream_error():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(401, text="INVALID_AUTH")

    fake = functools.partial(EventbriteProvider, transport=httpx.MockTransport(handler))
    with patch("providers.__main__.get_provider", return_value=fake):
        result = runner.invoke(
            app, ["search", "--lat", "40.7", "--lon", "-74.0", "--token", "bad"]
        )

    assert result.exit_code == 1


def test_serve_uses_settings_port():
    settings = Settings(_env_file=None, port=4321)
    with patch("api.__main__.get_settings", return_value=settings), patch(
        "api.__main__.uvicorn.run"
    ) as run:
        result = runner.invoke(api_app, ["serve"])

    assert result.exit_code == 0
    run.assert_called_once()
    assert run.call_args.args == ("api.main:app",)
    assert run.call_args.kwargs["port"] == 4321
