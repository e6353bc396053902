"""Pick between the bundled mock races and a live provider search."""

from __future__ import annotations

import math
from typing import Sequence

import structlog

from providers.base import BaseProvider, UpstreamError
from providers.models import (
    DEFAULT_QUERY,
    DEFAULT_RADIUS_KM,
    Event,
    EventSource,
    SearchQuery,
)

logger = structlog.get_logger()


def parse_coordinate(raw: str | None) -> float | None:
    """Parse a coordinate query value; ``None`` when absent or unusable."""
    if raw is None:
        return None
    try:
        value = float(raw.strip())
    except ValueError:
        return None
    return value if math.isfinite(value) else None


def parse_radius(raw: str | None, default: float = DEFAULT_RADIUS_KM) -> float:
    value = parse_coordinate(raw)
    if value is None or value <= 0:
        return default
    return value


def mock_envelope(mock_events: Sequence[Event]) -> dict:
    return {
        "source": EventSource.MOCK.value,
        "events": [e.model_dump(mode="json") for e in mock_events],
    }


async def find_races(
    lat: str | None,
    lon: str | None,
    radius_km: str | None,
    q: str | None,
    *,
    provider: BaseProvider | None,
    mock_events: Sequence[Event],
) -> tuple[int, dict]:
    """Answer a race search.

    Returns ``(status_code, body)``. Mock data is served when either
    coordinate is unusable or no provider is configured; otherwise exactly
    one live search is made.
    """
    latitude = parse_coordinate(lat)
    longitude = parse_coordinate(lon)
    if latitude is None or longitude is None:
        logger.debug("races_mock_fallback", reason="coordinates")
        return 200, mock_envelope(mock_events)

    if provider is None:
        logger.debug("races_mock_fallback", reason="no_credential")
        return 200, mock_envelope(mock_events)

    query = SearchQuery(
        latitude=latitude,
        longitude=longitude,
        radius_km=parse_radius(radius_km),
        q=q or DEFAULT_QUERY,
    )

    try:
        result = await provider.search(query)
    except UpstreamError as exc:
        logger.warning(
            "eventbrite_error", status_code=exc.status_code, body=exc.body[:500]
        )
        return exc.status_code, {"error": "Eventbrite error", "details": exc.body}
    except Exception as exc:
        logger.exception("races_server_error", provider=provider.name)
        return 500, {"error": "server_error", "message": str(exc)}

    return 200, {
        "source": EventSource.EVENTBRITE.value,
        "events": [e.model_dump(mode="json") for e in result.events],
        "pagination": result.pagination,
    }
