"""Eventbrite provider – race search around a point via the v3 REST API."""

from __future__ import annotations

import structlog

from providers.base import BaseProvider, UpstreamError, register
from providers.models import Event, EventSource, SearchQuery, SearchResult

logger = structlog.get_logger()

SEARCH_URL = "https://www.eventbriteapi.com/v3/events/search/"

_ADDRESS_KEYS = ("address_1", "address_2", "city", "region", "postal_code")


def _as_dict(value: object) -> dict:
    return value if isinstance(value, dict) else {}


def _scalar(value: object) -> str:
    if value is None or isinstance(value, (dict, list)):
        return ""
    return str(value)


def _text(value: object, key: str) -> str:
    """Read ``value[key]`` when *value* is an object, else *value* itself."""
    if isinstance(value, dict):
        value = value.get(key)
    return _scalar(value)


def _coordinate(value: object) -> float | None:
    if not value:
        return None
    try:
        return float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return None


def format_radius(radius_km: float) -> str:
    """Render a radius the way Eventbrite expects, e.g. ``10km``."""
    if float(radius_km).is_integer():
        return f"{int(radius_km)}km"
    return f"{radius_km}km"


def normalize_eventbrite_event(raw: dict) -> Event:
    """Map one Eventbrite event payload onto :class:`Event`.

    Every nested object may be missing or of the wrong type; missing text
    becomes ``""`` and missing coordinates become ``None``.
    """
    raw = _as_dict(raw)
    venue = _as_dict(raw.get("venue"))
    addr = _as_dict(venue.get("address"))

    address = ", ".join(
        str(addr[key]) for key in _ADDRESS_KEYS if addr.get(key)
    )

    return Event(
        id=_scalar(raw.get("id")),
        name=_text(raw.get("name"), "text"),
        start_time=_text(raw.get("start"), "local"),
        url=_scalar(raw.get("url")),
        venue_name=_scalar(venue.get("name")),
        address=address,
        latitude=_coordinate(venue.get("latitude")),
        longitude=_coordinate(venue.get("longitude")),
        source=EventSource.EVENTBRITE,
    )


@register
class EventbriteProvider(BaseProvider):
    name = "eventbrite"

    async def search(self, query: SearchQuery) -> SearchResult:
        params = {
            "q": query.q,
            "location.latitude": query.latitude,
            "location.longitude": query.longitude,
            "location.within": format_radius(query.radius_km),
            "expand": "venue",
            "sort_by": "date",
        }
        logger.info(
            "eventbrite_search",
            latitude=query.latitude,
            longitude=query.longitude,
            within=params["location.within"],
        )

        resp = await self.fetch(SEARCH_URL, params=params)
        if resp.is_error:
            raise UpstreamError(resp.status_code, resp.text)

        data = resp.json()
        items = data.get("events") or []

        events: list[Event] = []
        for item in items:
            event = normalize_eventbrite_event(item)
            # Zero is treated as a missing coordinate.
            if not event.latitude or not event.longitude:
                continue
            events.append(event)

        return SearchResult(events=events, pagination=data.get("pagination") or {})
