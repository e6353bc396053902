"""Shared Pydantic models for Race Radar."""

from enum import Enum

from pydantic import BaseModel, Field

DEFAULT_QUERY = "5k OR 10k OR half marathon OR marathon OR fun run OR race"
DEFAULT_RADIUS_KM = 10.0


class EventSource(str, Enum):
    MOCK = "mock"
    EVENTBRITE = "eventbrite"


class Event(BaseModel):
    """Provider-agnostic race record served to the frontend."""

    id: str
    name: str
    start_time: str
    url: str
    venue_name: str = ""
    address: str = ""
    latitude: float | None = None
    longitude: float | None = None
    source: EventSource


class SearchQuery(BaseModel):
    """Geographic search sent to a live provider."""

    latitude: float
    longitude: float
    radius_km: float = DEFAULT_RADIUS_KM
    q: str = DEFAULT_QUERY


class SearchResult(BaseModel):
    events: list[Event] = Field(default_factory=list)
    pagination: dict = Field(default_factory=dict)
