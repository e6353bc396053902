"""Load the bundled mock race list served when no live provider is usable."""

import json
from pathlib import Path

import structlog

from providers.models import Event

logger = structlog.get_logger()


def load_mock_events(path: Path) -> tuple[Event, ...]:
    """Read and validate the fixture file.

    Returns an immutable tuple; a missing or malformed file raises.
    """
    with open(path, encoding="utf-8") as f:
        data = json.load(f)

    items = data if isinstance(data, list) else [data]
    events = tuple(Event(**raw) for raw in items)
    logger.info("mock_events_loaded", path=str(path), count=len(events))
    return events
