"""Race Radar API."""

from contextlib import asynccontextmanager
from typing import AsyncIterator, Sequence

from fastapi import Depends, FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, JSONResponse

import providers.sources  # noqa: F401
from providers.base import BaseProvider, get_provider
from providers.models import Event

from .config import Settings, get_settings
from .fixtures import load_mock_events
from .gateway import find_races
from .log import configure_logging


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings()
    configure_logging(settings.log_level)
    app.state.mock_events = load_mock_events(settings.mock_events_path)
    yield


app = FastAPI(title="Race Radar", version="0.1.0", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def get_mock_events(request: Request) -> Sequence[Event]:
    return request.app.state.mock_events


async def get_race_provider(
    settings: Settings = Depends(get_settings),
) -> AsyncIterator[BaseProvider | None]:
    """Yield a live provider for this request, or None in mock mode."""
    if not settings.live:
        yield None
        return
    provider = get_provider("eventbrite")(
        settings.eventbrite_token, timeout=settings.http_timeout
    )
    try:
        yield provider
    finally:
        await provider.aclose()


@app.get("/health")
async def health(settings: Settings = Depends(get_settings)):
    return {"status": "ok", "mode": "eventbrite" if settings.live else "mock"}


@app.get("/api/races")
async def list_races(
    lat: str | None = None,
    lon: str | None = None,
    radius_km: str | None = None,
    q: str | None = None,
    provider: BaseProvider | None = Depends(get_race_provider),
    mock_events: Sequence[Event] = Depends(get_mock_events),
):
    """Search races near a point, or return the mock list."""
    status_code, body = await find_races(
        lat, lon, radius_km, q, provider=provider, mock_events=mock_events
    )
    return JSONResponse(body, status_code=status_code)


@app.get("/{full_path:path}", include_in_schema=False)
async def frontend(full_path: str, settings: Settings = Depends(get_settings)):
    """Serve a public asset if it exists, else the frontend entry file."""
    public_dir = settings.public_dir.resolve()
    if full_path:
        candidate = (public_dir / full_path).resolve()
        if candidate.is_relative_to(public_dir) and candidate.is_file():
            return FileResponse(candidate)

    index = public_dir / "index.html"
    if not index.is_file():
        raise HTTPException(status_code=404, detail="Frontend not found")
    return FileResponse(index)
