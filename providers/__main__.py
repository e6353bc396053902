"""CLI entry-point: python -m providers [list|search]."""

from __future__ import annotations

import asyncio
import json

import typer

import providers.sources  # noqa: F401
from api.log import configure_logging
from providers.base import UpstreamError, get_provider, get_providers
from providers.models import DEFAULT_QUERY, DEFAULT_RADIUS_KM, SearchQuery

app = typer.Typer(help="Race Radar – provider CLI")


@app.callback()
def main(
    log_level: str = typer.Option(
        "WARNING", "--log-level", envvar="LOG_LEVEL", help="Logged to stderr."
    ),
) -> None:
    """Race Radar – provider CLI."""
    configure_logging(log_level)


@app.command(name="list")
def list_providers() -> None:
    """List registered providers."""
    registry = get_providers()
    if not registry:
        typer.echo("No providers registered.")
        raise typer.Exit()
    for name in sorted(registry):
        typer.echo(f"  {name}")


@app.command()
def search(
    lat: float = typer.Option(..., "--lat", help="Latitude of the search center."),
    lon: float = typer.Option(..., "--lon", help="Longitude of the search center."),
    radius_km: float = typer.Option(DEFAULT_RADIUS_KM, "--radius-km"),
    q: str = typer.Option(DEFAULT_QUERY, "--q", help="Free-text query."),
    provider: str = typer.Option("eventbrite", "--provider", "-p"),
    token: str = typer.Option(
        ..., envvar="EVENTBRITE_TOKEN", help="Provider API token."
    ),
) -> None:
    """Run one live search and print the normalized events as JSON."""
    query = SearchQuery(latitude=lat, longitude=lon, radius_km=radius_km, q=q)

    async def _run():
        async with get_provider(provider)(token) as client:
            return await client.search(query)

    try:
        result = asyncio.run(_run())
    except UpstreamError as exc:
        typer.echo(f"{provider} error {exc.status_code}: {exc.body}", err=True)
        raise typer.Exit(1)

    typer.echo(json.dumps(result.model_dump(mode="json"), indent=2))


if __name__ == "__main__":
    app()
