"""CLI entry-point: python -m api serve."""

from __future__ import annotations

import typer
import uvicorn

from .config import get_settings

app = typer.Typer(help="Race Radar – API server")


@app.callback()
def main() -> None:
    """Race Radar – API server."""


@app.command()
def serve(
    host: str | None = typer.Option(None, help="Bind address. Defaults to HOST."),
    port: int | None = typer.Option(None, help="Bind port. Defaults to PORT."),
    reload: bool = typer.Option(False, help="Reload on code changes."),
) -> None:
    """Run the API with uvicorn."""
    settings = get_settings()
    uvicorn.run(
        "api.main:app",
        host=host or settings.host,
        port=port or settings.port,
        reload=reload,
        log_level=settings.log_level,
    )


if __name__ == "__main__":
    app()
