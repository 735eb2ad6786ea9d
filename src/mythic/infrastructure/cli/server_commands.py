"""CLI commands for running the API and preparing the database."""

from __future__ import annotations

import click
import uvicorn

from mythic.infrastructure.bootstrap import storage_context
from mythic.infrastructure.config import get_settings


@click.command("init")
def db_init() -> None:
    """Create missing tables."""
    storage_context().init_db()
    click.echo("Database initialised.")


@click.command("serve")
@click.option("--host", default=None, help="Bind address (default: HOST setting).")
@click.option("--port", default=None, type=int, help="Port (default: PORT setting).")
@click.option("--reload", is_flag=True, help="Restart on code changes.")
def serve(host: str | None, port: int | None, reload: bool) -> None:
    """Run the HTTP API."""
    settings = get_settings()
    uvicorn.run(
        "mythic.infrastructure.api.app:create_app",
        factory=True,
        host=host or settings.HOST,
        port=port or settings.PORT,
        reload=reload,
        log_config=None,
    )
