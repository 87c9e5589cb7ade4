"""Command-line entry point for running and provisioning the API."""

from __future__ import annotations

import asyncio
import logging

import click
import uvicorn

from flight_api.config import settings
from flight_db.database import close_db, create_tables, init_db

logger = logging.getLogger(__name__)


async def _init_db(database_url: str) -> None:
    init_db(database_url, echo=settings.database_echo)
    try:
        await create_tables()
    finally:
        await close_db()


@click.group()
@click.option("--log-level", default=None, help="Override FLIGHT_API_LOG_LEVEL.")
def cli(log_level: str | None) -> None:
    """Flight API CLI."""
    logging.basicConfig(
        level=(log_level or settings.log_level).upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@cli.command()
@click.option("--host", default=None, help="Bind address.")
@click.option("--port", default=None, type=int, help="Bind port.")
@click.option("--reload", is_flag=True, help="Restart on code changes.")
def serve(host: str | None, port: int | None, reload: bool) -> None:
    """Run the API with uvicorn."""
    uvicorn.run(
        "flight_api.main:app",
        host=host or settings.host,
        port=port or settings.port,
        reload=reload,
        log_level=settings.log_level.lower(),
    )


@cli.command("init-db")
@click.option("--database-url", default=None, help="Override FLIGHT_API_DATABASE_URL.")
def init_db_command(database_url: str | None) -> None:
    """Create the flights table if it does not exist."""
    url = database_url or settings.database_url
    logger.info("Creating tables")
    asyncio.run(_init_db(url))
    click.echo("Database tables created.")


if __name__ == "__main__":
    cli()
