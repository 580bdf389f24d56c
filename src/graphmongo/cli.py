#!/usr/bin/env python3
"""
Main CLI entry point for the graphmongo server.
"""

import asyncio

import click
import uvicorn

from graphmongo import __version__
from graphmongo.config import settings
from graphmongo.database import BootstrapOutcome, DatabaseBootstrapper, exit_on_failure
from graphmongo.logging import configure_logging, get_logger

logger = get_logger(__name__)

LOG_LEVELS = ["debug", "info", "warning", "error"]


@click.group()
@click.version_option(version=__version__, prog_name="graphmongo")
def cli() -> None:
    """graphmongo CLI - run the API server and check the database."""
    pass


@cli.command()
@click.option(
    "--host",
    default=None,
    help="Host to bind to (default: GRAPHMONGO_API_HOST or 0.0.0.0)",
)
@click.option(
    "--port",
    default=None,
    type=int,
    help="Port to bind to (default: GRAPHMONGO_API_PORT or 4000)",
)
@click.option(
    "--log-level",
    default=None,
    type=click.Choice(LOG_LEVELS),
    help="Log level (default: GRAPHMONGO_LOG_LEVEL or info)",
)
def serve(host: str | None, port: int | None, log_level: str | None) -> None:
    """Connect to MongoDB, then start the API server."""
    log_level = log_level or settings.log_level.lower()
    configure_logging(debug=settings.debug or log_level == "debug", level=log_level)

    host = host or settings.api_host
    port = port or settings.api_port

    async def do_serve() -> None:
        # The client is bound to this loop, so bootstrap and serve share it
        bootstrapper = DatabaseBootstrapper(settings)
        database = exit_on_failure(await bootstrapper.bootstrap())

        from graphmongo.api.app import create_app

        app = create_app(database, settings)
        logger.info("Starting graphmongo API server", host=host, port=port, log_level=log_level)

        config = uvicorn.Config(app, host=host, port=port, log_level=log_level, access_log=True)
        await uvicorn.Server(config).serve()

    try:
        asyncio.run(do_serve())
    except KeyboardInterrupt:
        logger.info("Server shutdown requested by user")


@cli.command("check-db")
@click.option(
    "--log-level",
    default=None,
    type=click.Choice(LOG_LEVELS),
    help="Log level (default: GRAPHMONGO_LOG_LEVEL or info)",
)
def check_db(log_level: str | None) -> None:
    """Connect to MongoDB once and report the result."""
    log_level = log_level or settings.log_level.lower()
    configure_logging(debug=settings.debug or log_level == "debug", level=log_level)

    async def do_check() -> BootstrapOutcome:
        outcome = await DatabaseBootstrapper(settings).bootstrap()
        if outcome.handle is not None:
            await outcome.handle.close()
        return outcome

    outcome = asyncio.run(do_check())
    database = exit_on_failure(outcome)
    click.echo(f"✓ Connected to MongoDB at {database.host}")
    click.echo(f"  Database: {database.name}")


def main():
    """Entry point for the CLI."""
    cli()


if __name__ == "__main__":
    cli()
