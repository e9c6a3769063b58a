#!/usr/bin/env python3
"""
Main CLI entry point for the projecthub backend server.
"""

import asyncio
import os
import sys

import click
import uvicorn

from projecthub import __version__
from projecthub.logging import configure_logging, get_logger

logger = get_logger(__name__)


@click.group()
@click.version_option(version=__version__, prog_name="projecthub")
def cli() -> None:
    """projecthub CLI - manage the API server and database."""
    pass


@cli.command()
@click.option("--host", default="0.0.0.0", help="Host to bind to (default: 0.0.0.0)")
@click.option("--port", default=8000, type=int, help="Port to bind to (default: 8000)")
@click.option("--reload", is_flag=True, default=False, help="Enable auto-reload for development")
@click.option(
    "--workers", default=1, type=int, help="Number of worker processes (default: 1)"
)
@click.option(
    "--log-level",
    default="info",
    type=click.Choice(["debug", "info", "warning", "error"]),
    help="Log level (default: info)",
)
def serve(host: str, port: int, reload: bool, workers: int, log_level: str) -> None:
    """Start the projecthub API server."""
    configure_logging(debug=(log_level == "debug"))

    logger.info(
        "Starting projecthub API server",
        host=host,
        port=port,
        reload=reload,
        workers=workers,
        log_level=log_level,
    )

    # Reloaded/forked workers import the app fresh, so pass settings via env
    if log_level == "debug":
        os.environ["PROJECTHUB_DEBUG"] = "true"
        os.environ["PROJECTHUB_LOG_LEVEL"] = "debug"
    else:
        os.environ.setdefault("PROJECTHUB_DEBUG", "false")
        os.environ.setdefault("PROJECTHUB_LOG_LEVEL", log_level)

    try:
        if reload or workers > 1:
            uvicorn.run(
                "projecthub.api.app:app",
                host=host,
                port=port,
                reload=reload,
                workers=(workers if not reload else 1),  # reload doesn't work with multiple workers
                log_level=log_level,
                access_log=True,
            )
        else:
            from projecthub.api.app import app

            uvicorn.run(
                app,
                host=host,
                port=port,
                log_level=log_level,
                access_log=True,
            )
    except KeyboardInterrupt:
        logger.info("Server shutdown requested by user")
    except Exception as e:
        logger.error("Server startup failed", error=str(e))
        sys.exit(1)


@cli.command("init-db")
def init_db() -> None:
    """Create the database tables."""
    from projecthub.database.connection import create_tables, dispose_database

    configure_logging()

    async def do_init():
        try:
            await create_tables()
        finally:
            await dispose_database()

    try:
        asyncio.run(do_init())
    except Exception as e:
        logger.error("Failed to create tables", error=str(e))
        click.echo(f"✗ Error creating tables: {e}", err=True)
        sys.exit(1)

    click.echo("✓ Database tables created")


@cli.command()
def seed() -> None:
    """Seed the database with sample clients and projects."""
    from projecthub.database.connection import dispose_database, get_async_session
    from projecthub.database.seed_data import seed_sample_data

    configure_logging()

    async def do_seed():
        try:
            async with get_async_session() as db:
                return await seed_sample_data(db)
        finally:
            await dispose_database()

    try:
        clients_created, projects_created = asyncio.run(do_seed())
    except Exception as e:
        logger.error("Failed to seed database", error=str(e))
        click.echo(f"✗ Error seeding database: {e}", err=True)
        sys.exit(1)

    click.echo(
        f"✓ Database seeded: {clients_created} client(s), {projects_created} project(s)"
    )


def main():
    """Entry point for the CLI."""
    cli()


if __name__ == "__main__":
    cli()
