"""
Ultrashots console.

Usage::

    ultrashots serve --reload
    ultrashots db init
    ultrashots db seed
    ultrashots db seed --class UserSeeder
    ultrashots db seed --fresh
"""

import asyncio
from typing import Optional

import click
import uvicorn

from ultrashots import __version__
from ultrashots.core.database import session as db
from ultrashots.core.database.utils import create_all, drop_all
from ultrashots.core.logging_config import get_logger, setup_logging
from ultrashots.seeders import SEEDERS, seed_database
from ultrashots.server.core.config import settings

logger = get_logger(__name__)


@click.group()
@click.version_option(__version__, prog_name="ultrashots")
def main() -> None:
    """Ultrashots portfolio and customer management."""
    setup_logging()


@main.command()
@click.option("--host", default=None, help="Interface to bind to.")
@click.option("--port", default=None, type=int, help="Port to listen on.")
@click.option("--reload", is_flag=True, help="Restart on code changes.")
def serve(host: Optional[str], port: Optional[int], reload: bool) -> None:
    """Run the web server."""
    uvicorn.run(
        "ultrashots.server.main:app",
        host=host or settings.server_host,
        port=port or settings.server_port,
        reload=reload,
        log_level=settings.log_level.lower(),
    )


@main.group(name="db")
def database() -> None:
    """Database commands."""


async def _init() -> None:
    try:
        await db.init_db()
    finally:
        await db.engine.dispose()


async def _seed(seeder: str, fresh: bool) -> None:
    try:
        if fresh:
            logger.info("Dropping all tables")
            await drop_all(db.engine)
        await create_all(db.engine)
        await seed_database(db.async_session_maker, seeder=seeder)
    finally:
        await db.engine.dispose()


@database.command(name="init")
def init() -> None:
    """Create the database tables."""
    asyncio.run(_init())
    click.echo("Database tables created.")


@database.command(name="seed")
@click.option(
    "--class",
    "seeder",
    default="DatabaseSeeder",
    show_default=True,
    type=click.Choice(sorted(SEEDERS)),
    help="Seeder to run.",
)
@click.option("--fresh", is_flag=True, help="Drop and recreate every table first.")
def seed(seeder: str, fresh: bool) -> None:
    """Seed the database."""
    asyncio.run(_seed(seeder, fresh))
