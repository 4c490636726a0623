"""
Seeder base classes.

A seeder populates the database with initial or sample records. Seeders
are run through ``Seeder.call`` which runs them strictly in the given order
and reports each step on the ``SeedConsole``.
"""

from __future__ import annotations

import time
from abc import ABC, abstractmethod
from typing import List, Optional, Sequence, Type

import click
from sqlmodel.ext.asyncio.session import AsyncSession

from ultrashots.core.logging_config import get_logger
from ultrashots.core.monitoring import log_seed_step
from ultrashots.server.core.config import Settings, settings as default_settings

logger = get_logger(__name__)


class SeedConsole:
    """Output sink for seeders.

    Every line is kept in ``lines``; the names of completed seeders are kept
    in ``history`` in the order they ran.
    """

    def __init__(self, echo: bool = True) -> None:
        self.echo = echo
        self.lines: List[str] = []
        self.history: List[str] = []

    def info(self, line: str = "") -> None:
        self.lines.append(line)
        logger.debug(line)
        if self.echo:
            click.echo(line)


class Seeder(ABC):
    """Base class of every seeder."""

    def __init__(
        self,
        session: AsyncSession,
        console: Optional[SeedConsole] = None,
        settings: Optional[Settings] = None,
    ) -> None:
        self.session = session
        self.console = console or SeedConsole()
        self.settings = settings or default_settings

    @abstractmethod
    async def run(self) -> None:
        """Seed the database."""

    async def call(self, seeders: Sequence[Type[Seeder]]) -> None:
        """Run the given seeders one after another.

        Exceptions are not caught: a failing seeder aborts the remaining ones.

        Args:
            seeders: Seeder classes, in the order they must run
        """
        for seeder_class in seeders:
            name = seeder_class.__name__
            self.console.info(f"Seeding: {name}")
            start_time = time.perf_counter()

            await seeder_class(self.session, self.console, self.settings).run()

            duration_ms = (time.perf_counter() - start_time) * 1000
            self.console.history.append(name)
            log_seed_step(name, duration_ms)
            self.console.info(f"Seeded:  {name} ({duration_ms:.2f} ms)")
