"""
Database seeding orchestration.

``DatabaseSeeder`` runs every seeder in foreign-key dependency order and
prints a summary of what a freshly seeded database contains.
"""

from __future__ import annotations

from typing import Dict, List, Optional, Tuple, Type

from sqlalchemy.ext.asyncio import async_sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession

from ultrashots.core.logging_config import get_logger
from ultrashots.server.core.config import Settings

from .base import SeedConsole, Seeder
from .customers import CustomerSeeder
from .projects import ProjectSeeder
from .roles_and_permissions import RoleAndPermissionSeeder
from .subscribers import SubscriberSeeder
from .users import UserSeeder

logger = get_logger(__name__)


class DatabaseSeeder(Seeder):
    """Seeds the application's database."""

    # Users need roles, projects need customers
    ORDER: Tuple[Type[Seeder], ...] = (
        RoleAndPermissionSeeder,
        UserSeeder,
        CustomerSeeder,
        ProjectSeeder,
        SubscriberSeeder,
    )

    async def run(self) -> None:
        self.console.info("🌱 Starting database seeding...")

        await self.call(self.ORDER)

        for line in self.summary_lines():
            self.console.info(line)

    def summary_lines(self) -> List[str]:
        """The fixed summary printed once seeding completes."""
        seed = self.settings.seed
        return [
            "",
            "🎉 Database seeding completed successfully!",
            "",
            "📊 Summary:",
            "- Roles & Permissions: 6 roles, 30+ permissions",
            "- Users: 11 users with various roles",
            "- Customers: 15+ customers with projects",
            "- Projects: 50+ projects with different statuses",
            "- Subscribers: 70 newsletter subscribers",
            "",
            "🔑 Login credentials:",
            f"Super Admin: {seed.admin_email} / {seed.admin_password}",
            f"Manager: manager@example.com / {seed.default_password}",
            f"Editor: editor@example.com / {seed.default_password}",
            f"Viewer: viewer@example.com / {seed.default_password}",
            "",
            "🚀 Your portfolio is ready to showcase!",
        ]


SEEDERS: Dict[str, Type[Seeder]] = {
    seeder.__name__: seeder for seeder in (DatabaseSeeder, *DatabaseSeeder.ORDER)
}


async def seed_database(
    session_maker: async_sessionmaker[AsyncSession],
    seeder: str = "DatabaseSeeder",
    console: Optional[SeedConsole] = None,
    settings: Optional[Settings] = None,
) -> SeedConsole:
    """Run a seeder, ``DatabaseSeeder`` by default, in a fresh session.

    Args:
        session_maker: Factory for the session the seeders share
        seeder: Class name of the seeder to run
        console: Output sink; a new echoing console by default
        settings: Settings override for the seed credentials

    Returns:
        The console holding the printed lines and the seeder history

    Raises:
        KeyError: If ``seeder`` is not a known seeder name
    """
    if seeder not in SEEDERS:
        raise KeyError(f"Unknown seeder '{seeder}'. Available: {', '.join(SEEDERS)}")

    console = console or SeedConsole()
    logger.info(f"Running seeder {seeder}")
    async with session_maker() as session:
        seeder_class = SEEDERS[seeder]
        if seeder_class is DatabaseSeeder:
            await seeder_class(session, console, settings).run()
        else:
            # A single seeder reports like a step of the orchestrator
            await DatabaseSeeder(session, console, settings).call([seeder_class])
    return console
