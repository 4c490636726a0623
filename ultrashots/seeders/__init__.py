"""
Database seeders.

Run all seeders:
    ultrashots db seed

Run a single seeder:
    ultrashots db seed --class CustomerSeeder

Seed data definitions live in ``data.py``; seeders look records up by their
natural key (name, e-mail, slug) so running them twice changes nothing.
"""

from .base import SeedConsole, Seeder
from .customers import CustomerSeeder
from .database import SEEDERS, DatabaseSeeder, seed_database
from .projects import ProjectSeeder
from .roles_and_permissions import RoleAndPermissionSeeder
from .subscribers import SubscriberSeeder
from .users import UserSeeder

__all__ = [
    "CustomerSeeder",
    "DatabaseSeeder",
    "ProjectSeeder",
    "RoleAndPermissionSeeder",
    "SEEDERS",
    "SeedConsole",
    "Seeder",
    "SubscriberSeeder",
    "UserSeeder",
    "seed_database",
]
