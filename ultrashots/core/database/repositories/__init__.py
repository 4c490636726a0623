"""
Database repository layer using SQLModel.

This package contains all repository classes organized by business domain.
Each module provides type-safe async data access operations for its
corresponding SQLModel entity models.

Modules:
- base: BaseRepository and QueryBuilder utilities
- roles: Role and permission repositories
- users: User repository with role assignment
- customers: Customer repository
- projects: Project repository
- subscribers: Newsletter subscriber repository
"""

from .base import BaseRepository, QueryBuilder
from .customers import CustomerRepository
from .projects import ProjectRepository
from .roles import PermissionRepository, RoleRepository
from .subscribers import SubscriberRepository
from .users import UserRepository

__all__ = [
    "BaseRepository",
    "CustomerRepository",
    "PermissionRepository",
    "ProjectRepository",
    "QueryBuilder",
    "RoleRepository",
    "SubscriberRepository",
    "UserRepository",
]
