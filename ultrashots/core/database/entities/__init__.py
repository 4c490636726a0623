"""
Database entity models.

This package contains all database entity models organized by business domain
and table relationships.

Modules:
- roles: Roles, permissions and their association
- users: Application users and their role assignments
- customers: Customers owning projects
- projects: Customer projects and portfolio items
- subscribers: Newsletter subscribers
"""

from . import customers, projects, roles, subscribers, users
from .customers import Customer, CustomerStatus
from .projects import Project, ProjectStatus
from .roles import SUPER_ADMIN_ROLE, Permission, Role, RolePermission
from .subscribers import Subscriber, SubscriberStatus
from .users import User, UserRole

__all__ = [
    "Customer",
    "CustomerStatus",
    "Permission",
    "Project",
    "ProjectStatus",
    "Role",
    "RolePermission",
    "SUPER_ADMIN_ROLE",
    "Subscriber",
    "SubscriberStatus",
    "User",
    "UserRole",
    "customers",
    "projects",
    "roles",
    "subscribers",
    "users",
]
