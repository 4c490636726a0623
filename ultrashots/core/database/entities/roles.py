"""
Role and permission entity models.

This module contains the database entities for role-based access control.
A role groups named permissions; permissions are named
``<resource>.<action>`` (for example ``customers.edit``).
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlalchemy import DateTime
from sqlmodel import Field

from ..base import Base, utc_now

# Role that passes every permission check
SUPER_ADMIN_ROLE = "super-admin"


class Role(Base, table=True):
    """Entity for a named role.

    Table: roles
    """

    __tablename__ = "roles"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(max_length=64, unique=True, index=True)
    display_name: str = Field(max_length=128)
    description: Optional[str] = Field(default=None)

    created_at: datetime = Field(default_factory=utc_now, sa_type=DateTime(timezone=True))
    updated_at: datetime = Field(
        default_factory=utc_now,
        sa_type=DateTime(timezone=True),
        sa_column_kwargs={"onupdate": utc_now},
    )

    def __repr__(self) -> str:
        return f"Role(id={self.id}, name={self.name})"


class Permission(Base, table=True):
    """Entity for a single named permission.

    Table: permissions
    """

    __tablename__ = "permissions"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(max_length=128, unique=True, index=True)
    group: str = Field(max_length=64, description="Resource the permission applies to")
    description: Optional[str] = Field(default=None)

    created_at: datetime = Field(default_factory=utc_now, sa_type=DateTime(timezone=True))

    def __repr__(self) -> str:
        return f"Permission(id={self.id}, name={self.name})"


class RolePermission(Base, table=True):
    """Association between roles and permissions.

    Table: role_permissions
    """

    __tablename__ = "role_permissions"

    role_id: int = Field(foreign_key="roles.id", primary_key=True)
    permission_id: int = Field(foreign_key="permissions.id", primary_key=True)
