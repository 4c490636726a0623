"""
User entity models.

This module contains the database entity for application users and the
association of users to roles.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlalchemy import DateTime
from sqlmodel import Field

from ..base import Base, utc_now


class User(Base, table=True):
    """Entity for an application user.

    Passwords are never stored in clear text; ``password_hash`` holds the
    output of ``ultrashots.core.security.hash_password``.

    Table: users
    """

    __tablename__ = "users"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(max_length=255)
    email: str = Field(max_length=255, unique=True, index=True)
    password_hash: str = Field(max_length=255)
    is_active: bool = Field(default=True)

    email_verified_at: Optional[datetime] = Field(default=None, sa_type=DateTime(timezone=True))
    last_login_at: Optional[datetime] = Field(default=None, sa_type=DateTime(timezone=True))
    created_at: datetime = Field(default_factory=utc_now, sa_type=DateTime(timezone=True))
    updated_at: datetime = Field(
        default_factory=utc_now,
        sa_type=DateTime(timezone=True),
        sa_column_kwargs={"onupdate": utc_now},
    )

    def __repr__(self) -> str:
        return f"User(id={self.id}, email={self.email})"


class UserRole(Base, table=True):
    """Association between users and roles.

    Table: user_roles
    """

    __tablename__ = "user_roles"

    user_id: int = Field(foreign_key="users.id", primary_key=True)
    role_id: int = Field(foreign_key="roles.id", primary_key=True)
