"""
User repository interface and implementation.

This module provides data access operations for users, their role
assignments and the permissions those roles grant.
"""

from __future__ import annotations

from typing import Iterable, List, Optional

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from ..entities.roles import Permission, Role, RolePermission
from ..entities.users import User, UserRole
from .base import BaseRepository
from .roles import RoleRepository


class UserRepository(BaseRepository[User]):
    """Repository for user data access operations using SQLModel."""

    order_by = "name"

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, User)

    async def get_by_email(self, email: str) -> Optional[User]:
        """Get a user by e-mail address (case-insensitive)."""
        result = await self.session.exec(select(User).where(User.email == email.strip().lower()))
        return result.one_or_none()

    async def first_or_create(self, email: str, name: str, password_hash: str, **fields) -> User:
        """Return the user with ``email``, creating it when missing.

        An existing user is returned unchanged; its password is not reset.
        """
        user = await self.get_by_email(email)
        if user is not None:
            return user
        return await self.create(User(email=email.strip().lower(), name=name, password_hash=password_hash, **fields))

    async def assign_roles(self, user: User, role_names: Iterable[str]) -> List[str]:
        """Replace the roles of ``user`` with ``role_names``.

        Raises:
            ValueError: If any of the names is not a known role
        """
        wanted = sorted(set(role_names))
        roles = await RoleRepository(self.session).list_by_names(wanted)
        missing = set(wanted) - {r.name for r in roles}
        if missing:
            raise ValueError(f"Unknown roles: {', '.join(sorted(missing))}")

        existing = await self.session.exec(select(UserRole).where(UserRole.user_id == user.id))
        for link in existing.all():
            await self.session.delete(link)
        await self.session.flush()
        for role in roles:
            self.session.add(UserRole(user_id=user.id, role_id=role.id))
        await self.session.commit()
        return wanted

    async def role_names(self, user_id: int) -> List[str]:
        """Names of the roles assigned to a user."""
        stmt = (
            select(Role.name)
            .join(UserRole, UserRole.role_id == Role.id)
            .where(UserRole.user_id == user_id)
            .order_by(Role.name)
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def permission_names(self, user_id: int) -> List[str]:
        """Names of every permission granted to a user through its roles."""
        stmt = (
            select(Permission.name)
            .join(RolePermission, RolePermission.permission_id == Permission.id)
            .join(UserRole, UserRole.role_id == RolePermission.role_id)
            .where(UserRole.user_id == user_id)
            .distinct()
            .order_by(Permission.name)
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def delete(self, entity_id: int) -> bool:
        """Delete a user together with its role assignments."""
        user = await self.get_by_id(entity_id)
        if user is None:
            return False
        links = await self.session.exec(select(UserRole).where(UserRole.user_id == entity_id))
        for link in links.all():
            await self.session.delete(link)
        await self.session.flush()
        await self.session.delete(user)
        await self.session.commit()
        return True
