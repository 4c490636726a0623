"""
Role and permission repositories.

This module provides data access operations for roles, permissions and the
role/permission association used for access control.
"""

from __future__ import annotations

from typing import Iterable, List, Optional

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from ..entities.roles import Permission, Role, RolePermission
from .base import BaseRepository


class PermissionRepository(BaseRepository[Permission]):
    """Repository for permission data access operations using SQLModel."""

    order_by = "name"

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Permission)

    async def get_by_name(self, name: str) -> Optional[Permission]:
        """Get a permission by its unique name."""
        result = await self.session.exec(select(Permission).where(Permission.name == name))
        return result.one_or_none()

    async def first_or_create(self, name: str, description: Optional[str] = None) -> Permission:
        """Return the permission named ``name``, creating it when missing.

        The permission group is the resource part of the name
        (``customers`` for ``customers.edit``).
        """
        permission = await self.get_by_name(name)
        if permission is not None:
            return permission
        group = name.split(".", 1)[0]
        return await self.create(Permission(name=name, group=group, description=description))

    async def list_by_names(self, names: Iterable[str]) -> List[Permission]:
        """List the permissions whose names are in ``names``."""
        wanted = list(names)
        if not wanted:
            return []
        result = await self.session.exec(
            select(Permission).where(Permission.name.in_(wanted)).order_by(Permission.name)
        )
        return list(result.all())


class RoleRepository(BaseRepository[Role]):
    """Repository for role data access operations using SQLModel."""

    order_by = "name"

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Role)

    async def get_by_name(self, name: str) -> Optional[Role]:
        """Get a role by its unique name."""
        result = await self.session.exec(select(Role).where(Role.name == name))
        return result.one_or_none()

    async def first_or_create(
        self, name: str, display_name: Optional[str] = None, description: Optional[str] = None
    ) -> Role:
        """Return the role named ``name``, creating it when missing."""
        role = await self.get_by_name(name)
        if role is not None:
            return role
        return await self.create(
            Role(
                name=name,
                display_name=display_name or name.replace("-", " ").title(),
                description=description,
            )
        )

    async def list_by_names(self, names: Iterable[str]) -> List[Role]:
        """List the roles whose names are in ``names``."""
        wanted = list(names)
        if not wanted:
            return []
        result = await self.session.exec(select(Role).where(Role.name.in_(wanted)).order_by(Role.name))
        return list(result.all())

    async def sync_permissions(self, role: Role, names: Iterable[str]) -> List[str]:
        """Replace the permissions granted to ``role`` with ``names``.

        Args:
            role: Persisted role
            names: Permission names to grant

        Returns:
            Sorted names of the granted permissions

        Raises:
            ValueError: If any of the names is not a known permission
        """
        wanted = sorted(set(names))
        permissions = await PermissionRepository(self.session).list_by_names(wanted)
        missing = set(wanted) - {p.name for p in permissions}
        if missing:
            raise ValueError(f"Unknown permissions: {', '.join(sorted(missing))}")

        existing = await self.session.exec(select(RolePermission).where(RolePermission.role_id == role.id))
        for link in existing.all():
            await self.session.delete(link)
        await self.session.flush()
        for permission in permissions:
            self.session.add(RolePermission(role_id=role.id, permission_id=permission.id))
        await self.session.commit()
        return wanted

    async def permission_names(self, role_id: int) -> List[str]:
        """Names of the permissions granted to a role."""
        stmt = (
            select(Permission.name)
            .join(RolePermission, RolePermission.permission_id == Permission.id)
            .where(RolePermission.role_id == role_id)
            .order_by(Permission.name)
        )
        result = await self.session.exec(stmt)
        return list(result.all())
