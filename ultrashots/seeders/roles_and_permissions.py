"""Seeds the roles and the permissions each role grants."""

from ultrashots.core.database.repositories import PermissionRepository, RoleRepository

from .base import Seeder
from .data import PERMISSIONS, ROLE_PERMISSIONS, ROLES


class RoleAndPermissionSeeder(Seeder):
    """Creates every permission and role, then syncs the role grants."""

    async def run(self) -> None:
        permissions = PermissionRepository(self.session)
        for name in PERMISSIONS:
            await permissions.first_or_create(name)

        roles = RoleRepository(self.session)
        for definition in ROLES:
            role = await roles.first_or_create(**definition)
            await roles.sync_permissions(role, ROLE_PERMISSIONS[role.name])

        self.console.info(f"  {len(ROLES)} roles, {len(PERMISSIONS)} permissions")
