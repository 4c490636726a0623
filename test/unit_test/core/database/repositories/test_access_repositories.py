"""Unit tests for the role, permission and user repositories."""

import pytest

from ultrashots.core.database.entities import Role, User
from ultrashots.core.database.repositories import PermissionRepository, RoleRepository, UserRepository
from ultrashots.core.security import hash_password


class TestPermissionRepository:
    async def test_first_or_create_derives_group(self, session):
        permissions = PermissionRepository(session)

        permission = await permissions.first_or_create("customers.edit", "Edit customers")

        assert permission.id is not None
        assert permission.group == "customers"
        assert permission.description == "Edit customers"

    async def test_first_or_create_is_idempotent(self, session):
        permissions = PermissionRepository(session)

        first = await permissions.first_or_create("projects.view")
        second = await permissions.first_or_create("projects.view")

        assert first.id == second.id
        assert await permissions.count() == 1

    async def test_list_by_names(self, session):
        permissions = PermissionRepository(session)
        for name in ("b.view", "a.view", "c.view"):
            await permissions.first_or_create(name)

        found = await permissions.list_by_names(["c.view", "a.view", "missing.view"])

        assert [p.name for p in found] == ["a.view", "c.view"]
        assert await permissions.list_by_names([]) == []


class TestRoleRepository:
    async def test_first_or_create_defaults_display_name(self, session):
        role = await RoleRepository(session).first_or_create("super-admin")

        assert role.display_name == "Super Admin"

    async def test_sync_permissions_replaces_grants(self, session):
        permissions = PermissionRepository(session)
        for name in ("customers.view", "customers.edit", "projects.view"):
            await permissions.first_or_create(name)
        roles = RoleRepository(session)
        role = await roles.first_or_create("manager")

        await roles.sync_permissions(role, ["customers.view", "customers.edit"])
        granted = await roles.sync_permissions(role, ["projects.view", "customers.view", "customers.view"])

        assert granted == ["customers.view", "projects.view"]
        assert await roles.permission_names(role.id) == ["customers.view", "projects.view"]

    async def test_sync_permissions_rejects_unknown_names(self, session):
        roles = RoleRepository(session)
        role = await roles.first_or_create("viewer")

        with pytest.raises(ValueError, match="nope.view"):
            await roles.sync_permissions(role, ["nope.view"])

    async def test_list_orders_by_name(self, session):
        roles = RoleRepository(session)
        for name in ("viewer", "admin", "editor"):
            await roles.create(Role(name=name, display_name=name.title()))

        assert [r.name for r in await roles.list()] == ["admin", "editor", "viewer"]


class TestUserRepository:
    async def _user(self, session, email="ada@example.com") -> User:
        return await UserRepository(session).create(
            User(name="Ada", email=email, password_hash=hash_password("password"))
        )

    async def test_get_by_email_is_case_insensitive(self, session):
        user = await self._user(session)

        found = await UserRepository(session).get_by_email("  ADA@example.com ")

        assert found is not None
        assert found.id == user.id

    async def test_first_or_create(self, session):
        users = UserRepository(session)

        created = await users.first_or_create("grace@example.com", "Grace", hash_password("x"))
        again = await users.first_or_create("grace@example.com", "Someone Else", hash_password("y"))

        assert created.id == again.id
        assert again.name == "Grace"

    async def test_assign_roles_and_permissions(self, session, roles):
        user = await self._user(session)
        users = UserRepository(session)

        await users.assign_roles(user, ["viewer"])
        await users.assign_roles(user, ["author", "editor"])

        assert await users.role_names(user.id) == ["author", "editor"]
        permissions = await users.permission_names(user.id)
        assert "projects.publish" in permissions
        assert permissions == sorted(set(permissions))
        assert "users.delete" not in permissions

    async def test_assign_unknown_role(self, session, roles):
        user = await self._user(session)

        with pytest.raises(ValueError, match="wizard"):
            await UserRepository(session).assign_roles(user, ["wizard"])

    async def test_delete_removes_role_links(self, session, roles):
        user = await self._user(session)
        users = UserRepository(session)
        await users.assign_roles(user, ["admin"])

        assert await users.delete(user.id) is True
        assert await users.get_by_id(user.id) is None
        assert await users.role_names(user.id) == []
        assert await users.delete(user.id) is False

    async def test_update_touches_updated_at(self, session):
        user = await self._user(session)
        before = user.updated_at

        user.name = "Ada Lovelace"
        updated = await UserRepository(session).update(user)

        assert updated.name == "Ada Lovelace"
        assert updated.updated_at >= before
