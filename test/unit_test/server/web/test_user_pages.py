"""Unit tests for the users page."""

PAGE = {"X-Inertia": "true"}


class TestUsersIndex:
    async def test_lists_users_with_roles(self, client, login_as, create_user):
        await create_user("eddie@ultrashots.test", ("editor", "author"))
        await login_as("maria@ultrashots.test", ("manager",))

        response = await client.get("/users", headers=PAGE)

        assert response.status_code == 200
        page = response.json()
        assert page["component"] == "Users/Index"
        rows = {row["email"]: row for row in page["props"]["users"]}
        assert sorted(rows["eddie@ultrashots.test"]["roles"]) == ["author", "editor"]
        assert rows["maria@ultrashots.test"]["roles"] == ["manager"]
        assert rows["maria@ultrashots.test"]["last_login_at"] is not None
        assert "password_hash" not in rows["maria@ultrashots.test"]
        assert page["props"]["meta"]["total"] == 2

    async def test_viewer_is_forbidden(self, client, login_as):
        await login_as()

        response = await client.get("/users")

        assert response.status_code == 403

    async def test_super_admin_sees_users(self, client, login_as):
        await login_as("root@ultrashots.test", ("super-admin",))

        response = await client.get("/users", params={"per_page": 1}, headers=PAGE)

        assert response.status_code == 200
        assert response.json()["props"]["meta"] == {"page": 1, "per_page": 1, "total": 1, "last_page": 1}
