"""Unit tests for the login and logout pages."""

from ultrashots.core.database.repositories import UserRepository
from ultrashots.server.web.auth import FAILED_LOGIN_MESSAGE

PAGE = {"X-Inertia": "true"}


class TestLoginPage:
    async def test_guest_sees_login_form(self, client):
        response = await client.get("/login", headers=PAGE)

        assert response.status_code == 200
        page = response.json()
        assert page["component"] == "Auth/Login"
        assert page["props"]["can_reset_password"] is False
        assert page["props"]["auth"] == {"user": None}

    async def test_first_visit_is_html(self, client):
        response = await client.get("/login")

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/html")
        assert '<meta name="csrf-token" content="' in response.text

    async def test_logged_in_user_goes_home(self, client, login_as):
        await login_as()

        response = await client.get("/login")

        assert response.status_code == 302
        assert response.headers["location"] == "/dashboard"


class TestLogin:
    async def test_success_redirects_home(self, client, login, create_user):
        await create_user("ada@ultrashots.test", ("viewer",))

        response = await login("ada@ultrashots.test")

        assert response.status_code == 302
        assert response.headers["location"] == "/dashboard"
        page = (await client.get("/dashboard", headers=PAGE)).json()
        assert page["props"]["auth"]["user"]["email"] == "ada@ultrashots.test"

    async def test_email_is_case_insensitive(self, login, create_user):
        await create_user("ada@ultrashots.test")

        response = await login("  ADA@ultrashots.test ")

        assert response.headers["location"] == "/dashboard"

    async def test_wrong_password_redirects_back_with_error(self, client, login, create_user):
        await create_user("ada@ultrashots.test")

        response = await login("ada@ultrashots.test", "wrong")

        assert response.status_code == 302
        assert response.headers["location"] == "http://testserver/login"
        page = (await client.get("/login", headers=PAGE)).json()
        assert page["props"]["errors"] == {"email": FAILED_LOGIN_MESSAGE}
        assert page["props"]["auth"] == {"user": None}

    async def test_inactive_user_cannot_log_in(self, client, login, create_user):
        await create_user("old@ultrashots.test", is_active=False)

        await login("old@ultrashots.test")

        page = (await client.get("/login", headers=PAGE)).json()
        assert page["props"]["errors"] == {"email": FAILED_LOGIN_MESSAGE}

    async def test_unknown_email_fails_like_wrong_password(self, client, login, roles):
        await login("nobody@ultrashots.test")

        page = (await client.get("/login", headers=PAGE)).json()
        assert page["props"]["errors"] == {"email": FAILED_LOGIN_MESSAGE}

    async def test_malformed_email_is_a_validation_error(self, client, login):
        response = await login("not-an-email")

        assert response.status_code == 302
        page = (await client.get("/login", headers=PAGE)).json()
        assert set(page["props"]["errors"]) == {"email"}

    async def test_json_client_gets_422(self, client, csrf, create_user):
        await client.get("/login")

        response = await client.post(
            "/login",
            json={"email": "ada@ultrashots.test", "password": "wrong"},
            headers={"Accept": "application/json", **csrf()},
        )

        assert response.status_code == 422
        assert response.json()["errors"] == {"email": FAILED_LOGIN_MESSAGE}

    async def test_redirects_to_intended_url(self, client, login, create_user):
        await create_user("ada@ultrashots.test", ("viewer",))
        guest = await client.get("/customers?page=2")
        assert guest.headers["location"] == "/login"

        response = await login("ada@ultrashots.test")

        assert response.headers["location"] == "http://testserver/customers?page=2"

    async def test_session_is_regenerated(self, client, login, create_user):
        await create_user("ada@ultrashots.test")
        await client.get("/login")
        before = client.cookies.get("XSRF-TOKEN")

        await login("ada@ultrashots.test")

        assert client.cookies.get("XSRF-TOKEN") != before

    async def test_records_last_login(self, login, create_user, session_maker):
        user = await create_user("ada@ultrashots.test")

        await login("ada@ultrashots.test")

        async with session_maker() as session:
            assert (await UserRepository(session).get_by_id(user.id)).last_login_at is not None


class TestLogout:
    async def test_logout(self, client, csrf, login_as):
        await login_as()

        response = await client.post("/logout", headers=csrf())

        assert response.status_code == 302
        assert response.headers["location"] == "/"
        page = (await client.get("/", headers=PAGE)).json()
        assert page["props"]["auth"] == {"user": None}
        assert page["props"]["flash"]["notify"] == {"type": "success", "message": "You have been logged out."}

    async def test_guest_cannot_log_out(self, client, csrf):
        await client.get("/login")

        response = await client.post("/logout", headers=csrf())

        assert response.status_code == 302
        assert response.headers["location"] == "/login"

    async def test_logout_needs_csrf_token(self, client, login_as):
        await login_as()

        await client.post("/logout")

        page = (await client.get("/dashboard", headers=PAGE)).json()
        assert page["props"]["auth"]["user"] is not None
        assert page["props"]["flash"]["notify"]["type"] == "danger"
