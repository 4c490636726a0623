"""Unit tests for the public portfolio pages and the dashboard."""

from datetime import datetime, timezone

import pytest_asyncio

PAGE = {"X-Inertia": "true"}


@pytest_asyncio.fixture
async def portfolio(create_customer, create_project):
    customer = await create_customer(company="Acme Studio")
    await create_project(
        customer,
        "acme-rebrand",
        status="completed",
        is_published=True,
        is_featured=True,
        completed_at=datetime(2026, 3, 1, tzinfo=timezone.utc),
    )
    await create_project(customer, "acme-website", status="completed", is_published=True)
    await create_project(customer, "acme-app", status="in_progress", is_featured=True)
    return customer


class TestHome:
    async def test_home_lists_featured_published_projects(self, client, portfolio):
        response = await client.get("/", headers=PAGE)

        assert response.status_code == 200
        page = response.json()
        assert page["component"] == "Home"
        assert [project["slug"] for project in page["props"]["featured_projects"]] == ["acme-rebrand"]

    async def test_home_is_public_html(self, client):
        response = await client.get("/")

        assert response.status_code == 200
        assert '<div id="app" data-page="' in response.text


class TestPortfolio:
    async def test_published_project(self, client, portfolio):
        response = await client.get("/portfolio/acme-website", headers=PAGE)

        assert response.status_code == 200
        page = response.json()
        assert page["component"] == "Portfolio/Show"
        assert page["props"]["project"]["slug"] == "acme-website"
        assert page["props"]["customer"] == {"name": "Jane Doe", "company": "Acme Studio"}

    async def test_draft_project_is_not_found(self, client, portfolio):
        response = await client.get("/portfolio/acme-app", headers=PAGE)

        assert response.status_code == 404
        assert response.json()["component"] == "NotFound"

    async def test_unknown_project_is_not_found(self, client):
        response = await client.get("/portfolio/nothing-here")

        assert response.status_code == 404
        assert response.headers["content-type"].startswith("text/html")


class TestNotFound:
    async def test_unknown_page(self, client):
        response = await client.get("/no/such/page", headers=PAGE)

        assert response.status_code == 404
        assert response.json()["component"] == "NotFound"
        assert response.json()["props"]["status"] == 404

    async def test_unknown_api_route(self, client):
        response = await client.get("/api/v1/nothing", headers=PAGE)

        assert response.status_code == 404
        assert response.json()["component"] == "NotFound"


class TestDashboard:
    async def test_guest_is_redirected_to_login(self, client):
        response = await client.get("/dashboard")

        assert response.status_code == 302
        assert response.headers["location"] == "/login"

    async def test_stats(self, client, login_as, portfolio):
        await login_as()

        response = await client.get("/dashboard", headers=PAGE)

        assert response.status_code == 200
        page = response.json()
        assert page["component"] == "Dashboard"
        assert page["props"]["stats"] == {
            "customers": 1,
            "projects": 3,
            "published_projects": 2,
            "projects_by_status": {"completed": 2, "in_progress": 1},
            "subscribers": 0,
        }

    async def test_user_without_permission_is_forbidden(self, client, login_as):
        await login_as("nobody@ultrashots.test", role_names=())

        response = await client.get("/dashboard")

        assert response.status_code == 403
        assert response.json() == {"detail": "This action is unauthorized."}
