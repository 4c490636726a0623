"""Unit tests for page rendering and flash data."""

import html
import json
import re
from datetime import datetime, timezone

import pytest
import pytest_asyncio
from fastapi import FastAPI, Request
from httpx import ASGITransport, AsyncClient
from starlette.middleware import Middleware
from starlette.middleware.sessions import SessionMiddleware

from ultrashots.server.flash import flash, notify
from ultrashots.server.pages import render_page
from ultrashots.server.redirects import redirect_to

PAGE = {"X-Inertia": "true"}


@pytest.fixture
def page_app(settings) -> FastAPI:
    app = FastAPI(middleware=[Middleware(SessionMiddleware, secret_key="test-secret")])
    app.state.settings = settings

    @app.post("/save")
    async def save(request: Request):
        notify(request, "success", "Saved.")
        flash(request, "errors", {"name": "The name field is required."})
        return redirect_to(request, "/page")

    @app.get("/page")
    async def page(request: Request):
        return render_page(
            request,
            "Demo/Show",
            {"items": [1, 2], "updated_at": datetime(2026, 1, 2, tzinfo=timezone.utc), "note": "<b>hi</b>"},
        )

    @app.get("/missing")
    async def missing(request: Request):
        return render_page(request, "NotFound", {"status": 404}, status_code=404)

    return app


@pytest_asyncio.fixture
async def page_client(page_app):
    async with AsyncClient(transport=ASGITransport(app=page_app), base_url="http://testserver") as client:
        yield client


def data_page(body: str) -> dict:
    match = re.search(r'data-page="([^"]*)"', body)
    assert match, body
    return json.loads(html.unescape(match.group(1)))


class TestRenderPage:
    async def test_page_request_gets_json(self, page_client):
        response = await page_client.get("/page?tab=notes", headers=PAGE)

        assert response.status_code == 200
        assert response.headers["X-Inertia"] == "true"
        assert "X-Inertia" in [value.strip() for value in response.headers["Vary"].split(",")]
        page = response.json()
        assert page["component"] == "Demo/Show"
        assert page["url"] == "/page?tab=notes"
        assert page["version"] is None
        assert page["props"]["items"] == [1, 2]
        assert page["props"]["updated_at"] == "2026-01-02T00:00:00+00:00"

    async def test_shared_props(self, page_client):
        page = (await page_client.get("/page", headers=PAGE)).json()

        assert page["props"]["app_name"] == "Ultrashots"
        assert page["props"]["auth"] == {"user": None}
        assert page["props"]["flash"] == {}
        assert page["props"]["errors"] == {}
        assert page["props"]["csrf_token"] is None

    async def test_first_visit_gets_html_shell(self, page_client):
        response = await page_client.get("/page")

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/html")
        assert "X-Inertia" not in response.headers
        assert '<script type="module" src="/build/resources/js/app.ts"></script>' in response.text
        page = data_page(response.text)
        assert page["component"] == "Demo/Show"
        assert page["props"]["note"] == "<b>hi</b>"
        assert "<b>hi</b>" not in response.text

    async def test_status_code(self, page_client):
        response = await page_client.get("/missing", headers=PAGE)

        assert response.status_code == 404
        assert response.json()["component"] == "NotFound"

    async def test_partial_reload_only_sends_requested_props(self, page_client):
        headers = {**PAGE, "X-Inertia-Partial-Component": "Demo/Show", "X-Inertia-Partial-Data": "items, note"}

        page = (await page_client.get("/page", headers=headers)).json()

        assert set(page["props"]) == {"items", "note"}

    async def test_partial_reload_of_another_component_is_ignored(self, page_client):
        headers = {**PAGE, "X-Inertia-Partial-Component": "Other", "X-Inertia-Partial-Data": "items"}

        page = (await page_client.get("/page", headers=headers)).json()

        assert "app_name" in page["props"]
        assert "note" in page["props"]


class TestFlash:
    async def test_flash_is_shown_once(self, page_client):
        response = await page_client.post("/save")
        assert response.status_code == 302
        assert response.headers["location"] == "/page"

        page = (await page_client.get("/page", headers=PAGE)).json()
        assert page["props"]["flash"] == {"notify": {"type": "success", "message": "Saved."}}
        assert page["props"]["errors"] == {"name": "The name field is required."}

        again = (await page_client.get("/page", headers=PAGE)).json()
        assert again["props"]["flash"] == {}
        assert again["props"]["errors"] == {}
