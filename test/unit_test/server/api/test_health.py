"""
Unit tests for the health channel.

The health endpoints are served by the root application, outside the
web and api middleware groups.
"""

from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine

from ultrashots import __version__
from ultrashots.core.database import create_sessionmaker
from ultrashots.server.main import create_app


class TestHealthCheck:
    async def test_up_when_database_answers(self, client):
        response = await client.get("/up")

        assert response.status_code == 200
        assert response.json() == {"status": "up"}

    async def test_up_sets_no_session_or_csrf_cookie(self, client):
        response = await client.get("/up")

        assert "set-cookie" not in response.headers
        assert "X-Process-Time" in response.headers

    async def test_down_when_database_is_unreachable(self, settings, tmp_path):
        broken = create_async_engine(f"sqlite+aiosqlite:///{tmp_path}/missing/dir/ultrashots.db")
        app = create_app(settings=settings, session_maker=create_sessionmaker(broken))

        async with AsyncClient(transport=ASGITransport(app=app), base_url="http://testserver") as client:
            response = await client.get("/up")

        await broken.dispose()
        assert response.status_code == 503
        assert response.json() == {"status": "down"}


class TestVersion:
    async def test_version(self, client):
        response = await client.get("/version")

        assert response.status_code == 200
        assert response.json() == {"version": __version__, "api_version": "v1"}
