"""Shared fixtures: in-memory database, application and HTTP client."""

from typing import AsyncGenerator, Iterable, Optional

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlmodel.ext.asyncio.session import AsyncSession
from sqlmodel.pool import StaticPool

from ultrashots.core.database import create_all, create_sessionmaker
from ultrashots.core.database.entities import Customer, Project, User
from ultrashots.core.database.repositories import CustomerRepository, ProjectRepository, UserRepository
from ultrashots.core.security import hash_password
from ultrashots.seeders import RoleAndPermissionSeeder, SeedConsole
from ultrashots.server.core.config import AssetsConfig, SeedConfig, SessionConfig, Settings

# Use in-memory SQLite for testing
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest_asyncio.fixture
async def engine():
    """A fresh in-memory database with every table created."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    await create_all(engine)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_maker(engine):
    return create_sessionmaker(engine)


@pytest_asyncio.fixture(name="session")
async def session_fixture(session_maker) -> AsyncGenerator[AsyncSession, None]:
    async with session_maker() as session:
        yield session


@pytest.fixture
def settings(tmp_path) -> Settings:
    """Settings isolated from the environment and any built front-end."""
    return Settings(
        _env_file=None,
        app_name="Ultrashots",
        session=SessionConfig(secret_key="test-secret"),
        seed=SeedConfig(admin_email="root@ultrashots.test", admin_password="secret", default_password="password"),
        assets=AssetsConfig(manifest_path=str(tmp_path / "manifest.json")),
    )


@pytest.fixture
def app(settings, session_maker):
    from ultrashots.server.main import create_app

    return create_app(settings=settings, session_maker=session_maker)


@pytest_asyncio.fixture(name="client")
async def client_fixture(app) -> AsyncGenerator[AsyncClient, None]:
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://testserver") as client:
        yield client


@pytest_asyncio.fixture
async def roles(session):
    """Seed every role and permission."""
    await RoleAndPermissionSeeder(session, SeedConsole(echo=False)).run()


@pytest.fixture
def create_user(session, roles):
    """Factory creating a user with the given roles."""

    async def _create(
        email: str, role_names: Iterable[str] = (), password: str = "password", is_active: bool = True
    ) -> User:
        users = UserRepository(session)
        user = await users.create(
            User(
                name=email.split("@")[0].title(),
                email=email,
                password_hash=hash_password(password),
                is_active=is_active,
            )
        )
        await users.assign_roles(user, role_names)
        return user

    return _create


@pytest.fixture
def create_customer(session):
    async def _create(email: str = "jane@acme.example", name: str = "Jane Doe", **fields) -> Customer:
        return await CustomerRepository(session).create(Customer(email=email, name=name, **fields))

    return _create


@pytest.fixture
def create_project(session):
    async def _create(customer: Customer, slug: str, title: Optional[str] = None, **fields) -> Project:
        project = Project(customer_id=customer.id, slug=slug, title=title or slug.replace("-", " ").title(), **fields)
        return await ProjectRepository(session).create(project)

    return _create


@pytest.fixture
def csrf(client):
    """Headers echoing the CSRF cookie, as the front-end's HTTP client does."""

    def _headers() -> dict:
        return {"X-XSRF-TOKEN": client.cookies.get("XSRF-TOKEN", "")}

    return _headers


@pytest.fixture
def login(client, csrf):
    """Log in through the login page."""

    async def _login(email: str, password: str = "password"):
        await client.get("/login")
        return await client.post("/login", json={"email": email, "password": password}, headers=csrf())

    return _login


@pytest.fixture
def login_as(login, create_user):
    """Create a user with the given roles and log the client in as that user."""

    async def _login(email: str = "staff@ultrashots.test", role_names: Iterable[str] = ("viewer",)) -> User:
        user = await create_user(email, role_names)
        response = await login(email)
        assert response.status_code == 302
        return user

    return _login
