"""
Main Application Entry Point.

This module builds the FastAPI application. The root application serves
the health channel and mounts two applications with their own middleware
groups:

- ``/api/v1``: JSON endpoints (api group)
- ``/``: pages rendered through the page protocol (web group)
"""

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from sqlalchemy.ext.asyncio import async_sessionmaker

from ultrashots import __version__
from ultrashots.core.database import async_session_maker, create_all, engine as default_engine
from ultrashots.core.logging_config import get_logger, setup_logging
from ultrashots.core.monitoring import initialize_logfire

from .api import health
from .api.v1 import projects as api_projects
from .api.v1 import subscribers as api_subscribers
from .api.v1 import user as api_user
from .core import constant
from .core.config import Settings, settings as default_settings
from .exception_handlers import setup_exception_handlers
from .middleware import LogfireMiddleware, api_middleware, web_middleware
from .web import auth, customers, home, projects, subscribers, users

# Initialize logging
setup_logging()
logger = get_logger(__name__)


def _build_web(settings: Settings) -> FastAPI:
    web = FastAPI(
        title=f"{settings.app_name} Web",
        middleware=web_middleware(settings),
        openapi_url=None,
        docs_url=None,
        redoc_url=None,
    )
    for module in (auth, home, customers, projects, subscribers, users):
        web.include_router(module.router)
    return web


def _build_api(settings: Settings) -> FastAPI:
    api = FastAPI(
        title=f"{settings.app_name} API",
        version=__version__,
        middleware=api_middleware(settings),
        openapi_url="/openapi.json",
        docs_url="/docs",
        redoc_url="/redoc",
    )
    api.include_router(api_user.router, tags=["user"])
    api.include_router(api_projects.router, tags=["projects"])
    api.include_router(api_subscribers.router, tags=["subscribers"])
    return api


def create_app(settings: Optional[Settings] = None, session_maker: Optional[async_sessionmaker] = None) -> FastAPI:
    """
    Build the application.

    Args:
        settings: Settings to use instead of the environment-bound ones
        session_maker: Session factory to use instead of the global one;
            its bound engine serves the health check

    Returns:
        The root FastAPI application
    """
    settings = settings or default_settings
    session_maker = session_maker or async_session_maker
    engine = session_maker.kw.get("bind") or default_engine

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """
        Manage application lifespan events.

        Creates missing tables on startup and disposes the engine on shutdown.
        """
        try:
            logger.info(f"Starting up {settings.app_name} server...")
            await create_all(engine)
            logger.info("Database initialized successfully")
        except Exception as e:
            logger.error(f"Database initialization failed: {e}", exc_info=True)

        yield

        logger.info(f"Shutting down {settings.app_name} server...")
        await engine.dispose()

    app = FastAPI(
        title=constant.PROJECT_NAME,
        description="""
        Ultrashots Server

        Public portfolio, back-office pages for customers, projects and
        newsletter subscribers, and a small JSON API.
        """,
        version=__version__,
        openapi_url=None,
        docs_url=None,
        redoc_url=None,
        lifespan=lifespan,
    )
    app.add_middleware(LogfireMiddleware)
    app.include_router(health.router, tags=["health"])

    web = _build_web(settings)
    api = _build_api(settings)
    for application in (app, web, api):
        application.state.settings = settings
        application.state.session_maker = session_maker
        application.state.engine = engine
        setup_exception_handlers(application)

    app.mount(constant.API_V1_STR, api)
    app.mount("", web)

    initialize_logfire(app=app, engine=engine)
    return app


app = create_app()
