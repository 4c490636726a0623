"""
Health Check Endpoints.

This module provides basic system status endpoints (health, version)
used for monitoring and deployment verification. They are served by the
root application, outside the web and api middleware groups.
"""

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from ultrashots import __version__
from ultrashots.core.logging_config import get_logger
from ultrashots.server.core.constant import HEALTH_PATH

logger = get_logger(__name__)

router = APIRouter()


@router.get(
    HEALTH_PATH,
    summary="Health Check",
    description="Check that the server is running and the database answers.",
    response_description="Status object.",
    responses={503: {"description": "The database is unreachable"}},
)
async def health_check(request: Request):
    """
    Health check endpoint.

    Runs ``SELECT 1`` against the database and reports ``up`` or ``down``.
    """
    try:
        async with request.app.state.engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
    except (SQLAlchemyError, OSError) as e:
        logger.error(f"Health check failed: {e}")
        return JSONResponse(status_code=503, content={"status": "down"})
    return {"status": "up"}


@router.get(
    "/version",
    summary="Get Version",
    description="Retrieve version information for the server.",
    response_description="Version object.",
)
async def version():
    """Return the application version and the API version."""
    return {"version": __version__, "api_version": "v1"}
