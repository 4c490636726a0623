"""
Page expired responder.

Turns 419 responses (stale CSRF token or expired session) into a redirect
back to the previous page with a ``danger`` notification, so the user can
simply retry.
"""

from typing import Callable

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

from ultrashots.core.logging_config import get_logger
from ultrashots.server.core.constant import PAGE_EXPIRED_MESSAGE, PAGE_EXPIRED_STATUS
from ultrashots.server.flash import notify
from ultrashots.server.redirects import redirect_back

logger = get_logger(__name__)


class PageExpiredMiddleware(BaseHTTPMiddleware):
    """Redirect back with a flash message on 419 responses.

    Must run inside the session middleware and outside the CSRF check.
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        response = await call_next(request)
        if response.status_code != PAGE_EXPIRED_STATUS:
            return response

        logger.info(f"Page expired: {request.method} {request.url.path}")
        notify(request, "danger", PAGE_EXPIRED_MESSAGE)
        return redirect_back(request)
