"""
CSRF token validation.

Each session carries a random token. It is handed to the browser in the
``XSRF-TOKEN`` cookie (and the ``csrf_token`` page prop) and must come back
in the ``X-CSRF-TOKEN`` or ``X-XSRF-TOKEN`` header of every unsafe request.
A missing or wrong token answers 419 Page Expired.
"""

from typing import Callable, Optional, Sequence

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import PlainTextResponse, Response
from starlette.types import ASGIApp

from ultrashots.core.logging_config import get_logger
from ultrashots.core.security import generate_token, tokens_match
from ultrashots.server.core.constant import CSRF_COOKIE, CSRF_HEADERS, PAGE_EXPIRED_STATUS, SESSION_CSRF_KEY

logger = get_logger(__name__)

SAFE_METHODS = ("GET", "HEAD", "OPTIONS", "TRACE")


def csrf_token(request: Request) -> str:
    """Token of the current session, created on first use."""
    token = request.session.get(SESSION_CSRF_KEY)
    if not token:
        token = generate_token()
        request.session[SESSION_CSRF_KEY] = token
    return token


def _submitted_token(request: Request) -> Optional[str]:
    for header in CSRF_HEADERS:
        value = request.headers.get(header)
        if value:
            return value
    return None


class CsrfMiddleware(BaseHTTPMiddleware):
    """Reject unsafe requests without the session's CSRF token.

    Must run inside the session middleware.
    """

    def __init__(
        self,
        app: ASGIApp,
        exempt: Sequence[str] = (),
        secure: bool = False,
        same_site: str = "lax",
    ) -> None:
        super().__init__(app)
        self.exempt = tuple(exempt)
        self.secure = secure
        self.same_site = same_site

    def is_exempt(self, path: str) -> bool:
        return any(path.startswith(prefix) for prefix in self.exempt)

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        token = csrf_token(request)

        if request.method not in SAFE_METHODS and not self.is_exempt(request.url.path):
            if not tokens_match(token, _submitted_token(request)):
                logger.warning(f"CSRF token mismatch: {request.method} {request.url.path}")
                return PlainTextResponse("Page Expired", status_code=PAGE_EXPIRED_STATUS)

        response = await call_next(request)

        # The handler may have regenerated the session (login, logout)
        response.set_cookie(
            CSRF_COOKIE,
            csrf_token(request),
            httponly=False,
            secure=self.secure,
            samesite=self.same_site,
        )
        return response
