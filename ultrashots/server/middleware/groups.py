"""
Middleware groups.

The web and api applications each get their own stack, listed outermost
first. Request logging wraps the root application and is not part of a group.
"""

from typing import List

from starlette.middleware import Middleware
from starlette.middleware.cors import CORSMiddleware
from starlette.middleware.sessions import SessionMiddleware

from ultrashots.server.core.config import Settings

from .csrf import CsrfMiddleware
from .link_headers import PreloadLinkHeadersMiddleware
from .page_expired import PageExpiredMiddleware
from .pages import PageMiddleware


def _session(settings: Settings) -> Middleware:
    return Middleware(
        SessionMiddleware,
        secret_key=settings.session.secret_key,
        session_cookie=settings.session.cookie_name,
        max_age=settings.session.lifetime_minutes * 60,
        same_site=settings.session.same_site,
        https_only=settings.session.https_only,
    )


def _csrf(settings: Settings) -> Middleware:
    return Middleware(
        CsrfMiddleware,
        exempt=settings.csrf_exempt,
        secure=settings.session.https_only,
        same_site=settings.session.same_site,
    )


def web_middleware(settings: Settings) -> List[Middleware]:
    """Session, page expiry, CSRF, page protocol and preload headers."""
    return [
        _session(settings),
        Middleware(PageExpiredMiddleware),
        _csrf(settings),
        Middleware(PageMiddleware, assets=settings.assets),
        Middleware(PreloadLinkHeadersMiddleware, assets=settings.assets),
    ]


def api_middleware(settings: Settings) -> List[Middleware]:
    """CORS, session, page expiry and CSRF."""
    return [
        Middleware(
            CORSMiddleware,
            allow_origins=settings.cors.origins,
            allow_credentials=settings.cors.allow_credentials,
            allow_methods=settings.cors.allow_methods,
            allow_headers=settings.cors.allow_headers,
        ),
        _session(settings),
        Middleware(PageExpiredMiddleware),
        _csrf(settings),
    ]
