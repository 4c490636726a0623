"""
Middleware modules for the Ultrashots server.

This package contains the request logging middleware and the middleware
groups of the web and api applications.
"""

from .csrf import CsrfMiddleware, csrf_token
from .groups import api_middleware, web_middleware
from .link_headers import PreloadLinkHeadersMiddleware
from .logfire_middleware import LogfireMiddleware
from .page_expired import PageExpiredMiddleware
from .pages import PageMiddleware

__all__ = [
    "CsrfMiddleware",
    "LogfireMiddleware",
    "PageExpiredMiddleware",
    "PageMiddleware",
    "PreloadLinkHeadersMiddleware",
    "api_middleware",
    "csrf_token",
    "web_middleware",
]
