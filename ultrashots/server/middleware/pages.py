"""
Page protocol middleware.

- Asks the client for a full reload (409 + ``X-Inertia-Location``) when its
  asset version is outdated.
- Turns 302 answers to PUT, PATCH and DELETE page requests into 303.
- Remembers the last page shown, used when redirecting back.
"""

from typing import Callable

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response
from starlette.types import ASGIApp

from ultrashots.core.logging_config import get_logger
from ultrashots.server.assets import asset_version
from ultrashots.server.core.config import AssetsConfig
from ultrashots.server.core.constant import PAGE_LOCATION_HEADER, PAGE_VERSION_HEADER, SESSION_PREVIOUS_URL_KEY
from ultrashots.server.redirects import SEE_OTHER_METHODS, has_session, is_page_request

logger = get_logger(__name__)


class PageMiddleware(BaseHTTPMiddleware):
    def __init__(self, app: ASGIApp, assets: AssetsConfig) -> None:
        super().__init__(app)
        self.assets = assets

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        page_request = is_page_request(request)

        if page_request and request.method == "GET":
            version = asset_version(self.assets)
            client_version = request.headers.get(PAGE_VERSION_HEADER)
            if version and client_version is not None and client_version != version:
                logger.debug(f"Asset version changed ({client_version} -> {version}), forcing reload")
                return Response(status_code=409, headers={PAGE_LOCATION_HEADER: str(request.url)})

        response = await call_next(request)

        if page_request and request.method in SEE_OTHER_METHODS and response.status_code == 302:
            response.status_code = 303

        if request.method == "GET" and response.status_code == 200 and has_session(request):
            content_type = response.headers.get("content-type", "")
            if page_request or content_type.startswith("text/html"):
                request.session[SESSION_PREVIOUS_URL_KEY] = str(request.url)

        return response
