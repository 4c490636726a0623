"""Add ``Link`` preload headers for the front-end entry assets to HTML responses."""

from typing import Callable

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response
from starlette.types import ASGIApp

from ultrashots.server.assets import preload_links
from ultrashots.server.core.config import AssetsConfig


class PreloadLinkHeadersMiddleware(BaseHTTPMiddleware):
    def __init__(self, app: ASGIApp, assets: AssetsConfig) -> None:
        super().__init__(app)
        self.assets = assets

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        response = await call_next(request)
        if not response.headers.get("content-type", "").startswith("text/html"):
            return response

        links = preload_links(self.assets)
        if links:
            existing = response.headers.get("link")
            response.headers["Link"] = ", ".join([existing, *links] if existing else links)
        return response
