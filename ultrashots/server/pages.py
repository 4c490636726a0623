"""
Page protocol rendering.

A page is described by a page object ``{"component", "props", "url",
"version"}``. The first visit gets an HTML shell with the page object in the
``data-page`` attribute of the root element; later navigations send
``X-Inertia: true`` and receive the page object as JSON.
"""

import json
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

from fastapi import Request
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from fastapi.templating import Jinja2Templates
from starlette.responses import Response

from .assets import asset_version, entry_assets
from .core.config import Settings, settings as default_settings
from .core.constant import (
    PAGE_HEADER,
    PAGE_PARTIAL_COMPONENT_HEADER,
    PAGE_PARTIAL_DATA_HEADER,
    SESSION_CSRF_KEY,
)
from .flash import pull_flash
from .redirects import has_session, is_page_request

templates = Jinja2Templates(directory=str(Path(__file__).parent / "templates"))


def app_settings(request: Request) -> Settings:
    """Settings of the application serving ``request``."""
    return getattr(request.app.state, "settings", None) or default_settings


def shared_props(request: Request) -> Dict[str, Any]:
    """Props every page receives.

    Reading them consumes the flashed session data.
    """
    flashed = pull_flash(request)
    errors = flashed.pop("errors", {})
    user = getattr(request.state, "user", None)
    return {
        "app_name": app_settings(request).app_name,
        "auth": {"user": user.model_dump() if user is not None else None},
        "flash": flashed,
        "errors": errors,
        "csrf_token": request.session.get(SESSION_CSRF_KEY) if has_session(request) else None,
    }


def _partial_keys(request: Request, component: str) -> Optional[set]:
    if request.headers.get(PAGE_PARTIAL_COMPONENT_HEADER) != component:
        return None
    data = request.headers.get(PAGE_PARTIAL_DATA_HEADER, "")
    keys = {key.strip() for key in data.split(",") if key.strip()}
    return keys or None


def build_page(request: Request, component: str, props: Optional[Mapping[str, Any]] = None) -> Dict[str, Any]:
    """Build the page object for ``component``."""
    page_props = {**shared_props(request), **(props or {})}
    only = _partial_keys(request, component)
    if only is not None:
        page_props = {key: value for key, value in page_props.items() if key in only}

    url = request.url.path
    if request.url.query:
        url = f"{url}?{request.url.query}"

    return {
        "component": component,
        "props": jsonable_encoder(page_props),
        "url": url,
        "version": asset_version(app_settings(request).assets),
    }


def render_page(
    request: Request,
    component: str,
    props: Optional[Mapping[str, Any]] = None,
    status_code: int = 200,
) -> Response:
    """Render a page component.

    Args:
        request: Current request
        component: Name of the front-end page component (``"Customers/Index"``)
        props: Props of the component; they override shared props of the same name
        status_code: HTTP status of the response

    Returns:
        JSON page object for page requests, the HTML shell otherwise
    """
    page = build_page(request, component, props)

    if is_page_request(request):
        return JSONResponse(page, status_code=status_code, headers={PAGE_HEADER: "true", "Vary": PAGE_HEADER})

    config = app_settings(request)
    scripts, styles = entry_assets(config.assets)
    return templates.TemplateResponse(
        request,
        "app.html",
        {
            "title": config.app_name,
            "page_json": json.dumps(page),
            "csrf_token": page["props"].get("csrf_token"),
            "scripts": scripts,
            "styles": styles,
        },
        status_code=status_code,
        headers={"Vary": PAGE_HEADER},
    )
