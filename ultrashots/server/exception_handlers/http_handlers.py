"""
Handlers mapping HTTP and domain errors to page-aware responses.

- 404 renders the ``NotFound`` page.
- Guests are redirected to the login page, or get 401 when they expect JSON.
- Invalid form data redirects back with the errors flashed, or gets 422.
"""

from typing import Dict

from fastapi import Request
from fastapi.exception_handlers import http_exception_handler as default_http_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.responses import RedirectResponse, Response

from ultrashots.core.logging_config import get_logger
from ultrashots.server.core.constant import SESSION_INTENDED_URL_KEY
from ultrashots.server.exceptions import AuthenticationRequired, FormValidationError
from ultrashots.server.flash import flash
from ultrashots.server.pages import app_settings, render_page
from ultrashots.server.redirects import expects_json, has_session, redirect_back

logger = get_logger(__name__)

# Location prefixes FastAPI puts in front of validation error paths
_LOCATION_ROOTS = ("body", "query", "path", "header", "cookie")


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> Response:
    """Render 404 as the ``NotFound`` page, defer everything else to FastAPI."""
    if exc.status_code == 404:
        logger.debug(f"Not found: {request.method} {request.url.path}")
        return render_page(request, "NotFound", {"status": 404}, status_code=404)
    return await default_http_exception_handler(request, exc)


async def authentication_handler(request: Request, exc: AuthenticationRequired) -> Response:
    """Send guests to the login page, remembering where they wanted to go."""
    if expects_json(request):
        return JSONResponse(status_code=401, content={"detail": exc.message})

    if request.method == "GET" and has_session(request):
        request.session[SESSION_INTENDED_URL_KEY] = str(request.url)
    login_path = app_settings(request).login_path
    logger.debug(f"Redirecting guest from {request.url.path} to {login_path}")
    return RedirectResponse(login_path, status_code=302)


async def form_validation_handler(request: Request, exc: FormValidationError) -> Response:
    """Redirect back with the errors flashed, or answer 422 to JSON clients."""
    if expects_json(request) or not has_session(request):
        return JSONResponse(status_code=422, content={"detail": str(exc), "errors": exc.errors})

    flash(request, "errors", exc.errors)
    return redirect_back(request)


def _error_messages(exc: RequestValidationError) -> Dict[str, str]:
    errors: Dict[str, str] = {}
    for error in exc.errors():
        location = [str(part) for part in error.get("loc", ()) if part not in _LOCATION_ROOTS]
        field = ".".join(location) or "request"
        errors.setdefault(field, error.get("msg", "Invalid value."))
    return errors


async def request_validation_handler(request: Request, exc: RequestValidationError) -> Response:
    """Treat request validation failures like form validation failures."""
    return await form_validation_handler(request, FormValidationError(_error_messages(exc)))
