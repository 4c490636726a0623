"""
Request inspection and redirect helpers.

Redirects answering PUT, PATCH and DELETE requests use 303 so the browser
follows them with a GET; every other redirect uses 302.
"""

from urllib.parse import urlsplit

from fastapi import Request
from starlette.responses import RedirectResponse

from .core.constant import PAGE_HEADER, SESSION_PREVIOUS_URL_KEY

SEE_OTHER_METHODS = ("PUT", "PATCH", "DELETE")


def has_session(request: Request) -> bool:
    """Whether the session middleware ran for this request."""
    return "session" in request.scope


def is_page_request(request: Request) -> bool:
    """Whether the request was sent by the page client (``X-Inertia: true``)."""
    return request.headers.get(PAGE_HEADER, "").lower() == "true"


def expects_json(request: Request) -> bool:
    """Whether the client wants a JSON answer instead of a page or redirect.

    Page requests never expect JSON. Otherwise the first ``Accept`` entry
    decides, and plain XHR requests with no particular preference count as JSON.
    """
    if is_page_request(request):
        return False
    accept = request.headers.get("accept", "")
    first = accept.split(",")[0].split(";")[0].strip().lower()
    if first.endswith("/json") or first.endswith("+json"):
        return True
    is_ajax = request.headers.get("x-requested-with", "") == "XMLHttpRequest"
    return is_ajax and first in ("", "*/*")


def redirect_status(request: Request) -> int:
    return 303 if request.method in SEE_OTHER_METHODS else 302


def redirect_to(request: Request, url: str) -> RedirectResponse:
    """Redirect to ``url`` with the status matching the request method."""
    return RedirectResponse(url, status_code=redirect_status(request))


def previous_url(request: Request) -> str:
    """URL of the previous page.

    The ``Referer`` header is used when it points at this host, then the
    last page recorded in the session, then ``/``.
    """
    referer = request.headers.get("referer")
    if referer and urlsplit(referer).netloc in ("", request.url.netloc):
        return referer
    if has_session(request):
        return request.session.get(SESSION_PREVIOUS_URL_KEY) or "/"
    return "/"


def redirect_back(request: Request) -> RedirectResponse:
    """Redirect to the previous page."""
    return redirect_to(request, previous_url(request))
