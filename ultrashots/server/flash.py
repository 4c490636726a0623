"""
Session flash data.

Flashed values live in the session until the next page render pulls them.
"""

from typing import Any, Dict

from fastapi import Request

from .core.constant import SESSION_FLASH_KEY
from .redirects import has_session


def flash(request: Request, key: str, value: Any) -> None:
    """Store ``value`` under ``key`` for the next page render."""
    data = dict(request.session.get(SESSION_FLASH_KEY) or {})
    data[key] = value
    request.session[SESSION_FLASH_KEY] = data


def notify(request: Request, type_: str, message: str) -> None:
    """Flash a user notification (``success``, ``info``, ``warning`` or ``danger``)."""
    flash(request, "notify", {"type": type_, "message": message})


def pull_flash(request: Request) -> Dict[str, Any]:
    """Remove and return every flashed value."""
    if not has_session(request):
        return {}
    return dict(request.session.pop(SESSION_FLASH_KEY, None) or {})
