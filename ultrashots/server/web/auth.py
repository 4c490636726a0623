"""
Authentication pages.

Login stores the user id in the signed session cookie. The session is
regenerated on login and logout.
"""

from fastapi import APIRouter, Request
from starlette.responses import RedirectResponse

from ultrashots.core.database import utc_now
from ultrashots.core.database.repositories import UserRepository
from ultrashots.core.logging_config import get_logger
from ultrashots.core.security import generate_token, verify_password
from ultrashots.server.core.constant import SESSION_CSRF_KEY, SESSION_INTENDED_URL_KEY, SESSION_USER_KEY
from ultrashots.server.exceptions import FormValidationError
from ultrashots.server.flash import notify
from ultrashots.server.pages import app_settings, render_page
from ultrashots.server.schemas import LoginRequest
from ultrashots.server.services.deps import CurrentUser, OptionalUser, SessionDep

logger = get_logger(__name__)

router = APIRouter(tags=["auth"])

FAILED_LOGIN_MESSAGE = "These credentials do not match our records."


def _regenerate_session(request: Request) -> None:
    request.session.clear()
    request.session[SESSION_CSRF_KEY] = generate_token()


@router.get("/login", summary="Login Page")
async def login_page(request: Request, user: OptionalUser):
    """Show the login form; logged-in users go straight home."""
    if user is not None:
        return RedirectResponse(app_settings(request).home_path, status_code=302)
    return render_page(request, "Auth/Login", {"can_reset_password": False})


@router.post("/login", summary="Log In")
async def login(request: Request, credentials: LoginRequest, session: SessionDep):
    """
    Log a user in.

    Redirects to the URL the guest originally asked for, or the home path.
    Unknown e-mails, wrong passwords and inactive accounts all fail the same way.
    """
    users = UserRepository(session)
    user = await users.get_by_email(credentials.email)
    if user is None or not user.is_active or not verify_password(credentials.password, user.password_hash):
        logger.info(f"Failed login attempt for {credentials.email}")
        raise FormValidationError({"email": FAILED_LOGIN_MESSAGE})

    intended = request.session.get(SESSION_INTENDED_URL_KEY)
    _regenerate_session(request)
    request.session[SESSION_USER_KEY] = user.id

    user.last_login_at = utc_now()
    await users.update(user)
    logger.info(f"User {user.id} logged in")

    return RedirectResponse(intended or app_settings(request).home_path, status_code=302)


@router.post("/logout", summary="Log Out")
async def logout(request: Request, user: CurrentUser):
    """Log the current user out and return to the home page."""
    _regenerate_session(request)
    notify(request, "success", "You have been logged out.")
    logger.info(f"User {user.id} logged out")
    return RedirectResponse("/", status_code=302)
