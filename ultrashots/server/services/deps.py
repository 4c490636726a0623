"""
Request Dependencies.

Database session, authenticated user and permission checks for the
route handlers. The session factory is read from the application state so
each mounted application shares the one configured by ``create_app``.
"""

from dataclasses import dataclass
from typing import Annotated, AsyncGenerator, Optional

from fastapi import Depends, HTTPException, Query, Request, status
from sqlmodel.ext.asyncio.session import AsyncSession

from ultrashots.core.database.repositories import UserRepository
from ultrashots.core.logging_config import get_logger
from ultrashots.server.core.constant import SESSION_USER_KEY
from ultrashots.server.exceptions import AuthenticationRequired
from ultrashots.server.redirects import has_session
from ultrashots.server.schemas import AuthUser, PageMeta

logger = get_logger(__name__)


async def get_db_session(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """
    Dependency generator for database sessions.

    Yields:
        AsyncSession: An asynchronous SQLModel session.
    """
    async with request.app.state.session_maker() as session:
        yield session


SessionDep = Annotated[AsyncSession, Depends(get_db_session)]


async def get_optional_user(request: Request, session: SessionDep) -> Optional[AuthUser]:
    """Load the user logged into the current session, if any.

    A session pointing at a deleted or deactivated user is logged out.
    The loaded user is also stored on ``request.state.user`` for the page props.
    """
    if not has_session(request):
        return None
    user_id = request.session.get(SESSION_USER_KEY)
    if user_id is None:
        return None

    users = UserRepository(session)
    user = await users.get_by_id(user_id)
    if user is None or not user.is_active:
        logger.info(f"Dropping session of unknown or inactive user {user_id}")
        request.session.pop(SESSION_USER_KEY, None)
        return None

    auth_user = AuthUser(
        id=user.id,
        name=user.name,
        email=user.email,
        roles=await users.role_names(user.id),
        permissions=await users.permission_names(user.id),
    )
    request.state.user = auth_user
    return auth_user


OptionalUser = Annotated[Optional[AuthUser], Depends(get_optional_user)]


async def get_current_user(user: OptionalUser) -> AuthUser:
    """Authenticated user; guests raise ``AuthenticationRequired``."""
    if user is None:
        raise AuthenticationRequired()
    return user


CurrentUser = Annotated[AuthUser, Depends(get_current_user)]


def require_permission(permission: str):
    """
    Dependency factory checking that the current user holds ``permission``.

    Usage::

        @router.get("/customers")
        async def index(user: AuthUser = require_permission("customers.view")): ...

    Raises:
        AuthenticationRequired: For guests
        HTTPException: 403 when the permission is missing
    """

    async def check_permission(user: CurrentUser) -> AuthUser:
        if not user.can(permission):
            logger.info(f"User {user.id} lacks permission {permission}")
            raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="This action is unauthorized.")
        return user

    return Depends(check_permission)


@dataclass
class Pagination:
    page: int
    per_page: int

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.per_page

    def meta(self, total: int) -> PageMeta:
        return PageMeta.build(self.page, self.per_page, total)


def get_pagination(
    page: int = Query(default=1, ge=1, description="Page number, starting at 1"),
    per_page: int = Query(default=15, ge=1, le=100, description="Records per page"),
) -> Pagination:
    return Pagination(page=page, per_page=per_page)


PaginationDep = Annotated[Pagination, Depends(get_pagination)]
