"""
Current User Endpoint.

Returns the user logged into the session, with roles and permissions.
"""

from fastapi import APIRouter

from ultrashots.server.schemas import AuthUser
from ultrashots.server.services.deps import CurrentUser

router = APIRouter()


@router.get(
    "/user",
    response_model=AuthUser,
    summary="Get Current User",
    description="Retrieve the authenticated user with role and permission names.",
    responses={401: {"description": "No user is logged in"}},
)
async def current_user(user: CurrentUser) -> AuthUser:
    return user
