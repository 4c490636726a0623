"""User list page."""

from fastapi import APIRouter, Request

from ultrashots.core.database.repositories import UserRepository
from ultrashots.server.pages import render_page
from ultrashots.server.schemas import AuthUser, UserRead
from ultrashots.server.services.deps import PaginationDep, SessionDep, require_permission

router = APIRouter(tags=["users"])


@router.get("/users", summary="List Users")
async def index(
    request: Request,
    session: SessionDep,
    pagination: PaginationDep,
    user: AuthUser = require_permission("users.view"),
):
    """Paginated users with their role names."""
    users = UserRepository(session)
    records = await users.list(limit=pagination.per_page, offset=pagination.offset)
    rows = [
        UserRead.model_validate(record).model_copy(update={"roles": await users.role_names(record.id)})
        for record in records
    ]
    return render_page(
        request,
        "Users/Index",
        {"users": rows, "meta": pagination.meta(await users.count())},
    )
