"""
Project management pages.

Publishing a project (``is_published``) additionally needs ``projects.publish``.
"""

from typing import Any, Dict, Optional

from fastapi import APIRouter, HTTPException, Query, Request, status

from ultrashots.core.database import utc_now
from ultrashots.core.database.entities import Project, ProjectStatus
from ultrashots.core.database.repositories import CustomerRepository, ProjectRepository
from ultrashots.core.logging_config import get_logger
from ultrashots.core.security import slugify
from ultrashots.server.exceptions import FormValidationError
from ultrashots.server.flash import notify
from ultrashots.server.pages import render_page
from ultrashots.server.redirects import redirect_to
from ultrashots.server.schemas import AuthUser, CustomerRead, ProjectCreate, ProjectRead, ProjectUpdate
from ultrashots.server.services.deps import PaginationDep, SessionDep, require_permission

logger = get_logger(__name__)

router = APIRouter(prefix="/projects", tags=["projects"])


async def _get_or_404(projects: ProjectRepository, project_id: int) -> Project:
    project = await projects.get_by_id(project_id)
    if project is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Project not found")
    return project


def _check_publish(user: AuthUser, fields: Dict[str, Any]) -> None:
    if fields.get("is_published") and not user.can("projects.publish"):
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="This action is unauthorized.")


async def _validate(session, fields: Dict[str, Any], project: Optional[Project] = None) -> None:
    """Check the customer exists and the slug is free."""
    errors: Dict[str, str] = {}
    if "customer_id" in fields and await CustomerRepository(session).get_by_id(fields["customer_id"]) is None:
        errors["customer_id"] = "The selected customer is invalid."
    if "slug" in fields:
        existing = await ProjectRepository(session).get_by_slug(fields["slug"])
        if existing is not None and (project is None or existing.id != project.id):
            errors["slug"] = "The slug has already been taken."
    if errors:
        raise FormValidationError(errors)


def _stamp_completion(fields: Dict[str, Any], project: Optional[Project] = None) -> None:
    if fields.get("status") == ProjectStatus.COMPLETED.value and not fields.get("completed_at"):
        if project is None or project.completed_at is None:
            fields["completed_at"] = utc_now()


@router.get("", summary="List Projects")
async def index(
    request: Request,
    session: SessionDep,
    pagination: PaginationDep,
    project_status: Optional[ProjectStatus] = Query(default=None, alias="status"),
    customer_id: Optional[int] = None,
    user: AuthUser = require_permission("projects.view"),
):
    """Paginated project list filtered by status and customer."""
    projects = ProjectRepository(session)
    filters = {"status": project_status.value if project_status else None, "customer_id": customer_id}
    records = await projects.list(limit=pagination.per_page, offset=pagination.offset, filters=filters)
    total = await projects.count(filters)
    customers = await CustomerRepository(session).list()
    return render_page(
        request,
        "Projects/Index",
        {
            "projects": [ProjectRead.model_validate(project) for project in records],
            "customers": [CustomerRead.model_validate(customer) for customer in customers],
            "meta": pagination.meta(total),
            "filters": {"status": project_status, "customer_id": customer_id},
        },
    )


@router.post("", summary="Create Project")
async def store(
    request: Request,
    payload: ProjectCreate,
    session: SessionDep,
    user: AuthUser = require_permission("projects.create"),
):
    fields = payload.model_dump()
    fields["slug"] = fields.get("slug") or slugify(payload.title)
    _check_publish(user, fields)
    await _validate(session, fields)
    _stamp_completion(fields)

    project = await ProjectRepository(session).create(Project(**fields))
    logger.info(f"User {user.id} created project {project.id}")
    notify(request, "success", f"Project {project.title} created.")
    return redirect_to(request, "/projects")


@router.put("/{project_id}", summary="Update Project")
async def update(
    project_id: int,
    request: Request,
    payload: ProjectUpdate,
    session: SessionDep,
    user: AuthUser = require_permission("projects.edit"),
):
    projects = ProjectRepository(session)
    project = await _get_or_404(projects, project_id)

    changes = payload.model_dump(exclude_unset=True)
    if "is_published" in changes and changes["is_published"] != project.is_published:
        if not user.can("projects.publish"):
            raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="This action is unauthorized.")
    await _validate(session, changes, project)
    _stamp_completion(changes, project)

    for field, value in changes.items():
        setattr(project, field, value)
    await projects.update(project)
    notify(request, "success", f"Project {project.title} updated.")
    return redirect_to(request, "/projects")


@router.delete("/{project_id}", summary="Delete Project")
async def destroy(
    project_id: int,
    request: Request,
    session: SessionDep,
    user: AuthUser = require_permission("projects.delete"),
):
    projects = ProjectRepository(session)
    project = await _get_or_404(projects, project_id)
    await projects.delete(project.id)
    logger.info(f"User {user.id} deleted project {project_id}")
    notify(request, "success", f"Project {project.title} deleted.")
    return redirect_to(request, "/projects")
