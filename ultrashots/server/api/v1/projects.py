"""
Published Projects Endpoint.

Read-only access to the public portfolio.
"""

from typing import List, Optional

from fastapi import APIRouter, Query

from ultrashots.core.database.repositories import ProjectRepository
from ultrashots.server.schemas import ProjectRead
from ultrashots.server.services.deps import SessionDep

router = APIRouter()


@router.get(
    "/projects",
    response_model=List[ProjectRead],
    summary="List Published Projects",
    description="Retrieve the published portfolio projects, most recently completed first.",
)
async def list_projects(
    session: SessionDep,
    featured: bool = Query(default=False, description="Only return featured projects"),
    limit: Optional[int] = Query(default=None, ge=1, le=100, description="Maximum number of projects"),
) -> List[ProjectRead]:
    projects = await ProjectRepository(session).list_published(featured_only=featured, limit=limit)
    return [ProjectRead.model_validate(project) for project in projects]
