"""Public portfolio pages and the dashboard."""

from fastapi import APIRouter, HTTPException, Request, status

from ultrashots.core.database.entities import SubscriberStatus
from ultrashots.core.database.repositories import CustomerRepository, ProjectRepository, SubscriberRepository
from ultrashots.server.pages import render_page
from ultrashots.server.schemas import AuthUser, ProjectRead
from ultrashots.server.services.deps import OptionalUser, SessionDep, require_permission

router = APIRouter(tags=["home"])

FEATURED_PROJECT_LIMIT = 6


@router.get("/", summary="Home Page")
async def home(request: Request, session: SessionDep, user: OptionalUser):
    """Landing page listing the featured published projects."""
    projects = await ProjectRepository(session).list_published(featured_only=True, limit=FEATURED_PROJECT_LIMIT)
    return render_page(
        request,
        "Home",
        {"featured_projects": [ProjectRead.model_validate(project) for project in projects]},
    )


@router.get("/portfolio/{slug}", summary="Portfolio Project")
async def portfolio_show(slug: str, request: Request, session: SessionDep, user: OptionalUser):
    """Public page of a published project; drafts are not found."""
    project = await ProjectRepository(session).get_by_slug(slug)
    if project is None or not project.is_published:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Project not found")

    customer = await CustomerRepository(session).get_by_id(project.customer_id)
    return render_page(
        request,
        "Portfolio/Show",
        {
            "project": ProjectRead.model_validate(project),
            "customer": {"name": customer.name, "company": customer.company} if customer else None,
        },
    )


@router.get("/dashboard", summary="Dashboard")
async def dashboard(request: Request, session: SessionDep, user: AuthUser = require_permission("dashboard.view")):
    """Back-office overview with record counts."""
    projects = ProjectRepository(session)
    stats = {
        "customers": await CustomerRepository(session).count(),
        "projects": await projects.count(),
        "published_projects": await projects.count({"is_published": True}),
        "projects_by_status": await projects.count_by_status(),
        "subscribers": await SubscriberRepository(session).count({"status": SubscriberStatus.SUBSCRIBED.value}),
    }
    return render_page(request, "Dashboard", {"stats": stats})
