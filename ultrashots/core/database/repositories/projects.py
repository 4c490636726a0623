"""
Project repository interface and implementation.

This module provides data access operations for customer projects and the
published portfolio.
"""

from __future__ import annotations

from typing import Dict, List, Optional

from sqlalchemy import func
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from ..entities.projects import Project
from .base import BaseRepository, QueryBuilder


class ProjectRepository(BaseRepository[Project]):
    """Repository for project data access operations using SQLModel."""

    order_by = "title"

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Project)

    async def get_by_slug(self, slug: str) -> Optional[Project]:
        """Get a project by its unique slug."""
        result = await self.session.exec(select(Project).where(Project.slug == slug))
        return result.one_or_none()

    async def first_or_create(self, slug: str, customer_id: int, title: str, **fields) -> Project:
        """Return the project with ``slug``, creating it when missing."""
        project = await self.get_by_slug(slug)
        if project is not None:
            return project
        return await self.create(Project(slug=slug, customer_id=customer_id, title=title, **fields))

    async def list_for_customer(self, customer_id: int) -> List[Project]:
        """List every project of a customer, newest first."""
        stmt = select(Project).where(Project.customer_id == customer_id).order_by(Project.created_at.desc())
        result = await self.session.exec(stmt)
        return list(result.all())

    async def list_published(self, featured_only: bool = False, limit: Optional[int] = None) -> List[Project]:
        """List published projects for the public portfolio.

        Args:
            featured_only: Only include featured projects
            limit: Maximum records to return
        """
        stmt = select(Project).where(Project.is_published == True)  # noqa: E712
        if featured_only:
            stmt = stmt.where(Project.is_featured == True)  # noqa: E712
        stmt = stmt.order_by(Project.completed_at.desc(), Project.title)
        stmt = QueryBuilder.apply_pagination(stmt, limit, None)
        result = await self.session.exec(stmt)
        return list(result.all())

    async def count_by_status(self) -> Dict[str, int]:
        """Number of projects per status."""
        stmt = select(Project.status, func.count()).group_by(Project.status)
        result = await self.session.exec(stmt)
        return {status: int(total) for status, total in result.all()}
