"""
Project entity models.

This module contains the database entity for customer projects, which are
also the items shown in the public portfolio once published.
"""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Optional

from sqlalchemy import DateTime
from sqlmodel import Field

from ..base import Base, utc_now


class ProjectStatus(str, Enum):
    """Delivery state of a project."""

    PLANNING = "planning"
    IN_PROGRESS = "in_progress"
    REVIEW = "review"
    COMPLETED = "completed"
    ON_HOLD = "on_hold"


class Project(Base, table=True):
    """Entity for a customer project.

    Table: projects
    """

    __tablename__ = "projects"

    id: Optional[int] = Field(default=None, primary_key=True)
    customer_id: int = Field(foreign_key="customers.id", index=True)

    title: str = Field(max_length=255)
    slug: str = Field(max_length=255, unique=True, index=True)
    summary: Optional[str] = Field(default=None, max_length=500)
    description: Optional[str] = Field(default=None)
    status: str = Field(default=ProjectStatus.PLANNING.value, max_length=32, index=True)
    budget: Optional[float] = Field(default=None, ge=0)

    is_featured: bool = Field(default=False)
    is_published: bool = Field(default=False, index=True)

    started_at: Optional[datetime] = Field(default=None, sa_type=DateTime(timezone=True))
    completed_at: Optional[datetime] = Field(default=None, sa_type=DateTime(timezone=True))
    created_at: datetime = Field(default_factory=utc_now, sa_type=DateTime(timezone=True))
    updated_at: datetime = Field(
        default_factory=utc_now,
        sa_type=DateTime(timezone=True),
        sa_column_kwargs={"onupdate": utc_now},
    )

    def __repr__(self) -> str:
        return f"Project(id={self.id}, slug={self.slug}, status={self.status})"
