"""
Customer entity models.

This module contains the database entity for customers, the owners of
portfolio projects.
"""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Optional

from sqlalchemy import DateTime
from sqlmodel import Field

from ..base import Base, utc_now


class CustomerStatus(str, Enum):
    """Lifecycle state of a customer."""

    LEAD = "lead"
    ACTIVE = "active"
    INACTIVE = "inactive"


class Customer(Base, table=True):
    """Entity for a customer.

    Table: customers
    """

    __tablename__ = "customers"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(max_length=255)
    email: str = Field(max_length=255, unique=True, index=True)
    company: Optional[str] = Field(default=None, max_length=255)
    phone: Optional[str] = Field(default=None, max_length=64)
    website: Optional[str] = Field(default=None, max_length=255)
    status: str = Field(default=CustomerStatus.ACTIVE.value, max_length=32, index=True)
    notes: Optional[str] = Field(default=None)

    created_at: datetime = Field(default_factory=utc_now, sa_type=DateTime(timezone=True))
    updated_at: datetime = Field(
        default_factory=utc_now,
        sa_type=DateTime(timezone=True),
        sa_column_kwargs={"onupdate": utc_now},
    )

    def __repr__(self) -> str:
        return f"Customer(id={self.id}, name={self.name})"
