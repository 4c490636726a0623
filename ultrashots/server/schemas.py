"""
Request and Response Schemas.

Pydantic models for the form payloads posted by pages, the JSON API and
the props handed to page components.
"""

from __future__ import annotations

import math
from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator

from ultrashots.core.database.entities import SUPER_ADMIN_ROLE, CustomerStatus, ProjectStatus

EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"


def _normalize_email(value):
    return value.strip().lower() if isinstance(value, str) else value


def _reject_null(value, info: ValidationInfo):
    if value is None:
        raise ValueError(f"The {info.field_name} field cannot be empty.")
    return value


# =====================================================================
# Authentication
# =====================================================================


class LoginRequest(BaseModel):
    """Credentials posted by the login page."""

    email: str = Field(..., pattern=EMAIL_PATTERN, description="Account e-mail address")
    password: str = Field(..., min_length=1, description="Clear-text password")
    remember: bool = Field(default=False, description="Keep the session after the browser closes")

    @field_validator("email", mode="before")
    @classmethod
    def normalize_email(cls, value):
        return _normalize_email(value)


class AuthUser(BaseModel):
    """The authenticated user as shared with every page and the ``/user`` endpoint."""

    id: int
    name: str
    email: str
    roles: List[str] = Field(default_factory=list)
    permissions: List[str] = Field(default_factory=list)

    def is_super_admin(self) -> bool:
        return SUPER_ADMIN_ROLE in self.roles

    def has_role(self, role: str) -> bool:
        return role in self.roles

    def can(self, permission: str) -> bool:
        """Whether the user holds ``permission``; the super admin holds them all."""
        return self.is_super_admin() or permission in self.permissions


class UserRead(BaseModel):
    """A user row of the users index page."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    email: str
    is_active: bool
    roles: List[str] = Field(default_factory=list)
    last_login_at: Optional[datetime] = None
    created_at: datetime


# =====================================================================
# Customers
# =====================================================================


class CustomerCreate(BaseModel):
    """Payload creating a customer."""

    model_config = ConfigDict(use_enum_values=True)

    name: str = Field(..., min_length=1, max_length=255)
    email: str = Field(..., pattern=EMAIL_PATTERN, max_length=255)
    company: Optional[str] = Field(default=None, max_length=255)
    phone: Optional[str] = Field(default=None, max_length=64)
    website: Optional[str] = Field(default=None, max_length=255)
    status: CustomerStatus = Field(default=CustomerStatus.ACTIVE)
    notes: Optional[str] = None

    @field_validator("email", mode="before")
    @classmethod
    def normalize_email(cls, value):
        return _normalize_email(value)


class CustomerUpdate(BaseModel):
    """Payload updating a customer; only the sent fields change."""

    model_config = ConfigDict(use_enum_values=True)

    name: Optional[str] = Field(default=None, min_length=1, max_length=255)
    email: Optional[str] = Field(default=None, pattern=EMAIL_PATTERN, max_length=255)
    company: Optional[str] = Field(default=None, max_length=255)
    phone: Optional[str] = Field(default=None, max_length=64)
    website: Optional[str] = Field(default=None, max_length=255)
    status: Optional[CustomerStatus] = None
    notes: Optional[str] = None

    @field_validator("email", mode="before")
    @classmethod
    def normalize_email(cls, value):
        return _normalize_email(value)

    @field_validator("name", "email", "status")
    @classmethod
    def reject_null(cls, value, info: ValidationInfo):
        return _reject_null(value, info)


class CustomerRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    email: str
    company: Optional[str] = None
    phone: Optional[str] = None
    website: Optional[str] = None
    status: str
    notes: Optional[str] = None
    created_at: datetime
    updated_at: datetime


# =====================================================================
# Projects
# =====================================================================


class ProjectCreate(BaseModel):
    """Payload creating a project. The slug is derived from the title when omitted."""

    model_config = ConfigDict(use_enum_values=True)

    customer_id: int
    title: str = Field(..., min_length=1, max_length=255)
    slug: Optional[str] = Field(default=None, pattern=r"^[a-z0-9]+(?:-[a-z0-9]+)*$", max_length=255)
    summary: Optional[str] = Field(default=None, max_length=500)
    description: Optional[str] = None
    status: ProjectStatus = Field(default=ProjectStatus.PLANNING)
    budget: Optional[float] = Field(default=None, ge=0)
    is_featured: bool = False
    is_published: bool = False
    started_at: Optional[datetime] = None
    completed_at: Optional[datetime] = None


class ProjectUpdate(BaseModel):
    """Payload updating a project; only the sent fields change."""

    model_config = ConfigDict(use_enum_values=True)

    customer_id: Optional[int] = None
    title: Optional[str] = Field(default=None, min_length=1, max_length=255)
    slug: Optional[str] = Field(default=None, pattern=r"^[a-z0-9]+(?:-[a-z0-9]+)*$", max_length=255)
    summary: Optional[str] = Field(default=None, max_length=500)
    description: Optional[str] = None
    status: Optional[ProjectStatus] = None
    budget: Optional[float] = Field(default=None, ge=0)
    is_featured: Optional[bool] = None
    is_published: Optional[bool] = None
    started_at: Optional[datetime] = None
    completed_at: Optional[datetime] = None

    @field_validator("customer_id", "title", "slug", "status", "is_featured", "is_published")
    @classmethod
    def reject_null(cls, value, info: ValidationInfo):
        return _reject_null(value, info)


class ProjectRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    customer_id: int
    title: str
    slug: str
    summary: Optional[str] = None
    description: Optional[str] = None
    status: str
    budget: Optional[float] = None
    is_featured: bool
    is_published: bool
    started_at: Optional[datetime] = None
    completed_at: Optional[datetime] = None


# =====================================================================
# Subscribers
# =====================================================================


class SubscriberCreate(BaseModel):
    """Newsletter sign-up."""

    email: str = Field(..., pattern=EMAIL_PATTERN, max_length=255)
    name: Optional[str] = Field(default=None, max_length=255)

    @field_validator("email", mode="before")
    @classmethod
    def normalize_email(cls, value):
        return _normalize_email(value)


class UnsubscribeRequest(BaseModel):
    email: str = Field(..., pattern=EMAIL_PATTERN, max_length=255)

    @field_validator("email", mode="before")
    @classmethod
    def normalize_email(cls, value):
        return _normalize_email(value)


class SubscriberRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    email: str
    name: Optional[str] = None
    status: str
    source: Optional[str] = None
    subscribed_at: datetime
    unsubscribed_at: Optional[datetime] = None


# =====================================================================
# Pagination
# =====================================================================


class PageMeta(BaseModel):
    """Pagination details sent along with a page of records."""

    page: int
    per_page: int
    total: int
    last_page: int

    @classmethod
    def build(cls, page: int, per_page: int, total: int) -> PageMeta:
        return cls(page=page, per_page=per_page, total=total, last_page=max(1, math.ceil(total / per_page)))
