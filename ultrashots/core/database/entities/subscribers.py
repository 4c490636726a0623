"""
Newsletter subscriber entity models.
"""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Optional

from sqlalchemy import DateTime
from sqlmodel import Field

from ..base import Base, utc_now


class SubscriberStatus(str, Enum):
    """Subscription state of an e-mail address."""

    SUBSCRIBED = "subscribed"
    UNSUBSCRIBED = "unsubscribed"


class Subscriber(Base, table=True):
    """Entity for a newsletter subscriber.

    Table: subscribers
    """

    __tablename__ = "subscribers"

    id: Optional[int] = Field(default=None, primary_key=True)
    email: str = Field(max_length=255, unique=True, index=True)
    name: Optional[str] = Field(default=None, max_length=255)
    status: str = Field(default=SubscriberStatus.SUBSCRIBED.value, max_length=32, index=True)
    source: Optional[str] = Field(default=None, max_length=64, description="Where the sign-up came from")

    subscribed_at: datetime = Field(default_factory=utc_now, sa_type=DateTime(timezone=True))
    unsubscribed_at: Optional[datetime] = Field(default=None, sa_type=DateTime(timezone=True))
    created_at: datetime = Field(default_factory=utc_now, sa_type=DateTime(timezone=True))

    def __repr__(self) -> str:
        return f"Subscriber(id={self.id}, email={self.email}, status={self.status})"
