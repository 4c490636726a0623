"""
Newsletter subscriber repository interface and implementation.
"""

from __future__ import annotations

from typing import Optional

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from ..base import utc_now
from ..entities.subscribers import Subscriber, SubscriberStatus
from .base import BaseRepository


class SubscriberRepository(BaseRepository[Subscriber]):
    """Repository for subscriber data access operations using SQLModel."""

    order_by = "email"

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Subscriber)

    async def get_by_email(self, email: str) -> Optional[Subscriber]:
        """Get a subscriber by e-mail address."""
        result = await self.session.exec(select(Subscriber).where(Subscriber.email == email.strip().lower()))
        return result.one_or_none()

    async def subscribe(self, email: str, name: Optional[str] = None, source: Optional[str] = None) -> Subscriber:
        """Subscribe an e-mail address.

        Subscribing an existing address is idempotent; an unsubscribed
        address is subscribed again.

        Args:
            email: Address to subscribe
            name: Optional display name
            source: Where the sign-up came from (``website``, ``api``, ...)

        Returns:
            The subscribed Subscriber
        """
        subscriber = await self.get_by_email(email)
        if subscriber is None:
            return await self.create(Subscriber(email=email.strip().lower(), name=name, source=source))
        if subscriber.status != SubscriberStatus.SUBSCRIBED.value:
            subscriber.status = SubscriberStatus.SUBSCRIBED.value
            subscriber.subscribed_at = utc_now()
            subscriber.unsubscribed_at = None
            if name:
                subscriber.name = name
            return await self.update(subscriber)
        return subscriber

    async def unsubscribe(self, email: str) -> Optional[Subscriber]:
        """Unsubscribe an e-mail address.

        Returns:
            The updated Subscriber, or None when the address is unknown
        """
        subscriber = await self.get_by_email(email)
        if subscriber is None:
            return None
        if subscriber.status != SubscriberStatus.UNSUBSCRIBED.value:
            subscriber.status = SubscriberStatus.UNSUBSCRIBED.value
            subscriber.unsubscribed_at = utc_now()
            subscriber = await self.update(subscriber)
        return subscriber
