"""Seeds newsletter subscribers."""

from itertools import product

from ultrashots.core.database.entities import SubscriberStatus
from ultrashots.core.database.repositories import SubscriberRepository

from .base import Seeder
from .data import SUBSCRIBER_DOMAINS, SUBSCRIBER_FIRST_NAMES, SUBSCRIBER_SOURCES, UNSUBSCRIBE_EVERY


class SubscriberSeeder(Seeder):
    """Subscribes one address per first name and domain; every seventh unsubscribes.

    Addresses that already hold their seeded status are left untouched.
    """

    async def run(self) -> None:
        subscribers = SubscriberRepository(self.session)
        addresses = list(product(SUBSCRIBER_DOMAINS, SUBSCRIBER_FIRST_NAMES))
        for index, (domain, first_name) in enumerate(addresses):
            email = f"{first_name}@{domain}"
            unsubscribed = index % UNSUBSCRIBE_EVERY == UNSUBSCRIBE_EVERY - 1
            target = SubscriberStatus.UNSUBSCRIBED if unsubscribed else SubscriberStatus.SUBSCRIBED

            existing = await subscribers.get_by_email(email)
            if existing is not None and existing.status == target.value:
                continue

            await subscribers.subscribe(
                email,
                name=first_name.title(),
                source=SUBSCRIBER_SOURCES[index % len(SUBSCRIBER_SOURCES)],
            )
            if unsubscribed:
                await subscribers.unsubscribe(email)

        self.console.info(f"  {len(addresses)} subscribers")
