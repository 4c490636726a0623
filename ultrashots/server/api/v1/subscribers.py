"""
Newsletter Subscription Endpoint.
"""

from fastapi import APIRouter, status

from ultrashots.core.database.repositories import SubscriberRepository
from ultrashots.core.logging_config import get_logger
from ultrashots.server.schemas import SubscriberCreate, SubscriberRead
from ultrashots.server.services.deps import SessionDep

logger = get_logger(__name__)

router = APIRouter()


@router.post(
    "/subscribers",
    response_model=SubscriberRead,
    status_code=status.HTTP_201_CREATED,
    summary="Subscribe to the Newsletter",
    description="Subscribe an e-mail address. Subscribing again re-activates an unsubscribed address.",
    responses={
        201: {"description": "Address subscribed"},
        422: {"description": "Invalid e-mail address"},
    },
)
async def create_subscriber(payload: SubscriberCreate, session: SessionDep) -> SubscriberRead:
    subscriber = await SubscriberRepository(session).subscribe(payload.email, name=payload.name, source="api")
    logger.info(f"API subscription {subscriber.id}")
    return SubscriberRead.model_validate(subscriber)
