"""
Newsletter sign-up and subscriber management.

Subscribing and unsubscribing are public; the subscriber list needs
``subscribers.view``.
"""

from typing import Optional

from fastapi import APIRouter, HTTPException, Query, Request, status

from ultrashots.core.database.entities import SubscriberStatus
from ultrashots.core.database.repositories import SubscriberRepository
from ultrashots.core.logging_config import get_logger
from ultrashots.server.exceptions import FormValidationError
from ultrashots.server.flash import notify
from ultrashots.server.pages import render_page
from ultrashots.server.redirects import redirect_back, redirect_to
from ultrashots.server.schemas import AuthUser, SubscriberCreate, SubscriberRead, UnsubscribeRequest
from ultrashots.server.services.deps import PaginationDep, SessionDep, require_permission

logger = get_logger(__name__)

router = APIRouter(tags=["subscribers"])


@router.post("/newsletter/subscribe", summary="Subscribe to the Newsletter")
async def subscribe(request: Request, payload: SubscriberCreate, session: SessionDep):
    subscriber = await SubscriberRepository(session).subscribe(payload.email, name=payload.name, source="website")
    logger.info(f"Newsletter subscription {subscriber.id}")
    notify(request, "success", "Thanks for subscribing!")
    return redirect_back(request)


@router.post("/newsletter/unsubscribe", summary="Unsubscribe from the Newsletter")
async def unsubscribe(request: Request, payload: UnsubscribeRequest, session: SessionDep):
    subscriber = await SubscriberRepository(session).unsubscribe(payload.email)
    if subscriber is None:
        raise FormValidationError({"email": "We could not find a subscription for this address."})
    notify(request, "success", "You have been unsubscribed.")
    return redirect_back(request)


@router.get("/subscribers", summary="List Subscribers")
async def index(
    request: Request,
    session: SessionDep,
    pagination: PaginationDep,
    subscriber_status: Optional[SubscriberStatus] = Query(default=None, alias="status"),
    user: AuthUser = require_permission("subscribers.view"),
):
    subscribers = SubscriberRepository(session)
    filters = {"status": subscriber_status.value if subscriber_status else None}
    records = await subscribers.list(limit=pagination.per_page, offset=pagination.offset, filters=filters)
    total = await subscribers.count(filters)
    return render_page(
        request,
        "Subscribers/Index",
        {
            "subscribers": [SubscriberRead.model_validate(subscriber) for subscriber in records],
            "meta": pagination.meta(total),
            "filters": {"status": subscriber_status},
        },
    )


@router.delete("/subscribers/{subscriber_id}", summary="Delete Subscriber")
async def destroy(
    subscriber_id: int,
    request: Request,
    session: SessionDep,
    user: AuthUser = require_permission("subscribers.delete"),
):
    if not await SubscriberRepository(session).delete(subscriber_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Subscriber not found")
    logger.info(f"User {user.id} deleted subscriber {subscriber_id}")
    notify(request, "success", "Subscriber deleted.")
    return redirect_to(request, "/subscribers")
