"""Endpoints and websocket handler for the live notification set."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, WebSocket, WebSocketDisconnect
from fastapi.concurrency import run_in_threadpool

from vetportal.application.gateways import AppointmentGateway, NotificationGateway
from vetportal.application.notifications import NotificationFeed, NotificationFeedRegistry
from vetportal.application.use_cases.notifications import (
    refresh_notifications as refresh_notifications_uc,
)
from vetportal.domain.entities import Notification
from vetportal.infrastructure.notifications import (
    MESSAGE_TYPE,
    notification_manager,
    notification_publisher,
    serialize_notifications,
)
from vetportal.interfaces.api.dependencies import (
    get_appointment_gateway,
    get_current_user_email,
    get_feed_registry,
    get_notification_feed,
    get_notification_gateway,
    websocket_user_email,
)
from vetportal.interfaces.api.schemas import (
    NotificationAddResponse,
    NotificationCreate,
    NotificationFeedRead,
    NotificationRead,
)

router = APIRouter(prefix="/notifications", tags=["notifications"])
logger = logging.getLogger(__name__)


def _feed_to_schema(notifications: list[Notification]) -> NotificationFeedRead:
    return NotificationFeedRead(
        notifications=[NotificationRead.model_validate(item) for item in notifications],
        count=len(notifications),
    )


@router.get("/", response_model=NotificationFeedRead)
def read_notifications(feed: NotificationFeed = Depends(get_notification_feed)):
    """Return the live notification set of the caller."""

    return _feed_to_schema(feed.notifications)


@router.post("/", response_model=NotificationAddResponse)
def add_notification(
    notification_in: NotificationCreate,
    feed: NotificationFeed = Depends(get_notification_feed),
):
    """Append a notification unless it was dismissed or is already live."""

    added = feed.add(Notification(**notification_in.model_dump()))
    live = feed.notifications
    return NotificationAddResponse(
        notifications=[NotificationRead.model_validate(item) for item in live],
        count=len(live),
        added=added,
    )


@router.post("/refresh", response_model=NotificationFeedRead)
def refresh_notifications(
    email: str | None = Depends(get_current_user_email),
    feed: NotificationFeed = Depends(get_notification_feed),
    notifications: NotificationGateway = Depends(get_notification_gateway),
    appointments: AppointmentGateway = Depends(get_appointment_gateway),
):
    """Reload the candidates from the backend and publish them."""

    live = refresh_notifications_uc(feed, notifications, appointments, email=email)
    return _feed_to_schema(live)


@router.post("/{index}/dismiss", response_model=NotificationFeedRead)
def dismiss_notification(index: int, feed: NotificationFeed = Depends(get_notification_feed)):
    """Dismiss the notification at ``index``; unknown positions are ignored."""

    dismissed = feed.dismiss(index)
    if dismissed is None:
        logger.debug("Ignoring dismissal of missing notification %s on %s", index, feed.key)
    return _feed_to_schema(feed.notifications)


@router.delete("/", response_model=NotificationFeedRead)
def clear_notifications(feed: NotificationFeed = Depends(get_notification_feed)):
    feed.clear()
    return _feed_to_schema(feed.notifications)


@router.delete("/dismissed", response_model=NotificationFeedRead)
def clear_dismissed_notifications(feed: NotificationFeed = Depends(get_notification_feed)):
    """Forget every dismissal so that the next refresh shows everything again."""

    feed.clear_dismissed()
    return _feed_to_schema(feed.notifications)


@router.websocket("/ws")
async def notifications_websocket(
    websocket: WebSocket,
    email: str | None = Depends(websocket_user_email),
    registry: NotificationFeedRegistry = Depends(get_feed_registry),
) -> None:
    """Websocket endpoint that streams the live notification set of the caller."""

    feed = await run_in_threadpool(registry.feed_for, email)
    notification_publisher.attach(feed)
    await notification_manager.connect(feed.key, websocket)
    try:
        await websocket.send_json(
            {"type": MESSAGE_TYPE, "data": serialize_notifications(feed.notifications)}
        )
        while True:
            try:
                message = await websocket.receive_json()
            except ValueError:
                continue

            if not isinstance(message, dict):
                continue

            message_type = message.get("type")
            if message_type == "ping":
                await websocket.send_json({"type": "pong"})
                continue

            if message_type == "dismiss":
                index = message.get("index")
                if isinstance(index, int):
                    await run_in_threadpool(feed.dismiss, index)
                continue
    except WebSocketDisconnect:
        notification_manager.disconnect(feed.key, websocket)
