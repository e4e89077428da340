"""Push live notification sets to websocket subscribers."""

from __future__ import annotations

import asyncio
import logging
import threading
from collections.abc import Callable
from typing import Any

from vetportal.application.notifications import NotificationFeed
from vetportal.domain.entities import Notification
from vetportal.utils import entity_to_payload

from .manager import NotificationConnectionManager, notification_manager

logger = logging.getLogger(__name__)

MESSAGE_TYPE = "notifications"


def serialize_notifications(notifications: list[Notification]) -> list[dict[str, Any]]:
    return [entity_to_payload(notification) for notification in notifications]


class NotificationFeedPublisher:
    """Forward every change of a feed to the websockets registered for it.

    Feeds are mutated from worker threads; deliveries are scheduled onto the
    event loop that owns the websocket connections.
    """

    def __init__(self, manager: NotificationConnectionManager) -> None:
        self._manager = manager
        self._subscriptions: dict[str, tuple[NotificationFeed, Callable[[], None]]] = {}
        self._lock = threading.Lock()

    def attach(self, feed: NotificationFeed) -> None:
        """Start forwarding ``feed``; attaching the same feed twice is a no-op.

        A different feed object under an already attached key replaces the
        previous subscription.
        """

        with self._lock:
            current = self._subscriptions.get(feed.key)
            if current is not None and current[0] is feed:
                return
            if current is not None:
                current[1]()
            unsubscribe = feed.subscribe(
                lambda notifications: self.dispatch(feed.key, notifications)
            )
            self._subscriptions[feed.key] = (feed, unsubscribe)

    def detach(self, feed: NotificationFeed) -> None:
        with self._lock:
            current = self._subscriptions.get(feed.key)
            if current is None or current[0] is not feed:
                return
            del self._subscriptions[feed.key]
        current[1]()

    def dispatch(self, feed_key: str, notifications: list[Notification]) -> None:
        """Schedule delivery of ``notifications`` to the connections of ``feed_key``."""

        if not self._manager.has_connections(feed_key):
            return
        message = {"type": MESSAGE_TYPE, "data": serialize_notifications(notifications)}
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            loop = self._manager.loop
            if loop is None or loop.is_closed():
                logger.debug("No event loop available to deliver notifications for %s", feed_key)
                return
            asyncio.run_coroutine_threadsafe(self._manager.send(feed_key, message), loop)
        else:
            loop.create_task(self._manager.send(feed_key, message))


notification_publisher = NotificationFeedPublisher(notification_manager)


__all__ = [
    "MESSAGE_TYPE",
    "NotificationFeedPublisher",
    "notification_publisher",
    "serialize_notifications",
]
