"""Notification deduplication and publication."""

from .feed import (
    DISMISSED_NOTIFICATIONS_KEY,
    NotificationFeed,
    NotificationFeedRegistry,
    notification_id,
)

__all__ = [
    "DISMISSED_NOTIFICATIONS_KEY",
    "NotificationFeed",
    "NotificationFeedRegistry",
    "notification_id",
]
