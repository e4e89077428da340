"""Realtime notification helpers for the infrastructure layer."""

from .manager import NotificationConnectionManager, notification_manager
from .publisher import (
    MESSAGE_TYPE,
    NotificationFeedPublisher,
    notification_publisher,
    serialize_notifications,
)

__all__ = [
    "MESSAGE_TYPE",
    "NotificationConnectionManager",
    "notification_manager",
    "NotificationFeedPublisher",
    "notification_publisher",
    "serialize_notifications",
]
