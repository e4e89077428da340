"""Domain entity representing a user notification."""

from __future__ import annotations

from dataclasses import dataclass

NOTIFICATION_TYPES = ("reminder", "alert", "info", "appointment")
NOTIFICATION_PRIORITIES = ("high", "medium", "low")


@dataclass
class Notification:
    """Reminder or alert shown to a clinic user.

    Two notifications with the same message, date and type are the same
    notification regardless of which producer generated them.
    """

    message: str
    type: str
    date: str
    id: int | None = None
    user_email: str | None = None
    user_name: str | None = None
    appointment_id: int | None = None
    is_read: bool | None = None
    priority: str | None = None


__all__ = ["Notification", "NOTIFICATION_TYPES", "NOTIFICATION_PRIORITIES"]
