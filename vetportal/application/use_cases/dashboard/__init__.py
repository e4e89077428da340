"""Use cases for the administration dashboard."""

from .admin_dashboard import (
    get_admin_notifications,
    get_admin_stats,
    get_todays_appointments,
    mark_admin_notification_read,
)

__all__ = [
    "get_admin_notifications",
    "get_admin_stats",
    "get_todays_appointments",
    "mark_admin_notification_read",
]
