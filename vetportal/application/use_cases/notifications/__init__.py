"""Use cases for appointment notifications."""

from .generate_notifications import (
    generate_admin_notifications,
    generate_appointment_notifications,
    upcoming_appointments,
)
from .refresh_notifications import collect_notifications, refresh_notifications

__all__ = [
    "collect_notifications",
    "generate_admin_notifications",
    "generate_appointment_notifications",
    "refresh_notifications",
    "upcoming_appointments",
]
