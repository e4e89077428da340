"""Use cases for appointment scheduling."""

from .list_appointments import list_appointments, list_doctors, list_user_appointments
from .manage_appointments import (
    accept_appointment,
    create_appointment,
    decline_appointment,
    delete_appointment,
    get_appointment,
    get_appointment_stats,
    update_appointment,
    update_appointment_status,
)

__all__ = [
    "accept_appointment",
    "create_appointment",
    "decline_appointment",
    "delete_appointment",
    "get_appointment",
    "get_appointment_stats",
    "list_appointments",
    "list_doctors",
    "list_user_appointments",
    "update_appointment",
    "update_appointment_status",
]
