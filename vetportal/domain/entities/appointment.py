"""Domain entities for appointment scheduling."""

from __future__ import annotations

from dataclasses import dataclass

APPOINTMENT_STATUS_PENDING = "pending"
APPOINTMENT_STATUS_CONFIRMED = "confirmed"
APPOINTMENT_STATUS_COMPLETED = "completed"
APPOINTMENT_STATUS_CANCELLED = "cancelled"
APPOINTMENT_STATUSES = (
    APPOINTMENT_STATUS_PENDING,
    APPOINTMENT_STATUS_CONFIRMED,
    APPOINTMENT_STATUS_COMPLETED,
    APPOINTMENT_STATUS_CANCELLED,
)


@dataclass
class Appointment:
    """A booked visit of a pet with a doctor."""

    id: int | None
    date: str
    time: str
    petname: str
    docname: str
    name: str
    email: str
    status: str = APPOINTMENT_STATUS_PENDING
    contact_number: str | None = None
    appointment_type: str | None = None
    notes: str | None = None
    pet_age: str | None = None
    pet_breed: str | None = None
    reason_for_visit: str | None = None
    created_at: str | None = None
    updated_at: str | None = None


@dataclass
class Doctor:
    """A veterinarian that can be assigned to appointments."""

    id: int | None
    name: str
    specialization: str | None = None
    email: str | None = None
    phone: str | None = None
    available: bool | None = None


__all__ = [
    "Appointment",
    "Doctor",
    "APPOINTMENT_STATUSES",
    "APPOINTMENT_STATUS_PENDING",
    "APPOINTMENT_STATUS_CONFIRMED",
    "APPOINTMENT_STATUS_COMPLETED",
    "APPOINTMENT_STATUS_CANCELLED",
]
