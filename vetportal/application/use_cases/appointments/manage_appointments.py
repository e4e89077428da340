"""Use cases for booking and updating appointments."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from vetportal.application.gateways import AppointmentGateway
from vetportal.domain.entities import (
    APPOINTMENT_STATUSES,
    Appointment,
    AppointmentStats,
    OperationResult,
)


def get_appointment(gateway: AppointmentGateway, appointment_id: int) -> Appointment:
    """Return the appointment identified by ``appointment_id`` or raise an error."""

    appointment = gateway.get_appointment(appointment_id)
    if appointment is None:
        raise ValueError("Appointment not found")
    return appointment


def _ensure_status(status: Any) -> None:
    if status is not None and status not in APPOINTMENT_STATUSES:
        raise ValueError(f"Unsupported appointment status: {status}")


def create_appointment(gateway: AppointmentGateway, data: Mapping[str, Any]) -> OperationResult:
    return gateway.create_appointment(data)


def update_appointment(
    gateway: AppointmentGateway, appointment_id: int, changes: Mapping[str, Any]
) -> OperationResult:
    if not changes:
        raise ValueError("No changes provided")
    _ensure_status(changes.get("status"))
    return gateway.update_appointment(appointment_id, changes)


def delete_appointment(gateway: AppointmentGateway, appointment_id: int) -> OperationResult:
    return gateway.delete_appointment(appointment_id)


def update_appointment_status(
    gateway: AppointmentGateway, appointment_id: int, status: str
) -> OperationResult:
    _ensure_status(status)
    return gateway.update_status(appointment_id, status)


def accept_appointment(gateway: AppointmentGateway, appointment_id: int) -> OperationResult:
    return gateway.accept_appointment(appointment_id)


def decline_appointment(gateway: AppointmentGateway, appointment_id: int) -> OperationResult:
    return gateway.decline_appointment(appointment_id)


def get_appointment_stats(gateway: AppointmentGateway) -> AppointmentStats:
    return gateway.appointment_stats()
