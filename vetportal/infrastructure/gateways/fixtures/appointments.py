"""Offline answers for appointment endpoints."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from vetportal.application.listing import AppointmentFilters
from vetportal.domain.entities import Appointment, AppointmentStats, Doctor, OperationResult


def fixture_doctors() -> list[Doctor]:
    return [
        Doctor(id=1, name="Dr. John Smith", specialization="General Veterinarian"),
        Doctor(id=2, name="Dr. Sarah Johnson", specialization="Pet Surgery"),
        Doctor(id=3, name="Dr. Mike Wilson", specialization="Pet Dentistry"),
        Doctor(id=4, name="Dr. Emily Brown", specialization="Exotic Animals"),
    ]


class FixtureAppointmentGateway:
    """Appointments are never invented offline; commands report failure.

    Accepting and declining appointments have no offline answer and keep
    propagating the backend error.
    """

    def list_appointments(self, filters: AppointmentFilters | None = None) -> list[Appointment]:
        return []

    def list_basic(self) -> list[Appointment]:
        return []

    def get_appointment(self, appointment_id: int) -> Appointment | None:
        return None

    def create_appointment(self, data: Mapping[str, Any]) -> OperationResult:
        return OperationResult(success=False, message="Failed to create appointment")

    def update_appointment(self, appointment_id: int, changes: Mapping[str, Any]) -> OperationResult:
        return OperationResult(success=False, message="Failed to update appointment")

    def delete_appointment(self, appointment_id: int) -> OperationResult:
        return OperationResult(success=False, message="Failed to delete appointment")

    def update_status(self, appointment_id: int, status: str) -> OperationResult:
        return OperationResult(success=False, message="Failed to update appointment status")

    def list_doctors(self) -> list[Doctor]:
        return fixture_doctors()

    def appointment_stats(self) -> AppointmentStats:
        return AppointmentStats()


__all__ = ["FixtureAppointmentGateway", "fixture_doctors"]
