"""Tests for the administration dashboard aggregates."""

from __future__ import annotations

from datetime import date

import pytest

from vetportal.application.use_cases.dashboard import (
    get_admin_notifications,
    get_admin_stats,
    get_todays_appointments,
)
from vetportal.domain.entities import AdminStats, Appointment
from vetportal.infrastructure.http import BackendUnavailableError

TODAY = date(2024, 3, 10)


def _appointment(appointment_id: int, day: str, status: str = "pending") -> Appointment:
    return Appointment(
        id=appointment_id,
        date=day,
        time="09:30",
        petname="Buddy",
        docname="Dr. Smith",
        name="John",
        email="john@example.com",
        status=status,
    )


class OfflineDashboard:
    """Dashboard whose aggregate endpoints are unavailable."""

    def _fail(self):
        raise BackendUnavailableError("GET", "/stats", "status 503", status_code=503)

    def admin_stats(self) -> AdminStats:
        self._fail()

    def todays_appointments(self) -> list[Appointment]:
        self._fail()

    def admin_notifications(self):
        self._fail()

    def user_count(self) -> int:
        return 12

    def appointment_count(self) -> int:
        return 40

    def pet_count(self) -> int:
        return 25


class StubAppointments:
    def list_basic(self) -> list[Appointment]:
        return [
            _appointment(1, "2024-03-10"),
            _appointment(2, "2024-03-10T15:00:00", status="completed"),
            _appointment(3, "2024-03-11"),
        ]


def test_todays_appointments_are_filtered_locally() -> None:
    todays = get_todays_appointments(OfflineDashboard(), StubAppointments(), today=TODAY)

    assert [appointment.id for appointment in todays] == [1, 2]


def test_admin_stats_are_derived_from_collections() -> None:
    stats = get_admin_stats(OfflineDashboard(), StubAppointments(), today=TODAY)

    assert stats == AdminStats(
        total_users=12,
        today_appointments=2,
        total_appointments=40,
        total_pets=25,
        pending_appointments=1,
        completed_appointments=1,
    )


def test_admin_notifications_are_generated_from_todays_appointments() -> None:
    notifications = get_admin_notifications(OfflineDashboard(), StubAppointments(), today=TODAY)

    assert [item.type for item in notifications] == ["appointment", "alert", "appointment"]
    assert {item.date for item in notifications} == {"2024-03-10"}


def test_backend_stats_are_returned_as_is() -> None:
    class OnlineDashboard(OfflineDashboard):
        def admin_stats(self) -> AdminStats:
            return AdminStats(total_users=1)

    assert get_admin_stats(OnlineDashboard(), StubAppointments()) == AdminStats(total_users=1)


def test_derivation_propagates_when_appointments_are_unavailable() -> None:
    class OfflineAppointments:
        def list_basic(self):
            raise BackendUnavailableError("GET", "/appointments", "connection refused")

    with pytest.raises(BackendUnavailableError):
        get_todays_appointments(OfflineDashboard(), OfflineAppointments(), today=TODAY)
