"""Tests for the notification refresh workflow."""

from __future__ import annotations

from datetime import date

from vetportal.application.notifications import NotificationFeed
from vetportal.application.use_cases.notifications import (
    collect_notifications,
    generate_admin_notifications,
    generate_appointment_notifications,
    refresh_notifications,
    upcoming_appointments,
)
from vetportal.domain.entities import Appointment, Notification
from vetportal.infrastructure.http import BackendUnavailableError
from vetportal.infrastructure.storage import InMemoryKeyValueStore

TODAY = date(2024, 3, 10)


def _appointment(appointment_id: int, day: str, email: str = "john@example.com", **extra) -> Appointment:
    return Appointment(
        id=appointment_id,
        date=day,
        time="10:00",
        petname=f"Pet {appointment_id}",
        docname="Dr. Smith",
        name="John",
        email=email,
        **extra,
    )


class StubNotifications:
    def __init__(self, *, user=None, general=None) -> None:
        self._user = user
        self._general = general
        self.calls: list[str] = []

    def for_user(self, email: str) -> list[Notification]:
        self.calls.append(f"user:{email}")
        if isinstance(self._user, Exception):
            raise self._user
        return self._user or []

    def general(self) -> list[Notification]:
        self.calls.append("general")
        if isinstance(self._general, Exception):
            raise self._general
        return self._general or []


class StubAppointments:
    def __init__(self, appointments: list[Appointment]) -> None:
        self._appointments = appointments

    def list_basic(self) -> list[Appointment]:
        return list(self._appointments)


def _down() -> BackendUnavailableError:
    return BackendUnavailableError("GET", "/appointment-notifications", "connection refused")


def test_user_notifications_are_preferred() -> None:
    published = [Notification(message="Vaccine due", type="reminder", date="2024-03-10")]
    notifications = StubNotifications(user=published, general=[])

    result = collect_notifications(
        notifications, StubAppointments([]), email="john@example.com", today=TODAY
    )

    assert result == published
    assert notifications.calls == ["user:john@example.com"]


def test_general_notifications_are_used_when_user_list_fails() -> None:
    general = [Notification(message="Clinic closed", type="info", date="2024-03-10")]
    notifications = StubNotifications(user=_down(), general=general)

    result = collect_notifications(
        notifications, StubAppointments([]), email="john@example.com", today=TODAY
    )

    assert result == general
    assert notifications.calls == ["user:john@example.com", "general"]


def test_anonymous_refresh_skips_the_user_list() -> None:
    notifications = StubNotifications(general=[])

    collect_notifications(notifications, StubAppointments([]), today=TODAY)

    assert notifications.calls == ["general"]


def test_notifications_are_generated_when_backend_is_down() -> None:
    appointments = StubAppointments(
        [
            _appointment(1, "2024-03-11"),
            _appointment(2, "2024-03-15"),
            _appointment(3, "2024-03-25"),
            _appointment(4, "2024-03-11", email="other@example.com"),
            _appointment(5, "2024-03-01"),
        ]
    )
    notifications = StubNotifications(user=_down(), general=_down())

    result = collect_notifications(
        notifications, appointments, email="john@example.com", today=TODAY
    )

    assert [(item.type, item.date) for item in result] == [
        ("reminder", "2024-03-10"),
        ("info", "2024-03-10"),
        ("info", "2024-03-10"),
    ]
    assert "Pet 1" in result[0].message
    assert "Pet 2" in result[2].message


def test_upcoming_appointments_are_sorted_and_skip_past_or_undated() -> None:
    appointments = [
        _appointment(1, "2024-03-20"),
        _appointment(2, "2024-03-12"),
        _appointment(3, "2024-03-09"),
        _appointment(4, "someday"),
    ]

    upcoming = upcoming_appointments(appointments, today=TODAY)

    assert [appointment.id for appointment in upcoming] == [2, 1]


def test_generated_notifications_cover_the_next_week_only() -> None:
    generated = generate_appointment_notifications(
        [_appointment(1, "2024-03-17"), _appointment(2, "2024-03-18")], today=TODAY
    )

    assert [item.type for item in generated] == ["info"]


def test_admin_notifications_flag_pending_appointments() -> None:
    generated = generate_admin_notifications(
        [_appointment(1, "2024-03-10"), _appointment(2, "2024-03-10", status="confirmed")],
        today=TODAY,
    )

    assert [(item.type, item.priority, item.appointment_id) for item in generated] == [
        ("appointment", "medium", 1),
        ("alert", "high", 1),
        ("appointment", "medium", 2),
    ]


def test_refresh_publishes_without_dismissed_notifications() -> None:
    published = [
        Notification(message="A", type="reminder", date="2024-01-01"),
        Notification(message="B", type="info", date="2024-01-01"),
    ]
    feed = NotificationFeed(InMemoryKeyValueStore())
    notifications = StubNotifications(general=published)

    refresh_notifications(feed, notifications, StubAppointments([]), today=TODAY)
    feed.dismiss(0)
    live = refresh_notifications(feed, notifications, StubAppointments([]), today=TODAY)

    assert live == [published[1]]
    assert feed.notifications == [published[1]]


def test_generated_notifications_match_the_email_ignoring_case() -> None:
    appointments = StubAppointments(
        [
            _appointment(1, "2024-01-02", email="Jane@Example.com"),
            _appointment(2, "2024-01-02", email="mary.jane@example.com"),
        ]
    )
    notifications = StubNotifications(user=_down(), general=_down())

    result = collect_notifications(
        notifications, appointments, email="jane@example.com", today=date(2024, 1, 1)
    )

    assert [item.type for item in result] == ["reminder", "info"]
    assert all("Pet 1" in item.message for item in result)
