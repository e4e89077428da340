"""Notifications derived from appointment data when none can be fetched."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import date, timedelta

from vetportal.domain.entities import APPOINTMENT_STATUS_PENDING, Appointment, Notification
from vetportal.utils import coerce_date

UPCOMING_WINDOW_DAYS = 7


def upcoming_appointments(
    appointments: Iterable[Appointment], *, today: date
) -> list[Appointment]:
    """Return appointments from ``today`` onwards sorted by date."""

    dated: list[tuple[date, Appointment]] = []
    for appointment in appointments:
        appointment_date = coerce_date(appointment.date)
        if appointment_date is not None and appointment_date >= today:
            dated.append((appointment_date, appointment))
    dated.sort(key=lambda entry: entry[0])
    return [appointment for _, appointment in dated]


def generate_appointment_notifications(
    appointments: Iterable[Appointment], *, today: date
) -> list[Notification]:
    """Build reminder and info notifications for upcoming appointments.

    An appointment tomorrow yields a reminder; any appointment within the next
    week yields an info entry. Both are dated ``today``.
    """

    tomorrow = today + timedelta(days=1)
    horizon = today + timedelta(days=UPCOMING_WINDOW_DAYS)
    issued = today.isoformat()
    notifications: list[Notification] = []
    for appointment in upcoming_appointments(appointments, today=today):
        appointment_date = coerce_date(appointment.date)
        if appointment_date == tomorrow:
            notifications.append(
                Notification(
                    message=(
                        f"Reminder: {appointment.petname} has an appointment tomorrow "
                        f"at {appointment.time} with {appointment.docname}"
                    ),
                    type="reminder",
                    date=issued,
                )
            )
        if today <= appointment_date <= horizon:
            notifications.append(
                Notification(
                    message=(
                        f"Upcoming: {appointment.petname} appointment on "
                        f"{appointment_date.isoformat()} at {appointment.time}"
                    ),
                    type="info",
                    date=issued,
                )
            )
    return notifications


def generate_admin_notifications(
    appointments: Iterable[Appointment], *, today: date
) -> list[Notification]:
    """Build the administrator notifications for today's appointments."""

    issued = today.isoformat()
    notifications: list[Notification] = []
    for appointment in appointments:
        notifications.append(
            Notification(
                message=(
                    f"{appointment.name} has an appointment today at {appointment.time} "
                    f"for {appointment.petname} with {appointment.docname}"
                ),
                type="appointment",
                date=issued,
                user_email=appointment.email,
                user_name=appointment.name,
                appointment_id=appointment.id,
                is_read=False,
                priority="medium",
            )
        )
        if appointment.status == APPOINTMENT_STATUS_PENDING:
            notifications.append(
                Notification(
                    message=(
                        f"Pending appointment: {appointment.name}'s appointment for "
                        f"{appointment.petname} needs confirmation"
                    ),
                    type="alert",
                    date=issued,
                    user_email=appointment.email,
                    user_name=appointment.name,
                    appointment_id=appointment.id,
                    is_read=False,
                    priority="high",
                )
            )
    return notifications
