"""Use cases backing the administration dashboard.

Each aggregate is served by the backend when possible. When it is not, the
value is derived from the plain collections the way the dashboard did before
the aggregate endpoints existed.
"""

from __future__ import annotations

import logging
from datetime import date

from vetportal.application.gateways import AppointmentGateway, DashboardGateway
from vetportal.application.listing import DateBetween, FilterSpec, evaluate
from vetportal.domain.entities import (
    APPOINTMENT_STATUS_COMPLETED,
    APPOINTMENT_STATUS_PENDING,
    AdminStats,
    Appointment,
    Notification,
    OperationResult,
)
from vetportal.infrastructure.http import BackendUnavailableError
from vetportal.utils import today_in_app_timezone

from ..notifications.generate_notifications import generate_admin_notifications

logger = logging.getLogger(__name__)


def get_todays_appointments(
    dashboard: DashboardGateway,
    appointments: AppointmentGateway,
    *,
    today: date | None = None,
) -> list[Appointment]:
    try:
        return dashboard.todays_appointments()
    except BackendUnavailableError as exc:
        logger.warning("Today's appointments unavailable, filtering all appointments: %s", exc)

    today = today or today_in_app_timezone()
    return evaluate(appointments.list_basic(), FilterSpec.of(DateBetween("date", today, today)))


def get_admin_stats(
    dashboard: DashboardGateway,
    appointments: AppointmentGateway,
    *,
    today: date | None = None,
) -> AdminStats:
    try:
        return dashboard.admin_stats()
    except BackendUnavailableError as exc:
        logger.warning("Admin stats unavailable, computing from collections: %s", exc)

    todays = get_todays_appointments(dashboard, appointments, today=today)
    return AdminStats(
        total_users=dashboard.user_count(),
        today_appointments=len(todays),
        total_appointments=dashboard.appointment_count(),
        total_pets=dashboard.pet_count(),
        pending_appointments=sum(1 for item in todays if item.status == APPOINTMENT_STATUS_PENDING),
        completed_appointments=sum(
            1 for item in todays if item.status == APPOINTMENT_STATUS_COMPLETED
        ),
    )


def get_admin_notifications(
    dashboard: DashboardGateway,
    appointments: AppointmentGateway,
    *,
    today: date | None = None,
) -> list[Notification]:
    try:
        return dashboard.admin_notifications()
    except BackendUnavailableError as exc:
        logger.warning("Admin notifications unavailable, generating from appointments: %s", exc)

    today = today or today_in_app_timezone()
    todays = get_todays_appointments(dashboard, appointments, today=today)
    return generate_admin_notifications(todays, today=today)


def mark_admin_notification_read(
    dashboard: DashboardGateway, notification_id: int
) -> OperationResult:
    return dashboard.mark_notification_read(notification_id)
