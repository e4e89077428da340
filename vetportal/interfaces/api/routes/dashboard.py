"""Routes backing the administration dashboard."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from vetportal.application.gateways import AppointmentGateway, DashboardGateway
from vetportal.application.use_cases.dashboard import (
    get_admin_notifications as get_admin_notifications_uc,
    get_admin_stats as get_admin_stats_uc,
    get_todays_appointments as get_todays_appointments_uc,
    mark_admin_notification_read as mark_admin_notification_read_uc,
)
from vetportal.interfaces.api.dependencies import get_appointment_gateway, get_dashboard_gateway
from vetportal.interfaces.api.schemas import (
    AdminStatsRead,
    AppointmentRead,
    NotificationRead,
    OperationResultRead,
)

router = APIRouter(prefix="/dashboard", tags=["dashboard"])


@router.get("/stats", response_model=AdminStatsRead)
def read_admin_stats(
    dashboard: DashboardGateway = Depends(get_dashboard_gateway),
    appointments: AppointmentGateway = Depends(get_appointment_gateway),
):
    """Return the headline counters of the administration dashboard."""

    return AdminStatsRead.model_validate(get_admin_stats_uc(dashboard, appointments))


@router.get("/appointments/today", response_model=list[AppointmentRead])
def list_todays_appointments(
    dashboard: DashboardGateway = Depends(get_dashboard_gateway),
    appointments: AppointmentGateway = Depends(get_appointment_gateway),
):
    todays = get_todays_appointments_uc(dashboard, appointments)
    return [AppointmentRead.model_validate(appointment) for appointment in todays]


@router.get("/notifications", response_model=list[NotificationRead])
def list_admin_notifications(
    dashboard: DashboardGateway = Depends(get_dashboard_gateway),
    appointments: AppointmentGateway = Depends(get_appointment_gateway),
):
    notifications = get_admin_notifications_uc(dashboard, appointments)
    return [NotificationRead.model_validate(notification) for notification in notifications]


@router.put("/notifications/{notification_id}/read", response_model=OperationResultRead)
def mark_notification_read(
    notification_id: int, dashboard: DashboardGateway = Depends(get_dashboard_gateway)
):
    return OperationResultRead.model_validate(
        mark_admin_notification_read_uc(dashboard, notification_id)
    )
