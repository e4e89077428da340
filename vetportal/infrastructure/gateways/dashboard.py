"""Remote gateway for the administration dashboard."""

from __future__ import annotations

from vetportal.domain.entities import AdminStats, Appointment, Notification, OperationResult
from vetportal.infrastructure.gateways.base import command_result
from vetportal.infrastructure.http import BackendClient
from vetportal.utils import build_entities, build_entity


class RemoteDashboardGateway:
    """Aggregates served by the administration backend."""

    def __init__(self, admin: BackendClient, api: BackendClient) -> None:
        self._admin = admin
        self._api = api

    def admin_stats(self) -> AdminStats:
        return build_entity(AdminStats, self._admin.get("/stats"))

    def todays_appointments(self) -> list[Appointment]:
        return build_entities(Appointment, self._admin.get("/appointments/today"))

    def admin_notifications(self) -> list[Notification]:
        return build_entities(Notification, self._admin.get("/notifications"))

    def mark_notification_read(self, notification_id: int) -> OperationResult:
        payload = self._admin.put(f"/notifications/{notification_id}/read", json={})
        return command_result(payload, "Notification marked as read")

    def user_count(self) -> int:
        return _count(self._api.get("/users"))

    def appointment_count(self) -> int:
        return _count(self._api.get("/appointments"))

    def pet_count(self) -> int:
        return _count(self._api.get("/pets"))


def _count(payload: object) -> int:
    return len(payload) if isinstance(payload, list) else 0


__all__ = ["RemoteDashboardGateway"]
