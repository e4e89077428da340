"""Remote gateway for appointments and doctors."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from vetportal.application.listing import AppointmentFilters, to_query_params
from vetportal.domain.entities import (
    APPOINTMENT_STATUS_PENDING,
    Appointment,
    AppointmentStats,
    Doctor,
    OperationResult,
)
from vetportal.infrastructure.gateways.base import command_result
from vetportal.infrastructure.http import BackendClient, BackendUnavailableError
from vetportal.utils import build_entities, build_entity, entity_to_payload

logger = logging.getLogger(__name__)

_FILTER_RENAMES = {"search_term": "search"}


def _appointments(payload: Any) -> list[Appointment]:
    appointments = build_entities(Appointment, payload)
    for appointment in appointments:
        if not appointment.status:
            appointment.status = APPOINTMENT_STATUS_PENDING
    return appointments


class RemoteAppointmentGateway:
    """Appointment endpoints of the clinic backend.

    The administration listing is preferred; when it is unavailable the basic
    ``/appointments`` collection is used instead and callers are expected to
    filter the result locally.
    """

    def __init__(self, admin: BackendClient, api: BackendClient) -> None:
        self._admin = admin
        self._api = api

    def list_appointments(self, filters: AppointmentFilters | None = None) -> list[Appointment]:
        params = to_query_params(filters, renames=_FILTER_RENAMES)
        try:
            return _appointments(self._admin.get("/appointments", params=params))
        except BackendUnavailableError as exc:
            logger.warning("Admin appointment listing failed, using basic listing: %s", exc)
            return self.list_basic()

    def list_basic(self) -> list[Appointment]:
        return _appointments(self._api.get("/appointments"))

    def get_appointment(self, appointment_id: int) -> Appointment | None:
        payload = self._admin.get(f"/appointments/{appointment_id}")
        if not isinstance(payload, Mapping) or not payload:
            return None
        return build_entity(Appointment, payload)

    def create_appointment(self, data: Mapping[str, Any]) -> OperationResult:
        payload = self._admin.post("/appointments", json=entity_to_payload(data))
        return command_result(payload, "Appointment created successfully")

    def update_appointment(self, appointment_id: int, changes: Mapping[str, Any]) -> OperationResult:
        payload = self._admin.put(f"/appointments/{appointment_id}", json=entity_to_payload(changes))
        return command_result(payload, "Appointment updated successfully")

    def delete_appointment(self, appointment_id: int) -> OperationResult:
        payload = self._admin.delete(f"/appointments/{appointment_id}")
        return command_result(payload, "Appointment deleted successfully")

    def update_status(self, appointment_id: int, status: str) -> OperationResult:
        payload = self._api.put(f"/appointments/{appointment_id}/status", json={"status": status})
        return command_result(payload, "Appointment status updated successfully")

    def accept_appointment(self, appointment_id: int) -> OperationResult:
        payload = self._api.post(f"/appointments/{appointment_id}/accept", json={})
        return command_result(payload, "Appointment accepted")

    def decline_appointment(self, appointment_id: int) -> OperationResult:
        payload = self._api.post(f"/appointments/{appointment_id}/decline", json={})
        return command_result(payload, "Appointment declined")

    def list_doctors(self) -> list[Doctor]:
        return build_entities(Doctor, self._api.get("/doctors"))

    def appointment_stats(self) -> AppointmentStats:
        return build_entity(AppointmentStats, self._admin.get("/appointments/stats"))


__all__ = ["RemoteAppointmentGateway"]
