"""Use cases for appointment listings."""

from __future__ import annotations

from vetportal.application.gateways import AppointmentGateway
from vetportal.application.listing import (
    AppointmentFilters,
    EqualsIgnoreCase,
    FilterSpec,
    Page,
    appointment_filter_spec,
    build_page,
    evaluate,
)
from vetportal.domain.entities import Appointment, Doctor


def list_appointments(
    gateway: AppointmentGateway,
    *,
    filters: AppointmentFilters | None = None,
    page: int = 1,
    page_size: int = 10,
    window_size: int = 5,
) -> Page[Appointment]:
    """Return one page of appointments matching ``filters``.

    When the gateway had to fall back to the unfiltered collection the
    criteria are still honoured because they are evaluated here.
    """

    appointments = gateway.list_appointments(filters)
    return build_page(
        appointments,
        spec_builder=appointment_filter_spec,
        filters=filters,
        page=page,
        page_size=page_size,
        window_size=window_size,
    )


def list_user_appointments(gateway: AppointmentGateway, email: str) -> list[Appointment]:
    return evaluate(gateway.list_basic(), FilterSpec.of(EqualsIgnoreCase("email", email)))


def list_doctors(gateway: AppointmentGateway) -> list[Doctor]:
    return gateway.list_doctors()
