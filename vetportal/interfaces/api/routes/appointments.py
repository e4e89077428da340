"""Routes for appointments and the doctor directory."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, status

from vetportal.application.gateways import AppointmentGateway
from vetportal.application.listing import AppointmentFilters
from vetportal.application.use_cases.appointments import (
    accept_appointment as accept_appointment_uc,
    create_appointment as create_appointment_uc,
    decline_appointment as decline_appointment_uc,
    delete_appointment as delete_appointment_uc,
    get_appointment as get_appointment_uc,
    get_appointment_stats as get_appointment_stats_uc,
    list_appointments as list_appointments_uc,
    list_doctors as list_doctors_uc,
    list_user_appointments as list_user_appointments_uc,
    update_appointment as update_appointment_uc,
    update_appointment_status as update_appointment_status_uc,
)
from vetportal.interfaces.api.dependencies import get_appointment_gateway
from vetportal.interfaces.api.routes_helpers import (
    Pagination,
    changes_from,
    http_error_from,
    pagination_params,
)
from vetportal.interfaces.api.schemas import (
    AppointmentCreate,
    AppointmentRead,
    AppointmentStatsRead,
    AppointmentStatusUpdate,
    AppointmentUpdate,
    DoctorRead,
    OperationResultRead,
    PageRead,
)

router = APIRouter(prefix="/appointments", tags=["appointments"])
doctors_router = APIRouter(prefix="/doctors", tags=["doctors"])
logger = logging.getLogger(__name__)


def appointment_filters(
    date_from: str | None = None,
    date_to: str | None = None,
    status: str | None = None,
    doctor: str | None = None,
    search_term: str | None = None,
) -> AppointmentFilters:
    return AppointmentFilters(
        date_from=date_from,
        date_to=date_to,
        status=status,
        doctor=doctor,
        search_term=search_term,
    )


@router.get("/", response_model=PageRead[AppointmentRead])
def list_appointments(
    filters: AppointmentFilters = Depends(appointment_filters),
    pagination: Pagination = Depends(pagination_params),
    gateway: AppointmentGateway = Depends(get_appointment_gateway),
):
    """Return one page of appointments matching the query filters."""

    page = list_appointments_uc(gateway, filters=filters, **pagination.as_kwargs())
    return PageRead[AppointmentRead].model_validate(page)


@router.get("/stats", response_model=AppointmentStatsRead)
def read_appointment_stats(gateway: AppointmentGateway = Depends(get_appointment_gateway)):
    return AppointmentStatsRead.model_validate(get_appointment_stats_uc(gateway))


@router.get("/user/{email}", response_model=list[AppointmentRead])
def list_user_appointments(
    email: str, gateway: AppointmentGateway = Depends(get_appointment_gateway)
):
    appointments = list_user_appointments_uc(gateway, email)
    return [AppointmentRead.model_validate(appointment) for appointment in appointments]


@router.get("/{appointment_id}", response_model=AppointmentRead)
def read_appointment(
    appointment_id: int, gateway: AppointmentGateway = Depends(get_appointment_gateway)
):
    try:
        appointment = get_appointment_uc(gateway, appointment_id)
    except ValueError as exc:
        raise http_error_from(exc) from exc
    return AppointmentRead.model_validate(appointment)


@router.post("/", response_model=OperationResultRead, status_code=status.HTTP_201_CREATED)
def create_appointment(
    appointment_in: AppointmentCreate,
    gateway: AppointmentGateway = Depends(get_appointment_gateway),
):
    result = create_appointment_uc(gateway, appointment_in.model_dump(exclude_none=True))
    if not result.success:
        logger.warning("Appointment for %s was not created: %s", appointment_in.email, result.message)
    return OperationResultRead.model_validate(result)


@router.put("/{appointment_id}", response_model=OperationResultRead)
def update_appointment(
    appointment_id: int,
    appointment_in: AppointmentUpdate,
    gateway: AppointmentGateway = Depends(get_appointment_gateway),
):
    try:
        result = update_appointment_uc(gateway, appointment_id, changes_from(appointment_in))
    except ValueError as exc:
        raise http_error_from(exc) from exc
    return OperationResultRead.model_validate(result)


@router.delete("/{appointment_id}", response_model=OperationResultRead)
def delete_appointment(
    appointment_id: int, gateway: AppointmentGateway = Depends(get_appointment_gateway)
):
    return OperationResultRead.model_validate(delete_appointment_uc(gateway, appointment_id))


@router.put("/{appointment_id}/status", response_model=OperationResultRead)
def update_appointment_status(
    appointment_id: int,
    status_in: AppointmentStatusUpdate,
    gateway: AppointmentGateway = Depends(get_appointment_gateway),
):
    try:
        result = update_appointment_status_uc(gateway, appointment_id, status_in.status)
    except ValueError as exc:
        raise http_error_from(exc) from exc
    return OperationResultRead.model_validate(result)


@router.post("/{appointment_id}/accept", response_model=OperationResultRead)
def accept_appointment(
    appointment_id: int, gateway: AppointmentGateway = Depends(get_appointment_gateway)
):
    return OperationResultRead.model_validate(accept_appointment_uc(gateway, appointment_id))


@router.post("/{appointment_id}/decline", response_model=OperationResultRead)
def decline_appointment(
    appointment_id: int, gateway: AppointmentGateway = Depends(get_appointment_gateway)
):
    return OperationResultRead.model_validate(decline_appointment_uc(gateway, appointment_id))


@doctors_router.get("/", response_model=list[DoctorRead])
def list_doctors(gateway: AppointmentGateway = Depends(get_appointment_gateway)):
    return [DoctorRead.model_validate(doctor) for doctor in list_doctors_uc(gateway)]
