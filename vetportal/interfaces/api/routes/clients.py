"""Routes for client administration."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Query, Response, status

from vetportal.application.gateways import ClientGateway
from vetportal.application.listing import ClientFilters
from vetportal.application.use_cases.clients import (
    add_contact as add_contact_uc,
    create_client as create_client_uc,
    delete_client as delete_client_uc,
    delete_contact as delete_contact_uc,
    export_clients_csv as export_clients_csv_uc,
    get_client as get_client_uc,
    get_client_statistics as get_client_statistics_uc,
    link_pet as link_pet_uc,
    list_cities as list_cities_uc,
    list_client_pets as list_client_pets_uc,
    list_clients as list_clients_uc,
    list_contacts as list_contacts_uc,
    list_states as list_states_uc,
    list_visits as list_visits_uc,
    search_clients as search_clients_uc,
    unlink_pet as unlink_pet_uc,
    update_client as update_client_uc,
    update_contact as update_contact_uc,
)
from vetportal.interfaces.api.dependencies import get_client_gateway
from vetportal.interfaces.api.routes_helpers import (
    Pagination,
    changes_from,
    http_error_from,
    pagination_params,
)
from vetportal.interfaces.api.schemas import (
    ClientCreate,
    ClientPetRead,
    ClientRead,
    ClientStatisticsRead,
    ClientUpdate,
    ContactInfoCreate,
    ContactInfoRead,
    ContactInfoUpdate,
    OperationResultRead,
    PageRead,
    VisitHistoryRead,
)

router = APIRouter(prefix="/clients", tags=["clients"])
logger = logging.getLogger(__name__)


def client_filters(
    search_term: str | None = None,
    client_status: bool | None = Query(None, alias="status"),
    city: str | None = None,
    state: str | None = None,
    registration_date_from: str | None = None,
    registration_date_to: str | None = None,
    last_visit_from: str | None = None,
    last_visit_to: str | None = None,
    has_pets: bool | None = None,
    min_visits: int | None = Query(None, ge=0),
    max_visits: int | None = Query(None, ge=0),
    contact_method: str | None = None,
) -> ClientFilters:
    return ClientFilters(
        search_term=search_term,
        status=client_status,
        city=city,
        state=state,
        registration_date_from=registration_date_from,
        registration_date_to=registration_date_to,
        last_visit_from=last_visit_from,
        last_visit_to=last_visit_to,
        has_pets=has_pets,
        min_visits=min_visits,
        max_visits=max_visits,
        contact_method=contact_method,
    )


@router.get("/", response_model=PageRead[ClientRead])
def list_clients(
    filters: ClientFilters = Depends(client_filters),
    pagination: Pagination = Depends(pagination_params),
    gateway: ClientGateway = Depends(get_client_gateway),
):
    """Return one page of clients matching the query filters."""

    page = list_clients_uc(gateway, filters=filters, **pagination.as_kwargs())
    return PageRead[ClientRead].model_validate(page)


@router.get("/search", response_model=list[ClientRead])
def search_clients(q: str = Query(""), gateway: ClientGateway = Depends(get_client_gateway)):
    return [ClientRead.model_validate(client) for client in search_clients_uc(gateway, q)]


@router.get("/statistics", response_model=ClientStatisticsRead)
def read_client_statistics(gateway: ClientGateway = Depends(get_client_gateway)):
    return ClientStatisticsRead.model_validate(get_client_statistics_uc(gateway))


@router.get("/cities", response_model=list[str])
def list_cities(gateway: ClientGateway = Depends(get_client_gateway)):
    return list_cities_uc(gateway)


@router.get("/states", response_model=list[str])
def list_states(gateway: ClientGateway = Depends(get_client_gateway)):
    return list_states_uc(gateway)


@router.get("/export")
def export_clients(
    filters: ClientFilters = Depends(client_filters),
    gateway: ClientGateway = Depends(get_client_gateway),
) -> Response:
    """Download the filtered client list as CSV."""

    content = export_clients_csv_uc(gateway, filters)
    return Response(
        content=content,
        media_type="text/csv",
        headers={"Content-Disposition": 'attachment; filename="clients.csv"'},
    )


@router.get("/{client_id}", response_model=ClientRead)
def read_client(client_id: int, gateway: ClientGateway = Depends(get_client_gateway)):
    try:
        client = get_client_uc(gateway, client_id)
    except ValueError as exc:
        raise http_error_from(exc) from exc
    return ClientRead.model_validate(client)


@router.post("/", response_model=ClientRead, status_code=status.HTTP_201_CREATED)
def create_client(client_in: ClientCreate, gateway: ClientGateway = Depends(get_client_gateway)):
    try:
        client = create_client_uc(gateway, client_in.model_dump(exclude_none=True))
    except ValueError as exc:
        raise http_error_from(exc) from exc
    logger.info("Registered client %s", client.email)
    return ClientRead.model_validate(client)


@router.put("/{client_id}", response_model=ClientRead)
def update_client(
    client_id: int,
    client_in: ClientUpdate,
    gateway: ClientGateway = Depends(get_client_gateway),
):
    try:
        client = update_client_uc(gateway, client_id, changes_from(client_in))
    except ValueError as exc:
        raise http_error_from(exc) from exc
    return ClientRead.model_validate(client)


@router.delete("/{client_id}", response_model=OperationResultRead)
def delete_client(client_id: int, gateway: ClientGateway = Depends(get_client_gateway)):
    return OperationResultRead.model_validate(delete_client_uc(gateway, client_id))


@router.get("/{client_id}/contacts", response_model=list[ContactInfoRead])
def list_contacts(client_id: int, gateway: ClientGateway = Depends(get_client_gateway)):
    return [ContactInfoRead.model_validate(contact) for contact in list_contacts_uc(gateway, client_id)]


@router.post(
    "/{client_id}/contacts",
    response_model=ContactInfoRead,
    status_code=status.HTTP_201_CREATED,
)
def add_contact(
    client_id: int,
    contact_in: ContactInfoCreate,
    gateway: ClientGateway = Depends(get_client_gateway),
):
    contact = add_contact_uc(gateway, client_id, contact_in.model_dump(exclude_none=True))
    return ContactInfoRead.model_validate(contact)


@router.put("/{client_id}/contacts/{contact_id}", response_model=ContactInfoRead)
def update_contact(
    client_id: int,
    contact_id: int,
    contact_in: ContactInfoUpdate,
    gateway: ClientGateway = Depends(get_client_gateway),
):
    contact = update_contact_uc(gateway, client_id, contact_id, changes_from(contact_in))
    return ContactInfoRead.model_validate(contact)


@router.delete("/{client_id}/contacts/{contact_id}", response_model=OperationResultRead)
def delete_contact(
    client_id: int, contact_id: int, gateway: ClientGateway = Depends(get_client_gateway)
):
    return OperationResultRead.model_validate(delete_contact_uc(gateway, client_id, contact_id))


@router.get("/{client_id}/pets", response_model=list[ClientPetRead])
def list_client_pets(client_id: int, gateway: ClientGateway = Depends(get_client_gateway)):
    return [ClientPetRead.model_validate(pet) for pet in list_client_pets_uc(gateway, client_id)]


@router.post("/{client_id}/pets/{pet_id}", response_model=OperationResultRead)
def link_pet(client_id: int, pet_id: int, gateway: ClientGateway = Depends(get_client_gateway)):
    return OperationResultRead.model_validate(link_pet_uc(gateway, client_id, pet_id))


@router.delete("/{client_id}/pets/{pet_id}", response_model=OperationResultRead)
def unlink_pet(client_id: int, pet_id: int, gateway: ClientGateway = Depends(get_client_gateway)):
    return OperationResultRead.model_validate(unlink_pet_uc(gateway, client_id, pet_id))


@router.get("/{client_id}/visits", response_model=list[VisitHistoryRead])
def list_visits(
    client_id: int,
    pet_id: int | None = None,
    gateway: ClientGateway = Depends(get_client_gateway),
):
    """Return the visit history of a client, optionally narrowed to one pet."""

    visits = list_visits_uc(gateway, client_id, pet_id=pet_id)
    return [VisitHistoryRead.model_validate(visit) for visit in visits]
