"""Use cases for the contacts, pets and visits attached to a client."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from vetportal.application.gateways import ClientGateway
from vetportal.domain.entities import ClientPet, ContactInfo, OperationResult, VisitHistory


def list_contacts(gateway: ClientGateway, client_id: int) -> list[ContactInfo]:
    return gateway.list_contacts(client_id)


def add_contact(gateway: ClientGateway, client_id: int, data: Mapping[str, Any]) -> ContactInfo:
    return gateway.add_contact(client_id, data)


def update_contact(
    gateway: ClientGateway, client_id: int, contact_id: int, changes: Mapping[str, Any]
) -> ContactInfo:
    return gateway.update_contact(client_id, contact_id, changes)


def delete_contact(gateway: ClientGateway, client_id: int, contact_id: int) -> OperationResult:
    return gateway.delete_contact(client_id, contact_id)


def list_client_pets(gateway: ClientGateway, client_id: int) -> list[ClientPet]:
    return gateway.list_client_pets(client_id)


def link_pet(gateway: ClientGateway, client_id: int, pet_id: int) -> OperationResult:
    return gateway.link_pet(client_id, pet_id)


def unlink_pet(gateway: ClientGateway, client_id: int, pet_id: int) -> OperationResult:
    return gateway.unlink_pet(client_id, pet_id)


def list_visits(
    gateway: ClientGateway, client_id: int, *, pet_id: int | None = None
) -> list[VisitHistory]:
    """Return the visit history of a client, optionally restricted to one pet."""

    if pet_id is None:
        return gateway.list_visits(client_id)
    return gateway.list_pet_visits(client_id, pet_id)
