"""Use cases for looking up pet owners."""

from __future__ import annotations

from vetportal.application.gateways import PetGateway
from vetportal.domain.entities import Owner, Pet


def search_owners(gateway: PetGateway, query: str) -> list[Owner]:
    """Return owners whose name or email contains ``query``."""

    term = query.strip()
    if not term:
        return []
    return gateway.search_owners(term)


def get_owner(gateway: PetGateway, email: str) -> Owner:
    return gateway.get_owner(email)


def list_owner_pets(gateway: PetGateway, email: str) -> list[Pet]:
    return gateway.list_pets_by_owner(email)
