"""Use case for the paged pet listing."""

from __future__ import annotations

from vetportal.application.gateways import PetGateway
from vetportal.application.listing import Page, PetFilters, build_page, pet_filter_spec
from vetportal.domain.entities import Pet


def list_pets(
    gateway: PetGateway,
    *,
    filters: PetFilters | None = None,
    page: int = 1,
    page_size: int = 10,
    window_size: int = 5,
) -> Page[Pet]:
    """Return one page of pets matching ``filters``.

    The backend may ignore some criteria, so the same filters are applied
    again to whatever it returns.
    """

    pets = gateway.list_pets(filters)
    return build_page(
        pets,
        spec_builder=pet_filter_spec,
        filters=filters,
        page=page,
        page_size=page_size,
        window_size=window_size,
    )


def list_user_pets(gateway: PetGateway, email: str) -> list[Pet]:
    """Return the pets registered by the signed-in client."""

    return gateway.list_pets_for_user(email)
