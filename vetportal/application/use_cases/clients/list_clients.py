"""Use cases for browsing the client directory."""

from __future__ import annotations

from vetportal.application.gateways import ClientGateway
from vetportal.application.listing import (
    ClientFilters,
    Page,
    build_page,
    client_filter_spec,
)
from vetportal.domain.entities import Client


def list_clients(
    gateway: ClientGateway,
    *,
    filters: ClientFilters | None = None,
    page: int = 1,
    page_size: int = 10,
    window_size: int = 5,
) -> Page[Client]:
    """Return one page of clients matching ``filters``."""

    clients = gateway.list_clients(filters)
    return build_page(
        clients,
        spec_builder=client_filter_spec,
        filters=filters,
        page=page,
        page_size=page_size,
        window_size=window_size,
    )


def search_clients(gateway: ClientGateway, term: str) -> list[Client]:
    """Return clients whose name or email contains ``term``."""

    term = term.strip()
    if not term:
        return []
    return gateway.search_clients(term)


def list_cities(gateway: ClientGateway) -> list[str]:
    return gateway.cities()


def list_states(gateway: ClientGateway) -> list[str]:
    return gateway.states()


def export_clients_csv(gateway: ClientGateway, filters: ClientFilters | None = None) -> bytes:
    return gateway.export_csv(filters)
