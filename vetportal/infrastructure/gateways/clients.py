"""Remote gateway for client administration."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from vetportal.application.listing import ClientFilters, to_query_params
from vetportal.domain.entities import (
    Client,
    ClientPet,
    ClientStatistics,
    ContactInfo,
    OperationResult,
    VisitHistory,
)
from vetportal.infrastructure.gateways.base import command_result
from vetportal.infrastructure.http import BackendClient
from vetportal.utils import build_entities, build_entity, entity_to_payload


def _client_rows(payload: Any) -> Any:
    # The listing endpoint wraps rows as {"data": [...]} or {"clients": [...]}.
    if isinstance(payload, Mapping):
        return payload.get("data") or payload.get("clients") or []
    return payload


class RemoteClientGateway:
    """Client endpoints of the administration backend."""

    def __init__(self, admin: BackendClient) -> None:
        self._admin = admin

    def list_clients(self, filters: ClientFilters | None = None) -> list[Client]:
        payload = self._admin.get("/clients", params=to_query_params(filters))
        return build_entities(Client, _client_rows(payload))

    def get_client(self, client_id: int) -> Client:
        return build_entity(Client, self._admin.get(f"/clients/{client_id}"))

    def create_client(self, data: Mapping[str, Any]) -> Client:
        return build_entity(Client, self._admin.post("/clients", json=entity_to_payload(data)))

    def update_client(self, client_id: int, changes: Mapping[str, Any]) -> Client:
        payload = self._admin.put(f"/clients/{client_id}", json=entity_to_payload(changes))
        return build_entity(Client, payload)

    def delete_client(self, client_id: int) -> OperationResult:
        payload = self._admin.delete(f"/clients/{client_id}")
        return command_result(payload, "Client deleted successfully")

    def search_clients(self, term: str) -> list[Client]:
        return build_entities(Client, self._admin.get("/clients/search", params={"q": term}))

    # Contact information

    def list_contacts(self, client_id: int) -> list[ContactInfo]:
        return build_entities(ContactInfo, self._admin.get(f"/clients/{client_id}/contacts"))

    def add_contact(self, client_id: int, data: Mapping[str, Any]) -> ContactInfo:
        payload = self._admin.post(f"/clients/{client_id}/contacts", json=entity_to_payload(data))
        return build_entity(ContactInfo, payload)

    def update_contact(
        self, client_id: int, contact_id: int, changes: Mapping[str, Any]
    ) -> ContactInfo:
        payload = self._admin.put(
            f"/clients/{client_id}/contacts/{contact_id}", json=entity_to_payload(changes)
        )
        return build_entity(ContactInfo, payload)

    def delete_contact(self, client_id: int, contact_id: int) -> OperationResult:
        payload = self._admin.delete(f"/clients/{client_id}/contacts/{contact_id}")
        return command_result(payload, "Contact information deleted successfully")

    # Pets

    def list_client_pets(self, client_id: int) -> list[ClientPet]:
        return build_entities(ClientPet, self._admin.get(f"/clients/{client_id}/pets"))

    def link_pet(self, client_id: int, pet_id: int) -> OperationResult:
        payload = self._admin.post(f"/clients/{client_id}/pets/{pet_id}", json={})
        return command_result(payload, "Pet linked to client successfully")

    def unlink_pet(self, client_id: int, pet_id: int) -> OperationResult:
        payload = self._admin.delete(f"/clients/{client_id}/pets/{pet_id}")
        return command_result(payload, "Pet unlinked from client successfully")

    # Visits

    def list_visits(self, client_id: int) -> list[VisitHistory]:
        return build_entities(VisitHistory, self._admin.get(f"/clients/{client_id}/visits"))

    def list_pet_visits(self, client_id: int, pet_id: int) -> list[VisitHistory]:
        payload = self._admin.get(f"/clients/{client_id}/pets/{pet_id}/visits")
        return build_entities(VisitHistory, payload)

    # Reference data

    def client_statistics(self) -> ClientStatistics:
        payload = self._admin.get("/clients/statistics")
        statistics = build_entity(ClientStatistics, payload)
        statistics.recent_registrations = build_entities(Client, statistics.recent_registrations)
        statistics.top_clients_by_visits = build_entities(Client, statistics.top_clients_by_visits)
        return statistics

    def cities(self) -> list[str]:
        payload = self._admin.get("/clients/cities")
        return [str(item) for item in payload] if isinstance(payload, list) else []

    def states(self) -> list[str]:
        payload = self._admin.get("/clients/states")
        return [str(item) for item in payload] if isinstance(payload, list) else []

    def export_csv(self, filters: ClientFilters | None = None) -> bytes:
        return self._admin.get_bytes("/clients/export", params=to_query_params(filters))


__all__ = ["RemoteClientGateway"]
