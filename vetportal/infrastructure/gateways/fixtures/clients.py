"""Canned client records served while the backend is unreachable."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import replace
from typing import Any

from vetportal.application.listing import (
    ClientFilters,
    FilterSpec,
    SearchAny,
    client_filter_spec,
    evaluate,
)
from vetportal.domain.entities import (
    Client,
    ClientPet,
    ClientStatistics,
    ContactInfo,
    OperationResult,
    VisitHistory,
)
from vetportal.infrastructure.gateways.base import FixtureIds
from vetportal.utils import build_entity, now_in_app_timezone

CITIES = [
    "New York", "Los Angeles", "Chicago", "Houston", "Phoenix", "Philadelphia",
    "San Antonio", "San Diego", "Dallas", "San Jose", "Austin", "Jacksonville",
]
STATES = [
    "California", "Texas", "Florida", "New York", "Pennsylvania", "Illinois",
    "Ohio", "Georgia", "North Carolina", "Michigan", "New Jersey", "Virginia",
]


def fixture_clients() -> list[Client]:
    return [
        Client(
            id=1, name="John Smith", email="john.smith@email.com",
            phone="+1-555-0101", contact_number="+1-555-0101",
            address="123 Main St", city="New York", state="NY", zip_code="10001",
            date_of_birth="1985-06-15",
            emergency_contact="Jane Smith", emergency_phone="+1-555-0102",
            registration_date="2023-01-15", last_visit="2024-01-10",
            total_visits=12, total_pets=2, is_active=True,
            preferred_contact_method="email",
            email_notifications=True, sms_notifications=False,
            notes="Prefers morning appointments",
        ),
        Client(
            id=2, name="Sarah Johnson", email="sarah.johnson@email.com",
            phone="+1-555-0201", contact_number="+1-555-0201",
            address="456 Oak Ave", city="Los Angeles", state="CA", zip_code="90210",
            date_of_birth="1990-03-22",
            emergency_contact="Mike Johnson", emergency_phone="+1-555-0202",
            registration_date="2023-03-10", last_visit="2024-01-08",
            total_visits=8, total_pets=1, is_active=True,
            preferred_contact_method="phone",
            email_notifications=True, sms_notifications=True,
            notes="Cat owner, very attentive",
        ),
        Client(
            id=3, name="Michael Brown", email="michael.brown@email.com",
            phone="+1-555-0301", contact_number="+1-555-0301",
            address="789 Pine Rd", city="Chicago", state="IL", zip_code="60601",
            date_of_birth="1978-11-08",
            emergency_contact="Lisa Brown", emergency_phone="+1-555-0302",
            registration_date="2022-08-20", last_visit="2024-01-05",
            total_visits=15, total_pets=3, is_active=True,
            preferred_contact_method="sms",
            email_notifications=False, sms_notifications=True,
            notes="Multiple pet owner, regular checkups",
        ),
    ]


def _fixture_visits(client_id: int) -> list[VisitHistory]:
    return [
        VisitHistory(
            id=1, client_id=client_id, pet_id=1, visit_date="2024-01-10",
            visit_type="Regular Checkup", veterinarian="Dr. Smith",
            diagnosis="Healthy", treatment="Routine vaccination",
            notes="Pet is in good health", cost=150.00, status="completed",
        ),
        VisitHistory(
            id=2, client_id=client_id, pet_id=2, visit_date="2024-01-08",
            visit_type="Dental Cleaning", veterinarian="Dr. Johnson",
            diagnosis="Mild tartar buildup", treatment="Dental cleaning and polishing",
            notes="Recommend regular dental care", cost=280.00, status="completed",
        ),
    ]


class FixtureClientGateway:
    """Offline counterpart of :class:`~vetportal.infrastructure.gateways.clients.RemoteClientGateway`."""

    def __init__(self, ids: FixtureIds | None = None) -> None:
        self._ids = ids or FixtureIds()

    def list_clients(self, filters: ClientFilters | None = None) -> list[Client]:
        return evaluate(fixture_clients(), client_filter_spec(filters))

    def get_client(self, client_id: int) -> Client:
        clients = fixture_clients()
        for client in clients:
            if client.id == client_id:
                return client
        return clients[0]

    def create_client(self, data: Mapping[str, Any]) -> Client:
        client = build_entity(Client, data)
        return replace(
            client,
            id=self._ids.next(),
            registration_date=now_in_app_timezone().isoformat(),
            is_active=True,
            total_visits=0,
            total_pets=0,
        )

    def update_client(self, client_id: int, changes: Mapping[str, Any]) -> Client:
        current = self.get_client(client_id)
        known = {key: value for key, value in changes.items() if hasattr(current, key)}
        return replace(current, **known)

    def delete_client(self, client_id: int) -> OperationResult:
        return OperationResult(success=True, message="Client deleted successfully")

    def search_clients(self, term: str) -> list[Client]:
        return evaluate(fixture_clients(), FilterSpec.of(SearchAny(("name", "email"), term)))

    def list_contacts(self, client_id: int) -> list[ContactInfo]:
        return [
            ContactInfo(id=1, client_id=client_id, type="primary", contact_method="email",
                        value="john.smith@email.com", label="Primary Email",
                        is_primary=True, is_active=True, created_at="2023-01-15"),
            ContactInfo(id=2, client_id=client_id, type="primary", contact_method="phone",
                        value="+1-555-0101", label="Primary Phone",
                        is_primary=True, is_active=True, created_at="2023-01-15"),
            ContactInfo(id=3, client_id=client_id, type="emergency", contact_method="phone",
                        value="+1-555-0102", label="Emergency Contact",
                        is_primary=False, is_active=True, created_at="2023-01-15"),
        ]

    def add_contact(self, client_id: int, data: Mapping[str, Any]) -> ContactInfo:
        contact = build_entity(ContactInfo, data)
        return replace(
            contact,
            id=self._ids.next(),
            client_id=client_id,
            is_active=True,
            created_at=now_in_app_timezone().isoformat(),
        )

    def update_contact(
        self, client_id: int, contact_id: int, changes: Mapping[str, Any]
    ) -> ContactInfo:
        contact = build_entity(ContactInfo, changes)
        return replace(contact, id=contact_id, client_id=client_id)

    def delete_contact(self, client_id: int, contact_id: int) -> OperationResult:
        return OperationResult(success=True, message="Contact information deleted successfully")

    def list_client_pets(self, client_id: int) -> list[ClientPet]:
        return [
            ClientPet(id=1, name="Buddy", type="Dog", breed="Golden Retriever", age=3,
                      gender="male", registration_date="2023-01-15",
                      last_visit="2024-01-10", is_active=True),
            ClientPet(id=2, name="Whiskers", type="Cat", breed="Persian", age=2,
                      gender="female", registration_date="2023-06-20",
                      last_visit="2024-01-08", is_active=True),
        ]

    def link_pet(self, client_id: int, pet_id: int) -> OperationResult:
        return OperationResult(success=True, message="Pet linked to client successfully")

    def unlink_pet(self, client_id: int, pet_id: int) -> OperationResult:
        return OperationResult(success=True, message="Pet unlinked from client successfully")

    def list_visits(self, client_id: int) -> list[VisitHistory]:
        return _fixture_visits(client_id)

    def list_pet_visits(self, client_id: int, pet_id: int) -> list[VisitHistory]:
        return [visit for visit in _fixture_visits(client_id) if visit.pet_id == pet_id]

    def client_statistics(self) -> ClientStatistics:
        clients = fixture_clients()
        return ClientStatistics(
            total_clients=156,
            active_clients=142,
            inactive_clients=14,
            new_clients_this_month=12,
            total_pets_owned=298,
            average_pets_per_client=1.9,
            clients_with_multiple_pets=89,
            recent_registrations=clients[:5],
            top_clients_by_visits=clients[:3],
        )

    def cities(self) -> list[str]:
        return list(CITIES)

    def states(self) -> list[str]:
        return list(STATES)

    def export_csv(self, filters: ClientFilters | None = None) -> bytes:
        return b""


__all__ = ["CITIES", "STATES", "FixtureClientGateway", "fixture_clients"]
