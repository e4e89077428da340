"""Domain entities describing clinic clients."""

from __future__ import annotations

from dataclasses import dataclass, field

CONTACT_METHODS = ("email", "phone", "sms")


@dataclass
class ClientPet:
    """Reduced pet representation embedded in client payloads."""

    id: int | None
    name: str
    type: str
    breed: str
    age: int
    gender: str | None = None
    registration_date: str | None = None
    last_visit: str | None = None
    is_active: bool | None = None


@dataclass
class Client:
    """A pet owner registered with the clinic."""

    id: int | None
    name: str
    email: str
    phone: str | None = None
    contact_number: str | None = None
    address: str | None = None
    city: str | None = None
    state: str | None = None
    zip_code: str | None = None
    date_of_birth: str | None = None
    emergency_contact: str | None = None
    emergency_phone: str | None = None
    registration_date: str | None = None
    last_visit: str | None = None
    total_visits: int | None = None
    total_pets: int | None = None
    is_active: bool | None = None
    preferred_contact_method: str | None = None
    email_notifications: bool | None = None
    sms_notifications: bool | None = None
    notes: str | None = None
    created_at: str | None = None
    updated_at: str | None = None


@dataclass
class ContactInfo:
    """An additional contact channel for a client."""

    id: int | None
    client_id: int
    type: str
    contact_method: str
    value: str
    label: str | None = None
    is_primary: bool | None = None
    is_active: bool | None = None
    created_at: str | None = None
    updated_at: str | None = None


@dataclass
class VisitHistory:
    """A past or scheduled visit of a client."""

    id: int | None
    client_id: int
    visit_date: str
    visit_type: str
    veterinarian: str
    status: str
    pet_id: int | None = None
    diagnosis: str | None = None
    treatment: str | None = None
    notes: str | None = None
    cost: float | None = None


@dataclass
class ClientStatistics:
    """Aggregate figures shown on the client administration screen."""

    total_clients: int
    active_clients: int
    inactive_clients: int
    new_clients_this_month: int
    total_pets_owned: int
    average_pets_per_client: float
    clients_with_multiple_pets: int
    recent_registrations: list[Client] = field(default_factory=list)
    top_clients_by_visits: list[Client] = field(default_factory=list)


__all__ = [
    "Client",
    "ClientPet",
    "ClientStatistics",
    "ContactInfo",
    "VisitHistory",
    "CONTACT_METHODS",
]
