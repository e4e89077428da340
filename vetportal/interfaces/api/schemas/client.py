"""Schemas for client administration endpoints."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, EmailStr, Field

ContactMethod = Literal["email", "phone", "sms"]


class ClientCreate(BaseModel):
    """Payload required to register a client."""

    name: str = Field(..., min_length=2)
    email: EmailStr
    phone: str | None = None
    contact_number: str | None = None
    address: str | None = None
    city: str | None = None
    state: str | None = None
    zip_code: str | None = None
    date_of_birth: str | None = None
    emergency_contact: str | None = None
    emergency_phone: str | None = None
    preferred_contact_method: ContactMethod | None = None
    email_notifications: bool | None = None
    sms_notifications: bool | None = None
    notes: str | None = None


class ClientUpdate(BaseModel):
    name: str | None = Field(default=None, min_length=2)
    email: EmailStr | None = None
    phone: str | None = None
    contact_number: str | None = None
    address: str | None = None
    city: str | None = None
    state: str | None = None
    zip_code: str | None = None
    date_of_birth: str | None = None
    emergency_contact: str | None = None
    emergency_phone: str | None = None
    preferred_contact_method: ContactMethod | None = None
    email_notifications: bool | None = None
    sms_notifications: bool | None = None
    is_active: bool | None = None
    notes: str | None = None

    model_config = ConfigDict(extra="forbid")


class ClientRead(BaseModel):
    id: int | None
    name: str | None
    email: str | None
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

    model_config = ConfigDict(from_attributes=True)


class ContactInfoCreate(BaseModel):
    type: str = Field(..., min_length=1)
    contact_method: ContactMethod
    value: str = Field(..., min_length=1)
    label: str | None = None
    is_primary: bool | None = None


class ContactInfoUpdate(BaseModel):
    type: str | None = None
    contact_method: ContactMethod | None = None
    value: str | None = None
    label: str | None = None
    is_primary: bool | None = None
    is_active: bool | None = None

    model_config = ConfigDict(extra="forbid")


class ContactInfoRead(BaseModel):
    id: int | None
    client_id: int | None
    type: str | None
    contact_method: str | None
    value: str | None
    label: str | None = None
    is_primary: bool | None = None
    is_active: bool | None = None
    created_at: str | None = None
    updated_at: str | None = None

    model_config = ConfigDict(from_attributes=True)


class ClientPetRead(BaseModel):
    id: int | None
    name: str | None
    type: str | None
    breed: str | None
    age: int | None
    gender: str | None = None
    registration_date: str | None = None
    last_visit: str | None = None
    is_active: bool | None = None

    model_config = ConfigDict(from_attributes=True)


class VisitHistoryRead(BaseModel):
    id: int | None
    client_id: int | None
    visit_date: str | None
    visit_type: str | None
    veterinarian: str | None
    status: str | None
    pet_id: int | None = None
    diagnosis: str | None = None
    treatment: str | None = None
    notes: str | None = None
    cost: float | None = None

    model_config = ConfigDict(from_attributes=True)


class ClientStatisticsRead(BaseModel):
    total_clients: int | None
    active_clients: int | None
    inactive_clients: int | None
    new_clients_this_month: int | None
    total_pets_owned: int | None
    average_pets_per_client: float | None
    clients_with_multiple_pets: int | None
    recent_registrations: list[ClientRead] = Field(default_factory=list)
    top_clients_by_visits: list[ClientRead] = Field(default_factory=list)

    model_config = ConfigDict(from_attributes=True)


__all__ = [
    "ClientCreate",
    "ClientPetRead",
    "ClientRead",
    "ClientStatisticsRead",
    "ClientUpdate",
    "ContactInfoCreate",
    "ContactInfoRead",
    "ContactInfoUpdate",
    "VisitHistoryRead",
]
