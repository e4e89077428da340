"""Domain entities describing pets and their owners."""

from __future__ import annotations

from dataclasses import dataclass

PET_GENDERS = ("male", "female")


@dataclass
class Pet:
    """A patient of the clinic as returned by the backend."""

    id: int | None
    name: str
    type: str
    breed: str
    age: int
    owner: str
    gender: str | None = None
    weight: float | None = None
    color: str | None = None
    microchip_id: str | None = None
    owner_name: str | None = None
    owner_phone: str | None = None
    owner_address: str | None = None
    date_of_birth: str | None = None
    registration_date: str | None = None
    last_visit: str | None = None
    is_active: bool | None = None
    profile_image: str | None = None
    notes: str | None = None
    created_at: str | None = None
    updated_at: str | None = None


@dataclass
class Owner:
    """Pet owner summary keyed by e-mail address."""

    email: str
    name: str
    phone: str | None = None
    address: str | None = None
    pet_count: int | None = None


__all__ = ["Pet", "Owner", "PET_GENDERS"]
