"""Use cases for reading and changing a single pet."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from vetportal.application.gateways import PetGateway
from vetportal.domain.entities import Pet


def get_pet(gateway: PetGateway, pet_id: int) -> Pet:
    """Return the pet identified by ``pet_id`` or raise an error."""

    pet = gateway.get_pet(pet_id)
    if pet is None or pet.id is None:
        raise ValueError("Pet not found")
    return pet


def find_pet(gateway: PetGateway, *, petname: str, owner: str) -> Pet:
    pet = gateway.find_pet(petname, owner)
    if pet is None or pet.id is None:
        raise ValueError("Pet not found")
    return pet


def create_pet(gateway: PetGateway, data: Mapping[str, Any]) -> Pet:
    return gateway.create_pet(data)


def update_pet(gateway: PetGateway, pet_id: int, changes: Mapping[str, Any]) -> Pet:
    if not changes:
        raise ValueError("No changes provided")
    return gateway.update_pet(pet_id, changes)


def delete_pet(gateway: PetGateway, pet_id: int) -> bool:
    return gateway.delete_pet(pet_id)
