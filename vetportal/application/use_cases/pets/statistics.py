"""Use cases for the pet administration counters."""

from __future__ import annotations

from vetportal.application.gateways import PetGateway
from vetportal.domain.entities import PetStats, VaccinationStats


def get_pet_stats(gateway: PetGateway) -> PetStats:
    return gateway.pet_stats()


def get_vaccination_stats(gateway: PetGateway) -> VaccinationStats:
    return gateway.vaccination_stats()
