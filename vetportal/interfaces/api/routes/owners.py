"""Routes to look up pet owners."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query

from vetportal.application.gateways import PetGateway
from vetportal.application.use_cases.pets import (
    get_owner as get_owner_uc,
    list_owner_pets as list_owner_pets_uc,
    search_owners as search_owners_uc,
)
from vetportal.interfaces.api.dependencies import get_pet_gateway
from vetportal.interfaces.api.schemas import OwnerRead, PetRead

router = APIRouter(prefix="/owners", tags=["owners"])


@router.get("/search", response_model=list[OwnerRead])
def search_owners(q: str = Query(""), gateway: PetGateway = Depends(get_pet_gateway)):
    """Return owners whose name or email contains ``q``."""

    return [OwnerRead.model_validate(owner) for owner in search_owners_uc(gateway, q)]


@router.get("/{email}", response_model=OwnerRead)
def read_owner(email: str, gateway: PetGateway = Depends(get_pet_gateway)):
    return OwnerRead.model_validate(get_owner_uc(gateway, email))


@router.get("/{email}/pets", response_model=list[PetRead])
def list_owner_pets(email: str, gateway: PetGateway = Depends(get_pet_gateway)):
    return [PetRead.model_validate(pet) for pet in list_owner_pets_uc(gateway, email)]
