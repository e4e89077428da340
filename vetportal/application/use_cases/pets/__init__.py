"""Use cases for pets, owners and their medical history."""

from .list_pets import list_pets, list_user_pets
from .manage_pets import create_pet, delete_pet, find_pet, get_pet, update_pet
from .medical_history import (
    create_medical_record,
    create_vaccination,
    delete_document,
    delete_medical_record,
    delete_vaccination,
    download_document,
    list_documents,
    list_medical_records,
    list_vaccinations,
    update_medical_record,
    update_vaccination,
    upload_document,
)
from .owners import get_owner, list_owner_pets, search_owners
from .statistics import get_pet_stats, get_vaccination_stats

__all__ = [
    "create_medical_record",
    "create_pet",
    "create_vaccination",
    "delete_document",
    "delete_medical_record",
    "delete_pet",
    "delete_vaccination",
    "download_document",
    "find_pet",
    "get_owner",
    "get_pet",
    "get_pet_stats",
    "get_vaccination_stats",
    "list_documents",
    "list_medical_records",
    "list_owner_pets",
    "list_pets",
    "list_user_pets",
    "list_vaccinations",
    "search_owners",
    "update_medical_record",
    "update_pet",
    "update_vaccination",
    "upload_document",
]
