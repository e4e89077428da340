"""Remote gateway for pets, owners and their medical history."""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any
from urllib.parse import quote

from vetportal.application.listing import PetFilters, to_query_params
from vetportal.domain.entities import (
    DocumentUpload,
    MedicalDocument,
    MedicalRecord,
    Owner,
    Pet,
    PetStats,
    VaccinationRecord,
    VaccinationStats,
)
from vetportal.infrastructure.http import BackendClient
from vetportal.utils import build_entities, build_entity, entity_to_payload


class RemotePetGateway:
    """Pet management endpoints of the clinic backend."""

    def __init__(self, admin: BackendClient, api: BackendClient) -> None:
        self._admin = admin
        self._api = api

    # Pets

    def list_pets(self, filters: PetFilters | None = None) -> list[Pet]:
        return build_entities(Pet, self._admin.get("/pets", params=to_query_params(filters)))

    def get_pet(self, pet_id: int) -> Pet:
        return build_entity(Pet, self._admin.get(f"/pets/{pet_id}"))

    def create_pet(self, data: Mapping[str, Any]) -> Pet:
        return build_entity(Pet, self._admin.post("/pets", json=entity_to_payload(data)))

    def update_pet(self, pet_id: int, changes: Mapping[str, Any]) -> Pet:
        return build_entity(Pet, self._admin.put(f"/pets/{pet_id}", json=entity_to_payload(changes)))

    def delete_pet(self, pet_id: int) -> bool:
        self._admin.delete(f"/pets/{pet_id}")
        return True

    def list_pets_for_user(self, email: str) -> list[Pet]:
        return build_entities(Pet, self._api.get(f"/pets/user/{quote(email, safe='')}"))

    def find_pet(self, petname: str, owner: str) -> Pet | None:
        payload = self._api.get("/pets/search", params={"petname": petname, "owner": owner})
        if not isinstance(payload, Mapping):
            return None
        return build_entity(Pet, payload)

    # Owners

    def search_owners(self, query: str) -> list[Owner]:
        return build_entities(Owner, self._admin.get("/owners/search", params={"q": query}))

    def get_owner(self, email: str) -> Owner:
        return build_entity(Owner, self._admin.get(f"/owners/{quote(email, safe='')}"))

    def list_pets_by_owner(self, email: str) -> list[Pet]:
        return build_entities(Pet, self._admin.get(f"/owners/{quote(email, safe='')}/pets"))

    # Medical records

    def list_medical_records(self, pet_id: int) -> list[MedicalRecord]:
        return build_entities(MedicalRecord, self._admin.get(f"/pets/{pet_id}/medical-records"))

    def create_medical_record(self, pet_id: int, data: Mapping[str, Any]) -> MedicalRecord:
        payload = self._admin.post(f"/pets/{pet_id}/medical-records", json=entity_to_payload(data))
        return build_entity(MedicalRecord, payload)

    def update_medical_record(
        self, pet_id: int, record_id: int, changes: Mapping[str, Any]
    ) -> MedicalRecord:
        payload = self._admin.put(
            f"/pets/{pet_id}/medical-records/{record_id}", json=entity_to_payload(changes)
        )
        return build_entity(MedicalRecord, payload)

    def delete_medical_record(self, pet_id: int, record_id: int) -> bool:
        self._admin.delete(f"/pets/{pet_id}/medical-records/{record_id}")
        return True

    # Vaccinations

    def list_vaccinations(self, pet_id: int) -> list[VaccinationRecord]:
        return build_entities(VaccinationRecord, self._admin.get(f"/pets/{pet_id}/vaccinations"))

    def create_vaccination(self, pet_id: int, data: Mapping[str, Any]) -> VaccinationRecord:
        payload = self._admin.post(f"/pets/{pet_id}/vaccinations", json=entity_to_payload(data))
        return build_entity(VaccinationRecord, payload)

    def update_vaccination(
        self, pet_id: int, record_id: int, changes: Mapping[str, Any]
    ) -> VaccinationRecord:
        payload = self._admin.put(
            f"/pets/{pet_id}/vaccinations/{record_id}", json=entity_to_payload(changes)
        )
        return build_entity(VaccinationRecord, payload)

    def delete_vaccination(self, pet_id: int, record_id: int) -> bool:
        self._admin.delete(f"/pets/{pet_id}/vaccinations/{record_id}")
        return True

    # Documents

    def list_documents(self, pet_id: int) -> list[MedicalDocument]:
        return build_entities(MedicalDocument, self._admin.get(f"/pets/{pet_id}/documents"))

    def upload_document(self, pet_id: int, upload: DocumentUpload) -> MedicalDocument:
        form: dict[str, str] = {
            "documentType": upload.document_type or "other",
            "description": upload.description or "",
        }
        if upload.tags:
            form["tags"] = json.dumps(upload.tags)
        if upload.related_visit_id:
            form["relatedVisitId"] = str(upload.related_visit_id)
        files = {"file": (upload.file_name, upload.content, upload.content_type)}
        payload = self._admin.post(f"/pets/{pet_id}/documents", data=form, files=files)
        return build_entity(MedicalDocument, payload)

    def delete_document(self, pet_id: int, document_id: int) -> bool:
        self._admin.delete(f"/pets/{pet_id}/documents/{document_id}")
        return True

    def download_document(self, pet_id: int, document_id: int) -> bytes:
        return self._admin.get_bytes(f"/pets/{pet_id}/documents/{document_id}/download")

    # Statistics

    def pet_stats(self) -> PetStats:
        return build_entity(PetStats, self._admin.get("/pets/stats"))

    def vaccination_stats(self) -> VaccinationStats:
        return build_entity(VaccinationStats, self._admin.get("/vaccinations/stats"))


__all__ = ["RemotePetGateway"]
