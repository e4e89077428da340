"""Canned pet records served while the backend is unreachable."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import replace
from typing import Any

from vetportal.application.listing import (
    Equals,
    FilterSpec,
    PetFilters,
    evaluate,
    owner_search_spec,
    pet_filter_spec,
)
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
from vetportal.infrastructure.gateways.base import FixtureIds
from vetportal.utils import build_entity, today_in_app_timezone

UNKNOWN_OWNER_EMAIL = "unknown@example.com"


def fixture_pets() -> list[Pet]:
    return [
        Pet(id=1, name="Buddy", type="Dog", breed="Golden Retriever", age=3, gender="male",
            owner="john.doe@example.com", owner_name="John Doe",
            registration_date="2023-01-15", last_visit="2024-01-10", is_active=True),
        Pet(id=2, name="Whiskers", type="Cat", breed="Persian", age=2, gender="female",
            owner="jane.smith@example.com", owner_name="Jane Smith",
            registration_date="2023-06-20", last_visit="2024-01-08", is_active=True),
        Pet(id=3, name="Milo", type="Cat", breed="Siamese", age=5, gender="male",
            owner="john.doe@example.com", owner_name="John Doe",
            registration_date="2022-11-02", last_visit="2024-05-15", is_active=True),
        Pet(id=4, name="Rex", type="Dog", breed="German Shepherd", age=7, gender="male",
            owner="bob.johnson@example.com", owner_name="Bob Johnson",
            registration_date="2021-04-18", last_visit="2023-12-01", is_active=True),
        Pet(id=5, name="Kiwi", type="Bird", breed="Budgerigar", age=1, gender="female",
            owner="bob.johnson@example.com", owner_name="Bob Johnson",
            registration_date="2024-02-03", is_active=True),
        Pet(id=6, name="Shadow", type="Dog", breed="Labrador", age=11, gender="male",
            owner="bob.johnson@example.com", owner_name="Bob Johnson",
            registration_date="2019-08-27", last_visit="2022-06-30", is_active=False),
    ]


def fixture_owners() -> list[Owner]:
    return [
        Owner(email="john.doe@example.com", name="John Doe", phone="123-456-7890", pet_count=2),
        Owner(email="jane.smith@example.com", name="Jane Smith", phone="098-765-4321", pet_count=1),
        Owner(email="bob.johnson@example.com", name="Bob Johnson", phone="555-123-4567", pet_count=3),
    ]


class FixturePetGateway:
    """Offline counterpart of :class:`~vetportal.infrastructure.gateways.pets.RemotePetGateway`."""

    def __init__(self, ids: FixtureIds | None = None) -> None:
        self._ids = ids or FixtureIds()

    def list_pets(self, filters: PetFilters | None = None) -> list[Pet]:
        return evaluate(fixture_pets(), pet_filter_spec(filters))

    def get_pet(self, pet_id: int) -> Pet:
        for pet in fixture_pets():
            if pet.id == pet_id:
                return pet
        return Pet(id=pet_id, name="Unknown Pet", type="Unknown", breed="Unknown", age=0,
                   owner=UNKNOWN_OWNER_EMAIL)

    def create_pet(self, data: Mapping[str, Any]) -> Pet:
        pet = build_entity(Pet, data)
        return replace(pet, id=self._ids.next(), created_at=today_in_app_timezone().isoformat())

    def update_pet(self, pet_id: int, changes: Mapping[str, Any]) -> Pet:
        current = self.get_pet(pet_id)
        known = {key: value for key, value in changes.items() if hasattr(current, key)}
        return replace(current, updated_at=today_in_app_timezone().isoformat(), **known)

    def delete_pet(self, pet_id: int) -> bool:
        return True

    def list_pets_for_user(self, email: str) -> list[Pet]:
        return self.list_pets_by_owner(email)

    def find_pet(self, petname: str, owner: str) -> Pet | None:
        spec = FilterSpec.of(Equals("owner", owner))
        for pet in evaluate(fixture_pets(), spec):
            if pet.name.lower() == petname.lower():
                return pet
        return None

    def search_owners(self, query: str) -> list[Owner]:
        return evaluate(fixture_owners(), owner_search_spec(query))

    def get_owner(self, email: str) -> Owner:
        return Owner(email=email, name="Unknown Owner", phone="N/A", pet_count=0)

    def list_pets_by_owner(self, email: str) -> list[Pet]:
        return evaluate(fixture_pets(), FilterSpec.of(Equals("owner", email)))

    def list_medical_records(self, pet_id: int) -> list[MedicalRecord]:
        return [
            MedicalRecord(id=1, pet_id=pet_id, visit_date="2024-01-15", veterinarian="Dr. Smith",
                          diagnosis="Routine checkup",
                          treatment="Vaccination and general examination",
                          visit_type="routine", status="completed"),
        ]

    def create_medical_record(self, pet_id: int, data: Mapping[str, Any]) -> MedicalRecord:
        record = build_entity(MedicalRecord, data)
        return replace(record, id=self._ids.next(), pet_id=pet_id,
                       created_at=today_in_app_timezone().isoformat())

    def update_medical_record(
        self, pet_id: int, record_id: int, changes: Mapping[str, Any]
    ) -> MedicalRecord:
        return MedicalRecord(
            id=record_id,
            pet_id=pet_id,
            visit_date=changes.get("visit_date") or today_in_app_timezone().isoformat(),
            veterinarian=changes.get("veterinarian") or "Dr. Unknown",
            diagnosis=changes.get("diagnosis") or "Unknown",
            treatment=changes.get("treatment") or "Unknown",
            visit_type=changes.get("visit_type") or "routine",
            status=changes.get("status") or "completed",
            updated_at=today_in_app_timezone().isoformat(),
        )

    def delete_medical_record(self, pet_id: int, record_id: int) -> bool:
        return True

    def list_vaccinations(self, pet_id: int) -> list[VaccinationRecord]:
        return [
            VaccinationRecord(id=1, pet_id=pet_id, vaccine_name="Rabies", vaccine_type="Core",
                              administered_date="2024-01-15", next_due_date="2025-01-15",
                              veterinarian="Dr. Smith", status="completed", is_core=True),
        ]

    def create_vaccination(self, pet_id: int, data: Mapping[str, Any]) -> VaccinationRecord:
        record = build_entity(VaccinationRecord, data)
        return replace(record, id=self._ids.next(), pet_id=pet_id,
                       created_at=today_in_app_timezone().isoformat())

    def update_vaccination(
        self, pet_id: int, record_id: int, changes: Mapping[str, Any]
    ) -> VaccinationRecord:
        return VaccinationRecord(
            id=record_id,
            pet_id=pet_id,
            vaccine_name=changes.get("vaccine_name") or "Unknown Vaccine",
            vaccine_type=changes.get("vaccine_type") or "Unknown",
            administered_date=changes.get("administered_date") or today_in_app_timezone().isoformat(),
            veterinarian=changes.get("veterinarian") or "Dr. Unknown",
            status=changes.get("status") or "completed",
            updated_at=today_in_app_timezone().isoformat(),
        )

    def delete_vaccination(self, pet_id: int, record_id: int) -> bool:
        return True

    def list_documents(self, pet_id: int) -> list[MedicalDocument]:
        return [
            MedicalDocument(
                id=1,
                pet_id=pet_id,
                file_name="medical_report_001.pdf",
                original_file_name="Medical Report - January 2024.pdf",
                file_type="application/pdf",
                file_size=1024000,
                file_path="/uploads/medical/medical_report_001.pdf",
                document_type="medical_report",
                description="Routine checkup report",
                upload_date="2024-01-15",
                uploaded_by="admin@example.com",
            ),
        ]

    def upload_document(self, pet_id: int, upload: DocumentUpload) -> MedicalDocument:
        document_id = self._ids.next()
        stored_name = f"doc_{document_id}_{upload.file_name}"
        today = today_in_app_timezone().isoformat()
        return MedicalDocument(
            id=document_id,
            pet_id=pet_id,
            file_name=stored_name,
            original_file_name=upload.file_name,
            file_type=upload.content_type,
            file_size=upload.size,
            file_path=f"/uploads/medical/{stored_name}",
            document_type=upload.document_type or "other",
            description=upload.description or "",
            tags=list(upload.tags),
            related_visit_id=upload.related_visit_id,
            upload_date=today,
            uploaded_by="admin@example.com",
            created_at=today,
        )

    def delete_document(self, pet_id: int, document_id: int) -> bool:
        return True

    def download_document(self, pet_id: int, document_id: int) -> bytes:
        return b""

    def pet_stats(self) -> PetStats:
        return PetStats(
            total_pets=50,
            active_pets=45,
            inactive_pets=5,
            pets_by_type={"Dog": 30, "Cat": 15, "Bird": 3, "Other": 2},
            recent_registrations=8,
        )

    def vaccination_stats(self) -> VaccinationStats:
        return VaccinationStats(
            total_vaccinations=120,
            upcoming_vaccinations=15,
            overdue_vaccinations=5,
            vaccinations_by_type={"Rabies": 45, "DHPP": 30, "Bordetella": 25, "Other": 20},
        )


__all__ = ["FixturePetGateway", "fixture_owners", "fixture_pets"]
