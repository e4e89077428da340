"""Use cases for medical records, vaccinations and documents of a pet."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from vetportal.application.gateways import PetGateway
from vetportal.domain.entities import (
    DOCUMENT_TYPES,
    DocumentUpload,
    MedicalDocument,
    MedicalRecord,
    VaccinationRecord,
)

MAX_DOCUMENT_SIZE = 10 * 1024 * 1024
ALLOWED_DOCUMENT_CONTENT_TYPES = (
    "application/pdf",
    "image/jpeg",
    "image/jpg",
    "image/png",
    "image/gif",
    "image/bmp",
    "image/webp",
    "application/msword",
    "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
)


def list_medical_records(gateway: PetGateway, pet_id: int) -> list[MedicalRecord]:
    return gateway.list_medical_records(pet_id)


def create_medical_record(
    gateway: PetGateway, pet_id: int, data: Mapping[str, Any]
) -> MedicalRecord:
    return gateway.create_medical_record(pet_id, data)


def update_medical_record(
    gateway: PetGateway, pet_id: int, record_id: int, changes: Mapping[str, Any]
) -> MedicalRecord:
    return gateway.update_medical_record(pet_id, record_id, changes)


def delete_medical_record(gateway: PetGateway, pet_id: int, record_id: int) -> bool:
    return gateway.delete_medical_record(pet_id, record_id)


def list_vaccinations(gateway: PetGateway, pet_id: int) -> list[VaccinationRecord]:
    return gateway.list_vaccinations(pet_id)


def create_vaccination(
    gateway: PetGateway, pet_id: int, data: Mapping[str, Any]
) -> VaccinationRecord:
    return gateway.create_vaccination(pet_id, data)


def update_vaccination(
    gateway: PetGateway, pet_id: int, record_id: int, changes: Mapping[str, Any]
) -> VaccinationRecord:
    return gateway.update_vaccination(pet_id, record_id, changes)


def delete_vaccination(gateway: PetGateway, pet_id: int, record_id: int) -> bool:
    return gateway.delete_vaccination(pet_id, record_id)


def list_documents(gateway: PetGateway, pet_id: int) -> list[MedicalDocument]:
    return gateway.list_documents(pet_id)


def upload_document(gateway: PetGateway, pet_id: int, upload: DocumentUpload) -> MedicalDocument:
    """Validate ``upload`` and forward it to the backend."""

    if not upload.content:
        raise ValueError("The uploaded file is empty")
    if upload.size > MAX_DOCUMENT_SIZE:
        raise ValueError("The uploaded file exceeds the 10 MB limit")
    if upload.content_type not in ALLOWED_DOCUMENT_CONTENT_TYPES:
        raise ValueError("Invalid file type. Upload PDF, image or document files only")
    if upload.document_type and upload.document_type not in DOCUMENT_TYPES:
        raise ValueError(f"Unsupported document type: {upload.document_type}")
    return gateway.upload_document(pet_id, upload)


def delete_document(gateway: PetGateway, pet_id: int, document_id: int) -> bool:
    return gateway.delete_document(pet_id, document_id)


def download_document(gateway: PetGateway, pet_id: int, document_id: int) -> bytes:
    return gateway.download_document(pet_id, document_id)
