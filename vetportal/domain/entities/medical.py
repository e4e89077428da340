"""Domain entities for the medical history attached to a pet."""

from __future__ import annotations

from dataclasses import dataclass, field

VISIT_TYPES = ("routine", "emergency", "surgery", "consultation")
MEDICAL_RECORD_STATUSES = ("ongoing", "completed", "cancelled")
VACCINATION_STATUSES = ("completed", "overdue", "upcoming")
DOCUMENT_TYPES = (
    "medical_report",
    "xray",
    "blood_test",
    "vaccination_certificate",
    "surgery_report",
    "prescription",
    "other",
)


@dataclass
class MedicalRecord:
    """A single clinical visit recorded for a pet."""

    id: int | None
    pet_id: int
    visit_date: str
    veterinarian: str
    diagnosis: str
    treatment: str
    visit_type: str = "routine"
    status: str = "completed"
    pet_name: str | None = None
    medications: str | None = None
    follow_up_date: str | None = None
    symptoms: str | None = None
    temperature: float | None = None
    weight: float | None = None
    notes: str | None = None
    cost: float | None = None
    created_at: str | None = None
    updated_at: str | None = None


@dataclass
class VaccinationRecord:
    """A vaccine administered to a pet."""

    id: int | None
    pet_id: int
    vaccine_name: str
    vaccine_type: str
    administered_date: str
    veterinarian: str
    status: str = "completed"
    pet_name: str | None = None
    next_due_date: str | None = None
    batch_number: str | None = None
    manufacturer: str | None = None
    site: str | None = None
    reactions: str | None = None
    notes: str | None = None
    is_core: bool | None = None
    created_at: str | None = None
    updated_at: str | None = None


@dataclass
class MedicalDocument:
    """Metadata of an uploaded medical document."""

    id: int | None
    pet_id: int
    file_name: str
    original_file_name: str
    file_type: str
    file_size: int
    file_path: str
    document_type: str
    upload_date: str
    uploaded_by: str
    pet_name: str | None = None
    description: str | None = None
    is_public: bool | None = None
    tags: list[str] = field(default_factory=list)
    related_visit_id: int | None = None
    created_at: str | None = None
    updated_at: str | None = None


@dataclass
class DocumentUpload:
    """File content and metadata sent when uploading a medical document."""

    file_name: str
    content: bytes
    content_type: str = "application/octet-stream"
    document_type: str = "other"
    description: str = ""
    tags: list[str] = field(default_factory=list)
    related_visit_id: int | None = None

    @property
    def size(self) -> int:
        return len(self.content)


__all__ = [
    "MedicalRecord",
    "VaccinationRecord",
    "MedicalDocument",
    "DocumentUpload",
    "VISIT_TYPES",
    "MEDICAL_RECORD_STATUSES",
    "VACCINATION_STATUSES",
    "DOCUMENT_TYPES",
]
