"""Schemas for pet, owner and medical history endpoints."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class PetBase(BaseModel):
    name: str = Field(..., min_length=1)
    type: str = Field(..., min_length=1)
    breed: str = Field(..., min_length=1)
    age: int = Field(..., ge=0)
    owner: str = Field(..., min_length=3, description="Owner email")
    gender: str | None = None
    weight: float | None = Field(default=None, ge=0)
    color: str | None = None
    microchip_id: str | None = None
    date_of_birth: str | None = None
    notes: str | None = None


class PetCreate(PetBase):
    """Payload required to register a pet."""


class PetUpdate(BaseModel):
    name: str | None = Field(default=None, min_length=1)
    type: str | None = None
    breed: str | None = None
    age: int | None = Field(default=None, ge=0)
    owner: str | None = None
    gender: str | None = None
    weight: float | None = Field(default=None, ge=0)
    color: str | None = None
    microchip_id: str | None = None
    date_of_birth: str | None = None
    is_active: bool | None = None
    notes: str | None = None

    model_config = ConfigDict(extra="forbid")


class PetRead(BaseModel):
    id: int | None
    name: str | None
    type: str | None
    breed: str | None
    age: int | None
    owner: str | None
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

    model_config = ConfigDict(from_attributes=True)


class OwnerRead(BaseModel):
    email: str | None
    name: str | None
    phone: str | None = None
    address: str | None = None
    pet_count: int | None = None

    model_config = ConfigDict(from_attributes=True)


class MedicalRecordCreate(BaseModel):
    visit_date: str = Field(..., min_length=1)
    veterinarian: str = Field(..., min_length=1)
    diagnosis: str = Field(..., min_length=1)
    treatment: str = Field(..., min_length=1)
    medications: str | None = None
    symptoms: str | None = None
    notes: str | None = None
    follow_up_date: str | None = None
    visit_type: str = "routine"
    status: str = "completed"
    weight: float | None = None
    temperature: float | None = None
    cost: float | None = None


class MedicalRecordUpdate(BaseModel):
    visit_date: str | None = None
    veterinarian: str | None = None
    diagnosis: str | None = None
    treatment: str | None = None
    medications: str | None = None
    symptoms: str | None = None
    notes: str | None = None
    follow_up_date: str | None = None
    visit_type: str | None = None
    status: str | None = None
    weight: float | None = None
    temperature: float | None = None
    cost: float | None = None

    model_config = ConfigDict(extra="forbid")


class MedicalRecordRead(MedicalRecordUpdate):
    id: int | None
    pet_id: int | None
    pet_name: str | None = None
    created_at: str | None = None
    updated_at: str | None = None

    model_config = ConfigDict(from_attributes=True, extra="ignore")


class VaccinationCreate(BaseModel):
    vaccine_name: str = Field(..., min_length=1)
    vaccine_type: str = Field(..., min_length=1)
    administered_date: str = Field(..., min_length=1)
    veterinarian: str = Field(..., min_length=1)
    next_due_date: str | None = None
    batch_number: str | None = None
    manufacturer: str | None = None
    site: str | None = None
    reactions: str | None = None
    notes: str | None = None
    status: str = "completed"
    is_core: bool | None = None


class VaccinationUpdate(BaseModel):
    vaccine_name: str | None = None
    vaccine_type: str | None = None
    administered_date: str | None = None
    veterinarian: str | None = None
    next_due_date: str | None = None
    batch_number: str | None = None
    manufacturer: str | None = None
    site: str | None = None
    reactions: str | None = None
    notes: str | None = None
    status: str | None = None
    is_core: bool | None = None

    model_config = ConfigDict(extra="forbid")


class VaccinationRead(VaccinationUpdate):
    id: int | None
    pet_id: int | None
    pet_name: str | None = None
    created_at: str | None = None
    updated_at: str | None = None

    model_config = ConfigDict(from_attributes=True, extra="ignore")


class MedicalDocumentRead(BaseModel):
    id: int | None
    pet_id: int | None
    file_name: str | None
    original_file_name: str | None = None
    pet_name: str | None = None
    is_public: bool | None = None
    file_type: str | None = None
    file_size: int | None = None
    file_path: str | None = None
    document_type: str | None = None
    description: str | None = None
    tags: list[str] = Field(default_factory=list)
    related_visit_id: int | None = None
    upload_date: str | None = None
    uploaded_by: str | None = None
    created_at: str | None = None
    updated_at: str | None = None

    model_config = ConfigDict(from_attributes=True)


class PetStatsRead(BaseModel):
    total_pets: int
    active_pets: int
    inactive_pets: int
    pets_by_type: dict[str, int] = Field(default_factory=dict)
    recent_registrations: int

    model_config = ConfigDict(from_attributes=True)


class VaccinationStatsRead(BaseModel):
    total_vaccinations: int
    upcoming_vaccinations: int
    overdue_vaccinations: int
    vaccinations_by_type: dict[str, int] = Field(default_factory=dict)

    model_config = ConfigDict(from_attributes=True)


__all__ = [
    "MedicalDocumentRead",
    "MedicalRecordCreate",
    "MedicalRecordRead",
    "MedicalRecordUpdate",
    "OwnerRead",
    "PetCreate",
    "PetRead",
    "PetStatsRead",
    "PetUpdate",
    "VaccinationCreate",
    "VaccinationRead",
    "VaccinationStatsRead",
    "VaccinationUpdate",
]
