"""Routes for pet administration and medical history."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, File, Form, HTTPException, Query, Response, UploadFile, status

from vetportal.application.gateways import PetGateway
from vetportal.application.listing import PetFilters
from vetportal.application.use_cases.pets import (
    create_medical_record as create_medical_record_uc,
    create_pet as create_pet_uc,
    create_vaccination as create_vaccination_uc,
    delete_document as delete_document_uc,
    delete_medical_record as delete_medical_record_uc,
    delete_pet as delete_pet_uc,
    delete_vaccination as delete_vaccination_uc,
    download_document as download_document_uc,
    find_pet as find_pet_uc,
    get_pet as get_pet_uc,
    get_pet_stats as get_pet_stats_uc,
    get_vaccination_stats as get_vaccination_stats_uc,
    list_documents as list_documents_uc,
    list_medical_records as list_medical_records_uc,
    list_pets as list_pets_uc,
    list_user_pets as list_user_pets_uc,
    list_vaccinations as list_vaccinations_uc,
    update_medical_record as update_medical_record_uc,
    update_pet as update_pet_uc,
    update_vaccination as update_vaccination_uc,
    upload_document as upload_document_uc,
)
from vetportal.domain.entities import DocumentUpload
from vetportal.interfaces.api.dependencies import get_pet_gateway
from vetportal.interfaces.api.routes_helpers import (
    Pagination,
    changes_from,
    http_error_from,
    pagination_params,
)
from vetportal.interfaces.api.schemas import (
    MedicalDocumentRead,
    MedicalRecordCreate,
    MedicalRecordRead,
    MedicalRecordUpdate,
    OperationResultRead,
    PageRead,
    PetCreate,
    PetRead,
    PetStatsRead,
    PetUpdate,
    VaccinationCreate,
    VaccinationRead,
    VaccinationStatsRead,
    VaccinationUpdate,
)

router = APIRouter(prefix="/pets", tags=["pets"])
logger = logging.getLogger(__name__)


def pet_filters(
    search: str | None = None,
    pet_type: str | None = Query(None, alias="type"),
    breed: str | None = None,
    owner: str | None = None,
    age_min: float | None = Query(None, ge=0),
    age_max: float | None = Query(None, ge=0),
    is_active: bool | None = None,
    registration_date_from: str | None = None,
    registration_date_to: str | None = None,
) -> PetFilters:
    return PetFilters(
        search=search,
        type=pet_type,
        breed=breed,
        owner=owner,
        age_min=age_min,
        age_max=age_max,
        is_active=is_active,
        registration_date_from=registration_date_from,
        registration_date_to=registration_date_to,
    )


@router.get("/", response_model=PageRead[PetRead])
def list_pets(
    filters: PetFilters = Depends(pet_filters),
    pagination: Pagination = Depends(pagination_params),
    gateway: PetGateway = Depends(get_pet_gateway),
):
    """Return one page of pets matching the query filters."""

    page = list_pets_uc(gateway, filters=filters, **pagination.as_kwargs())
    return PageRead[PetRead].model_validate(page)


@router.get("/stats", response_model=PetStatsRead)
def read_pet_stats(gateway: PetGateway = Depends(get_pet_gateway)):
    return PetStatsRead.model_validate(get_pet_stats_uc(gateway))


@router.get("/vaccination-stats", response_model=VaccinationStatsRead)
def read_vaccination_stats(gateway: PetGateway = Depends(get_pet_gateway)):
    return VaccinationStatsRead.model_validate(get_vaccination_stats_uc(gateway))


@router.get("/user/{email}", response_model=list[PetRead])
def list_user_pets(email: str, gateway: PetGateway = Depends(get_pet_gateway)):
    """Return the pets registered by the client ``email``."""

    return [PetRead.model_validate(pet) for pet in list_user_pets_uc(gateway, email)]


@router.get("/find", response_model=PetRead)
def find_pet(
    petname: str = Query(..., min_length=1),
    owner: str = Query(..., min_length=1),
    gateway: PetGateway = Depends(get_pet_gateway),
):
    """Look a pet up by its name and owner email."""

    try:
        pet = find_pet_uc(gateway, petname=petname, owner=owner)
    except ValueError as exc:
        raise http_error_from(exc) from exc
    return PetRead.model_validate(pet)


@router.get("/{pet_id}", response_model=PetRead)
def read_pet(pet_id: int, gateway: PetGateway = Depends(get_pet_gateway)):
    try:
        pet = get_pet_uc(gateway, pet_id)
    except ValueError as exc:
        raise http_error_from(exc) from exc
    return PetRead.model_validate(pet)


@router.post("/", response_model=PetRead, status_code=status.HTTP_201_CREATED)
def create_pet(pet_in: PetCreate, gateway: PetGateway = Depends(get_pet_gateway)):
    pet = create_pet_uc(gateway, pet_in.model_dump(exclude_none=True))
    logger.info("Registered pet %s for %s", pet.name, pet.owner)
    return PetRead.model_validate(pet)


@router.put("/{pet_id}", response_model=PetRead)
def update_pet(pet_id: int, pet_in: PetUpdate, gateway: PetGateway = Depends(get_pet_gateway)):
    try:
        pet = update_pet_uc(gateway, pet_id, changes_from(pet_in))
    except ValueError as exc:
        raise http_error_from(exc) from exc
    return PetRead.model_validate(pet)


@router.delete("/{pet_id}", response_model=OperationResultRead)
def delete_pet(pet_id: int, gateway: PetGateway = Depends(get_pet_gateway)):
    deleted = delete_pet_uc(gateway, pet_id)
    return OperationResultRead(
        success=deleted, message="Pet deleted" if deleted else "Pet could not be deleted"
    )


@router.get("/{pet_id}/medical-records", response_model=list[MedicalRecordRead])
def list_medical_records(pet_id: int, gateway: PetGateway = Depends(get_pet_gateway)):
    records = list_medical_records_uc(gateway, pet_id)
    return [MedicalRecordRead.model_validate(record) for record in records]


@router.post(
    "/{pet_id}/medical-records",
    response_model=MedicalRecordRead,
    status_code=status.HTTP_201_CREATED,
)
def create_medical_record(
    pet_id: int,
    record_in: MedicalRecordCreate,
    gateway: PetGateway = Depends(get_pet_gateway),
):
    record = create_medical_record_uc(gateway, pet_id, record_in.model_dump(exclude_none=True))
    return MedicalRecordRead.model_validate(record)


@router.put("/{pet_id}/medical-records/{record_id}", response_model=MedicalRecordRead)
def update_medical_record(
    pet_id: int,
    record_id: int,
    record_in: MedicalRecordUpdate,
    gateway: PetGateway = Depends(get_pet_gateway),
):
    record = update_medical_record_uc(gateway, pet_id, record_id, changes_from(record_in))
    return MedicalRecordRead.model_validate(record)


@router.delete("/{pet_id}/medical-records/{record_id}", response_model=OperationResultRead)
def delete_medical_record(
    pet_id: int, record_id: int, gateway: PetGateway = Depends(get_pet_gateway)
):
    return OperationResultRead(success=delete_medical_record_uc(gateway, pet_id, record_id))


@router.get("/{pet_id}/vaccinations", response_model=list[VaccinationRead])
def list_vaccinations(pet_id: int, gateway: PetGateway = Depends(get_pet_gateway)):
    records = list_vaccinations_uc(gateway, pet_id)
    return [VaccinationRead.model_validate(record) for record in records]


@router.post(
    "/{pet_id}/vaccinations",
    response_model=VaccinationRead,
    status_code=status.HTTP_201_CREATED,
)
def create_vaccination(
    pet_id: int,
    vaccination_in: VaccinationCreate,
    gateway: PetGateway = Depends(get_pet_gateway),
):
    record = create_vaccination_uc(gateway, pet_id, vaccination_in.model_dump(exclude_none=True))
    return VaccinationRead.model_validate(record)


@router.put("/{pet_id}/vaccinations/{record_id}", response_model=VaccinationRead)
def update_vaccination(
    pet_id: int,
    record_id: int,
    vaccination_in: VaccinationUpdate,
    gateway: PetGateway = Depends(get_pet_gateway),
):
    record = update_vaccination_uc(gateway, pet_id, record_id, changes_from(vaccination_in))
    return VaccinationRead.model_validate(record)


@router.delete("/{pet_id}/vaccinations/{record_id}", response_model=OperationResultRead)
def delete_vaccination(
    pet_id: int, record_id: int, gateway: PetGateway = Depends(get_pet_gateway)
):
    return OperationResultRead(success=delete_vaccination_uc(gateway, pet_id, record_id))


@router.get("/{pet_id}/documents", response_model=list[MedicalDocumentRead])
def list_documents(pet_id: int, gateway: PetGateway = Depends(get_pet_gateway)):
    documents = list_documents_uc(gateway, pet_id)
    return [MedicalDocumentRead.model_validate(document) for document in documents]


@router.post(
    "/{pet_id}/documents",
    response_model=MedicalDocumentRead,
    status_code=status.HTTP_201_CREATED,
)
def upload_document(
    pet_id: int,
    file: UploadFile = File(...),
    document_type: str = Form("other"),
    description: str = Form(""),
    tags: str = Form("", description="Comma separated tags"),
    related_visit_id: int | None = Form(None),
    gateway: PetGateway = Depends(get_pet_gateway),
):
    """Upload a medical document for ``pet_id``."""

    upload = DocumentUpload(
        file_name=file.filename or "document",
        content=file.file.read(),
        content_type=file.content_type or "application/octet-stream",
        document_type=document_type,
        description=description,
        tags=[tag.strip() for tag in tags.split(",") if tag.strip()],
        related_visit_id=related_visit_id,
    )
    try:
        document = upload_document_uc(gateway, pet_id, upload)
    except ValueError as exc:
        raise http_error_from(exc) from exc
    return MedicalDocumentRead.model_validate(document)


@router.delete("/{pet_id}/documents/{document_id}", response_model=OperationResultRead)
def delete_document(
    pet_id: int, document_id: int, gateway: PetGateway = Depends(get_pet_gateway)
):
    return OperationResultRead(success=delete_document_uc(gateway, pet_id, document_id))


@router.get("/{pet_id}/documents/{document_id}/download")
def download_document(
    pet_id: int, document_id: int, gateway: PetGateway = Depends(get_pet_gateway)
) -> Response:
    content = download_document_uc(gateway, pet_id, document_id)
    if not content:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Document not found")
    return Response(
        content=content,
        media_type="application/octet-stream",
        headers={"Content-Disposition": f'attachment; filename="document-{document_id}"'},
    )
