"""Interfaces the use cases expect from their data sources."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Protocol

from vetportal.application.listing import AppointmentFilters, ClientFilters, PetFilters
from vetportal.domain.entities import (
    AdminStats,
    Appointment,
    AppointmentStats,
    Client,
    ClientPet,
    ClientStatistics,
    ContactInfo,
    Doctor,
    DocumentUpload,
    MedicalDocument,
    MedicalRecord,
    Notification,
    OperationResult,
    Owner,
    Pet,
    PetStats,
    UserProfile,
    VaccinationRecord,
    VaccinationStats,
    VisitHistory,
)


class PetGateway(Protocol):
    def list_pets(self, filters: PetFilters | None = None) -> list[Pet]: ...
    def get_pet(self, pet_id: int) -> Pet: ...
    def create_pet(self, data: Mapping[str, Any]) -> Pet: ...
    def update_pet(self, pet_id: int, changes: Mapping[str, Any]) -> Pet: ...
    def delete_pet(self, pet_id: int) -> bool: ...
    def list_pets_for_user(self, email: str) -> list[Pet]: ...
    def find_pet(self, petname: str, owner: str) -> Pet | None: ...
    def search_owners(self, query: str) -> list[Owner]: ...
    def get_owner(self, email: str) -> Owner: ...
    def list_pets_by_owner(self, email: str) -> list[Pet]: ...
    def list_medical_records(self, pet_id: int) -> list[MedicalRecord]: ...
    def create_medical_record(self, pet_id: int, data: Mapping[str, Any]) -> MedicalRecord: ...
    def update_medical_record(
        self, pet_id: int, record_id: int, changes: Mapping[str, Any]
    ) -> MedicalRecord: ...
    def delete_medical_record(self, pet_id: int, record_id: int) -> bool: ...
    def list_vaccinations(self, pet_id: int) -> list[VaccinationRecord]: ...
    def create_vaccination(self, pet_id: int, data: Mapping[str, Any]) -> VaccinationRecord: ...
    def update_vaccination(
        self, pet_id: int, record_id: int, changes: Mapping[str, Any]
    ) -> VaccinationRecord: ...
    def delete_vaccination(self, pet_id: int, record_id: int) -> bool: ...
    def list_documents(self, pet_id: int) -> list[MedicalDocument]: ...
    def upload_document(self, pet_id: int, upload: DocumentUpload) -> MedicalDocument: ...
    def delete_document(self, pet_id: int, document_id: int) -> bool: ...
    def download_document(self, pet_id: int, document_id: int) -> bytes: ...
    def pet_stats(self) -> PetStats: ...
    def vaccination_stats(self) -> VaccinationStats: ...


class ClientGateway(Protocol):
    def list_clients(self, filters: ClientFilters | None = None) -> list[Client]: ...
    def get_client(self, client_id: int) -> Client: ...
    def create_client(self, data: Mapping[str, Any]) -> Client: ...
    def update_client(self, client_id: int, changes: Mapping[str, Any]) -> Client: ...
    def delete_client(self, client_id: int) -> OperationResult: ...
    def search_clients(self, term: str) -> list[Client]: ...
    def list_contacts(self, client_id: int) -> list[ContactInfo]: ...
    def add_contact(self, client_id: int, data: Mapping[str, Any]) -> ContactInfo: ...
    def update_contact(
        self, client_id: int, contact_id: int, changes: Mapping[str, Any]
    ) -> ContactInfo: ...
    def delete_contact(self, client_id: int, contact_id: int) -> OperationResult: ...
    def list_client_pets(self, client_id: int) -> list[ClientPet]: ...
    def link_pet(self, client_id: int, pet_id: int) -> OperationResult: ...
    def unlink_pet(self, client_id: int, pet_id: int) -> OperationResult: ...
    def list_visits(self, client_id: int) -> list[VisitHistory]: ...
    def list_pet_visits(self, client_id: int, pet_id: int) -> list[VisitHistory]: ...
    def client_statistics(self) -> ClientStatistics: ...
    def cities(self) -> list[str]: ...
    def states(self) -> list[str]: ...
    def export_csv(self, filters: ClientFilters | None = None) -> bytes: ...


class AppointmentGateway(Protocol):
    def list_appointments(self, filters: AppointmentFilters | None = None) -> list[Appointment]: ...
    def list_basic(self) -> list[Appointment]: ...
    def get_appointment(self, appointment_id: int) -> Appointment | None: ...
    def create_appointment(self, data: Mapping[str, Any]) -> OperationResult: ...
    def update_appointment(
        self, appointment_id: int, changes: Mapping[str, Any]
    ) -> OperationResult: ...
    def delete_appointment(self, appointment_id: int) -> OperationResult: ...
    def update_status(self, appointment_id: int, status: str) -> OperationResult: ...
    def accept_appointment(self, appointment_id: int) -> OperationResult: ...
    def decline_appointment(self, appointment_id: int) -> OperationResult: ...
    def list_doctors(self) -> list[Doctor]: ...
    def appointment_stats(self) -> AppointmentStats: ...


class NotificationGateway(Protocol):
    def general(self) -> list[Notification]: ...
    def for_user(self, email: str) -> list[Notification]: ...


class DashboardGateway(Protocol):
    def admin_stats(self) -> AdminStats: ...
    def todays_appointments(self) -> list[Appointment]: ...
    def admin_notifications(self) -> list[Notification]: ...
    def mark_notification_read(self, notification_id: int) -> OperationResult: ...
    def user_count(self) -> int: ...
    def appointment_count(self) -> int: ...
    def pet_count(self) -> int: ...


class UserGateway(Protocol):
    def get_profile(self, email: str) -> UserProfile: ...
    def update_profile(self, email: str, changes: Mapping[str, Any]) -> OperationResult: ...
    def change_password(
        self,
        email: str,
        current_password: str,
        new_password: str,
        new_password_confirmation: str,
    ) -> OperationResult: ...
    def validate_password(self, email: str, password: str) -> OperationResult: ...
    def get_user(self, user_id: int) -> UserProfile: ...


__all__ = [
    "AppointmentGateway",
    "ClientGateway",
    "DashboardGateway",
    "NotificationGateway",
    "PetGateway",
    "UserGateway",
]
