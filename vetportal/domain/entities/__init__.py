"""Domain entities exposed by the application."""

from .appointment import (
    APPOINTMENT_STATUS_CANCELLED,
    APPOINTMENT_STATUS_COMPLETED,
    APPOINTMENT_STATUS_CONFIRMED,
    APPOINTMENT_STATUS_PENDING,
    APPOINTMENT_STATUSES,
    Appointment,
    Doctor,
)
from .client import (
    CONTACT_METHODS,
    Client,
    ClientPet,
    ClientStatistics,
    ContactInfo,
    VisitHistory,
)
from .medical import (
    DOCUMENT_TYPES,
    MEDICAL_RECORD_STATUSES,
    VACCINATION_STATUSES,
    VISIT_TYPES,
    DocumentUpload,
    MedicalDocument,
    MedicalRecord,
    VaccinationRecord,
)
from .notification import NOTIFICATION_PRIORITIES, NOTIFICATION_TYPES, Notification
from .pet import PET_GENDERS, Owner, Pet
from .stats import AdminStats, AppointmentStats, PetStats, VaccinationStats
from .user_profile import OperationResult, UserProfile

__all__ = [
    "Appointment",
    "Doctor",
    "APPOINTMENT_STATUSES",
    "APPOINTMENT_STATUS_PENDING",
    "APPOINTMENT_STATUS_CONFIRMED",
    "APPOINTMENT_STATUS_COMPLETED",
    "APPOINTMENT_STATUS_CANCELLED",
    "Client",
    "ClientPet",
    "ClientStatistics",
    "ContactInfo",
    "VisitHistory",
    "CONTACT_METHODS",
    "MedicalRecord",
    "VaccinationRecord",
    "MedicalDocument",
    "DocumentUpload",
    "VISIT_TYPES",
    "MEDICAL_RECORD_STATUSES",
    "VACCINATION_STATUSES",
    "DOCUMENT_TYPES",
    "Notification",
    "NOTIFICATION_TYPES",
    "NOTIFICATION_PRIORITIES",
    "Pet",
    "Owner",
    "PET_GENDERS",
    "AdminStats",
    "AppointmentStats",
    "PetStats",
    "VaccinationStats",
    "UserProfile",
    "OperationResult",
]
