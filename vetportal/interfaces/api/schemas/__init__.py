from .appointment import (
    AppointmentCreate,
    AppointmentRead,
    AppointmentStatsRead,
    AppointmentStatusUpdate,
    AppointmentUpdate,
    DoctorRead,
)
from .client import (
    ClientCreate,
    ClientPetRead,
    ClientRead,
    ClientStatisticsRead,
    ClientUpdate,
    ContactInfoCreate,
    ContactInfoRead,
    ContactInfoUpdate,
    VisitHistoryRead,
)
from .common import OperationResultRead, PageRead
from .dashboard import AdminStatsRead
from .notification import (
    NotificationAddResponse,
    NotificationCreate,
    NotificationFeedRead,
    NotificationRead,
)
from .pet import (
    MedicalDocumentRead,
    MedicalRecordCreate,
    MedicalRecordRead,
    MedicalRecordUpdate,
    OwnerRead,
    PetCreate,
    PetRead,
    PetStatsRead,
    PetUpdate,
    VaccinationCreate,
    VaccinationRead,
    VaccinationStatsRead,
    VaccinationUpdate,
)
from .profile import (
    PasswordChangeRequest,
    PasswordValidationRequest,
    UserProfileRead,
    UserProfileUpdate,
)

__all__ = [
    "AdminStatsRead",
    "AppointmentCreate",
    "AppointmentRead",
    "AppointmentStatsRead",
    "AppointmentStatusUpdate",
    "AppointmentUpdate",
    "ClientCreate",
    "ClientPetRead",
    "ClientRead",
    "ClientStatisticsRead",
    "ClientUpdate",
    "ContactInfoCreate",
    "ContactInfoRead",
    "ContactInfoUpdate",
    "DoctorRead",
    "MedicalDocumentRead",
    "MedicalRecordCreate",
    "MedicalRecordRead",
    "MedicalRecordUpdate",
    "NotificationAddResponse",
    "NotificationCreate",
    "NotificationFeedRead",
    "NotificationRead",
    "OperationResultRead",
    "OwnerRead",
    "PageRead",
    "PasswordChangeRequest",
    "PasswordValidationRequest",
    "PetCreate",
    "PetRead",
    "PetStatsRead",
    "PetUpdate",
    "UserProfileRead",
    "UserProfileUpdate",
    "VaccinationCreate",
    "VaccinationRead",
    "VaccinationStatsRead",
    "VaccinationUpdate",
    "VisitHistoryRead",
]
