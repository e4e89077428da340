"""Schemas for appointment and doctor endpoints."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, EmailStr, Field

AppointmentStatus = Literal["pending", "confirmed", "completed", "cancelled"]


class AppointmentCreate(BaseModel):
    date: str = Field(..., min_length=1)
    time: str = Field(..., min_length=1)
    petname: str = Field(..., min_length=1)
    docname: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)
    email: EmailStr
    contact_number: str | None = None
    appointment_type: str | None = None
    notes: str | None = None
    pet_age: str | None = None
    pet_breed: str | None = None
    reason_for_visit: str | None = None


class AppointmentUpdate(BaseModel):
    date: str | None = None
    time: str | None = None
    petname: str | None = None
    docname: str | None = None
    name: str | None = None
    email: EmailStr | None = None
    contact_number: str | None = None
    appointment_type: str | None = None
    notes: str | None = None
    status: AppointmentStatus | None = None
    pet_age: str | None = None
    pet_breed: str | None = None
    reason_for_visit: str | None = None

    model_config = ConfigDict(extra="forbid")


class AppointmentStatusUpdate(BaseModel):
    status: AppointmentStatus


class AppointmentRead(BaseModel):
    id: int | None
    date: str | None
    time: str | None
    petname: str | None
    docname: str | None
    name: str | None
    email: str | None
    status: str | None
    contact_number: str | None = None
    appointment_type: str | None = None
    notes: str | None = None
    pet_age: str | None = None
    pet_breed: str | None = None
    reason_for_visit: str | None = None
    created_at: str | None = None
    updated_at: str | None = None

    model_config = ConfigDict(from_attributes=True)


class DoctorRead(BaseModel):
    id: int | None
    name: str | None
    specialization: str | None = None
    email: str | None = None
    phone: str | None = None
    available: bool | None = None

    model_config = ConfigDict(from_attributes=True)


class AppointmentStatsRead(BaseModel):
    total_appointments: int
    pending_appointments: int
    confirmed_appointments: int
    completed_appointments: int
    cancelled_appointments: int

    model_config = ConfigDict(from_attributes=True)


__all__ = [
    "AppointmentCreate",
    "AppointmentRead",
    "AppointmentStatsRead",
    "AppointmentStatus",
    "AppointmentStatusUpdate",
    "AppointmentUpdate",
    "DoctorRead",
]
