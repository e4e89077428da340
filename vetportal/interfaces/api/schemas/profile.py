"""Schemas for profile endpoints."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class UserProfileRead(BaseModel):
    name: str | None
    email: str | None
    id: int | None = None
    phone: str | None = None
    contact_number: str | None = None
    created_at: str | None = None
    updated_at: str | None = None

    model_config = ConfigDict(from_attributes=True)


class UserProfileUpdate(BaseModel):
    name: str | None = None
    phone: str | None = None
    contact_number: str | None = None

    model_config = ConfigDict(extra="forbid")


class PasswordChangeRequest(BaseModel):
    current_password: str = Field(..., min_length=1)
    new_password: str = Field(..., min_length=1)
    new_password_confirmation: str = Field(..., min_length=1)


class PasswordValidationRequest(BaseModel):
    password: str = Field(..., min_length=1)


__all__ = [
    "PasswordChangeRequest",
    "PasswordValidationRequest",
    "UserProfileRead",
    "UserProfileUpdate",
]
