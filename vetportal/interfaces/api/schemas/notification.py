"""Pydantic models describing notification payloads."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

NotificationType = Literal["reminder", "alert", "info", "appointment"]


class NotificationRead(BaseModel):
    """Representation of a notification delivered to the client."""

    message: str
    type: str
    date: str
    id: int | None = None
    user_email: str | None = None
    user_name: str | None = None
    appointment_id: int | None = None
    is_read: bool | None = None
    priority: str | None = None

    model_config = ConfigDict(from_attributes=True)


class NotificationCreate(BaseModel):
    """A single notification pushed into the live set."""

    message: str = Field(..., min_length=1)
    type: NotificationType
    date: str = Field(..., min_length=1)
    user_email: str | None = None
    user_name: str | None = None
    appointment_id: int | None = None
    priority: Literal["high", "medium", "low"] | None = None


class NotificationFeedRead(BaseModel):
    """Live notification set of the current user."""

    notifications: list[NotificationRead]
    count: int


class NotificationAddResponse(NotificationFeedRead):
    added: bool


__all__ = [
    "NotificationAddResponse",
    "NotificationCreate",
    "NotificationFeedRead",
    "NotificationRead",
    "NotificationType",
]
