"""Domain entities for the signed-in user's profile."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class UserProfile:
    """Contact details of a portal user."""

    name: str
    email: str
    id: int | None = None
    phone: str | None = None
    contact_number: str | None = None
    created_at: str | None = None
    updated_at: str | None = None


@dataclass
class OperationResult:
    """Outcome reported by backend commands that do not return an entity."""

    success: bool
    message: str | None = None


__all__ = ["UserProfile", "OperationResult"]
