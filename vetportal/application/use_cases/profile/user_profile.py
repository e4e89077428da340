"""Use cases for the signed-in user's profile."""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any

from vetportal.application.gateways import UserGateway
from vetportal.domain.entities import OperationResult, UserProfile

MIN_CURRENT_PASSWORD_LENGTH = 6
MIN_NEW_PASSWORD_LENGTH = 8
MIN_NAME_LENGTH = 2

_PHONE_PATTERN = re.compile(r"^\+?[\d\s\-()]{10,}$")
_LETTER_PATTERN = re.compile(r"[A-Za-z]")
_DIGIT_PATTERN = re.compile(r"\d")


def get_profile(gateway: UserGateway, email: str) -> UserProfile:
    return gateway.get_profile(email)


def _validate_profile_changes(changes: Mapping[str, Any]) -> None:
    name = changes.get("name")
    if name is not None and len(str(name).strip()) < MIN_NAME_LENGTH:
        raise ValueError(f"Name must be at least {MIN_NAME_LENGTH} characters long")
    for key in ("phone", "contact_number"):
        phone = changes.get(key)
        if phone and not _PHONE_PATTERN.match(str(phone)):
            raise ValueError("Please enter a valid phone number")


def update_profile(gateway: UserGateway, email: str, changes: Mapping[str, Any]) -> OperationResult:
    if not changes:
        raise ValueError("No changes provided")
    _validate_profile_changes(changes)
    return gateway.update_profile(email, changes)


def change_password(
    gateway: UserGateway,
    email: str,
    *,
    current_password: str,
    new_password: str,
    new_password_confirmation: str,
) -> OperationResult:
    """Change the password of ``email`` once the form passes local validation."""

    if len(current_password) < MIN_CURRENT_PASSWORD_LENGTH:
        raise ValueError("Current password is too short")
    if (
        len(new_password) < MIN_NEW_PASSWORD_LENGTH
        or not _LETTER_PATTERN.search(new_password)
        or not _DIGIT_PATTERN.search(new_password)
    ):
        raise ValueError(
            f"New password must have at least {MIN_NEW_PASSWORD_LENGTH} characters "
            "including a letter and a number"
        )
    if new_password != new_password_confirmation:
        raise ValueError("New passwords do not match")
    return gateway.change_password(
        email, current_password, new_password, new_password_confirmation
    )


def validate_password(gateway: UserGateway, email: str, password: str) -> OperationResult:
    return gateway.validate_password(email, password)


def get_user(gateway: UserGateway, user_id: int) -> UserProfile:
    return gateway.get_user(user_id)
