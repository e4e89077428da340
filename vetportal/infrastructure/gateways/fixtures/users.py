"""Offline answers for profile endpoints."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from vetportal.domain.entities import OperationResult, UserProfile


class FixtureUserGateway:
    def get_profile(self, email: str) -> UserProfile:
        return UserProfile(
            name="John Doe", email=email, phone="1234567890", contact_number="1234567890"
        )

    def update_profile(self, email: str, changes: Mapping[str, Any]) -> OperationResult:
        return OperationResult(success=False, message="Failed to update profile")

    def change_password(
        self,
        email: str,
        current_password: str,
        new_password: str,
        new_password_confirmation: str,
    ) -> OperationResult:
        return OperationResult(success=False, message="Failed to change password")

    def validate_password(self, email: str, password: str) -> OperationResult:
        return OperationResult(success=False, message="Failed to validate password")

    def get_user(self, user_id: int) -> UserProfile:
        return UserProfile(name="Unknown User", email="unknown@example.com", phone="0000000000")


__all__ = ["FixtureUserGateway"]
