"""Remote gateway for user profiles and credentials."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any
from urllib.parse import quote

from vetportal.domain.entities import OperationResult, UserProfile
from vetportal.infrastructure.gateways.base import command_result
from vetportal.infrastructure.http import BackendClient
from vetportal.utils import build_entity, entity_to_payload


class RemoteUserGateway:
    def __init__(self, api: BackendClient) -> None:
        self._api = api

    def get_profile(self, email: str) -> UserProfile:
        return build_entity(UserProfile, self._api.get(f"/user/profile/{quote(email, safe='')}"))

    def update_profile(self, email: str, changes: Mapping[str, Any]) -> OperationResult:
        payload = self._api.put(
            f"/user/profile/{quote(email, safe='')}", json=entity_to_payload(changes)
        )
        return command_result(payload, "Profile updated successfully")

    def change_password(
        self,
        email: str,
        current_password: str,
        new_password: str,
        new_password_confirmation: str,
    ) -> OperationResult:
        # The backend expects snake_case keys on this endpoint.
        payload = self._api.post(
            "/user/change-password",
            json={
                "email": email,
                "current_password": current_password,
                "new_password": new_password,
                "new_password_confirmation": new_password_confirmation,
            },
        )
        return command_result(payload, "Password changed successfully")

    def validate_password(self, email: str, password: str) -> OperationResult:
        payload = self._api.post(
            "/user/validate-password", json={"email": email, "password": password}
        )
        return command_result(payload, "Password is valid")

    def get_user(self, user_id: int) -> UserProfile:
        return build_entity(UserProfile, self._api.get(f"/user/{user_id}"))


__all__ = ["RemoteUserGateway"]
