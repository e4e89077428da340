"""Tests for profile validation."""

from __future__ import annotations

import pytest

from vetportal.application.use_cases.profile import change_password, update_profile
from vetportal.domain.entities import OperationResult
from vetportal.infrastructure.gateways.fixtures import FixtureUserGateway


class RecordingUsers(FixtureUserGateway):
    def __init__(self) -> None:
        self.calls: list[tuple] = []

    def update_profile(self, email, changes):
        self.calls.append(("update", email, dict(changes)))
        return OperationResult(success=True, message="Profile updated")

    def change_password(self, email, current_password, new_password, new_password_confirmation):
        self.calls.append(("password", email, new_password))
        return OperationResult(success=True, message="Password changed")


@pytest.mark.parametrize(
    ("current", "new", "confirmation", "message"),
    [
        ("abc", "abcdefg1", "abcdefg1", "Current password is too short"),
        ("secret1", "short1", "short1", "at least 8 characters"),
        ("secret1", "abcdefgh", "abcdefgh", "including a letter and a number"),
        ("secret1", "12345678", "12345678", "including a letter and a number"),
        ("secret1", "abcdefg1", "abcdefg2", "do not match"),
    ],
)
def test_change_password_rejects_invalid_forms(current, new, confirmation, message) -> None:
    users = RecordingUsers()

    with pytest.raises(ValueError, match=message):
        change_password(
            users,
            "john@example.com",
            current_password=current,
            new_password=new,
            new_password_confirmation=confirmation,
        )

    assert users.calls == []


def test_change_password_forwards_valid_forms() -> None:
    users = RecordingUsers()

    result = change_password(
        users,
        "john@example.com",
        current_password="secret1",
        new_password="newSecret9",
        new_password_confirmation="newSecret9",
    )

    assert result.success is True
    assert users.calls == [("password", "john@example.com", "newSecret9")]


@pytest.mark.parametrize(
    ("changes", "message"),
    [
        ({}, "No changes provided"),
        ({"name": " J "}, "at least 2 characters"),
        ({"phone": "12-34"}, "valid phone number"),
    ],
)
def test_update_profile_validates_changes(changes, message) -> None:
    with pytest.raises(ValueError, match=message):
        update_profile(RecordingUsers(), "john@example.com", changes)


def test_update_profile_accepts_international_numbers() -> None:
    users = RecordingUsers()

    update_profile(users, "john@example.com", {"contact_number": "+1 (555) 123-4567"})

    assert users.calls == [
        ("update", "john@example.com", {"contact_number": "+1 (555) 123-4567"})
    ]
