"""Tests for settings loading and session token handling."""

from __future__ import annotations

from datetime import timedelta

import pytest
from pydantic import ValidationError

from vetportal.config import get_settings, reset_settings_cache
from vetportal.infrastructure.security import (
    create_access_token,
    decode_access_token,
    email_from_token,
)


def test_settings_read_the_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LOG_LEVEL", " debug ")
    monkeypatch.setenv("DEFAULT_PAGE_SIZE", "25")
    reset_settings_cache()

    settings = get_settings()

    assert settings.log_level == "DEBUG"
    assert settings.default_page_size == 25
    assert get_settings() is settings


def test_unknown_log_level_is_rejected(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LOG_LEVEL", "chatty")
    reset_settings_cache()

    with pytest.raises(ValidationError):
        get_settings()


def test_token_round_trip_normalizes_the_email() -> None:
    token = create_access_token(" Jane@Example.com ")

    assert decode_access_token(token)["sub"] == " Jane@Example.com "
    assert email_from_token(token) == "jane@example.com"


def test_expired_or_malformed_tokens_are_anonymous() -> None:
    expired = create_access_token("jane@example.com", expires_delta=timedelta(seconds=-5))

    assert email_from_token(expired) is None
    assert email_from_token("not-a-token") is None
    assert email_from_token(None) is None


def test_tokens_require_a_secret(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("SECRET_KEY")
    reset_settings_cache()

    with pytest.raises(ValueError):
        create_access_token("jane@example.com")
