"""Token helpers used to identify the portal user."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

from jose import JWTError, jwt

from vetportal.config import get_settings

DEFAULT_TOKEN_LIFETIME = timedelta(hours=1)


def create_access_token(email: str, expires_delta: timedelta | None = None) -> str:
    settings = get_settings()
    if not settings.secret_key:
        raise ValueError("SECRET_KEY is not configured")
    expire = datetime.now(timezone.utc) + (expires_delta or DEFAULT_TOKEN_LIFETIME)
    return jwt.encode(
        {"sub": email, "exp": expire}, settings.secret_key, algorithm=settings.algorithm
    )


def decode_access_token(token: str) -> dict:
    settings = get_settings()
    if not settings.secret_key:
        raise ValueError("SECRET_KEY is not configured")
    try:
        return jwt.decode(token, settings.secret_key, algorithms=[settings.algorithm])
    except JWTError as exc:
        raise ValueError("Could not validate credentials") from exc


def email_from_token(token: str | None) -> str | None:
    """Return the email carried by ``token`` or ``None`` when it is unusable."""

    if not token:
        return None
    try:
        payload = decode_access_token(token)
    except ValueError:
        return None
    subject = payload.get("sub")
    if not isinstance(subject, str) or not subject.strip():
        return None
    return subject.strip().lower()


__all__ = ["create_access_token", "decode_access_token", "email_from_token"]
