"""FastAPI dependency utilities."""

from __future__ import annotations

from functools import lru_cache

from fastapi import Depends, WebSocket
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from vetportal.application.notifications import NotificationFeed, NotificationFeedRegistry
from vetportal.config import get_settings
from vetportal.infrastructure import database
from vetportal.infrastructure.gateways import (
    FallbackGateway,
    FixtureIds,
    RemoteAppointmentGateway,
    RemoteClientGateway,
    RemoteDashboardGateway,
    RemoteNotificationGateway,
    RemotePetGateway,
    RemoteUserGateway,
)
from vetportal.infrastructure.gateways.fixtures import (
    FixtureAppointmentGateway,
    FixtureClientGateway,
    FixtureDashboardGateway,
    FixturePetGateway,
    FixtureUserGateway,
)
from vetportal.infrastructure.http import BackendClient
from vetportal.infrastructure.security import email_from_token
from vetportal.infrastructure.storage import KeyValueStore, SqlKeyValueStore

bearer_scheme = HTTPBearer(auto_error=False)


@lru_cache
def get_backend_client() -> BackendClient:
    settings = get_settings()
    return BackendClient(settings.backend_api_url, timeout=settings.request_timeout_seconds)


@lru_cache
def get_admin_client() -> BackendClient:
    settings = get_settings()
    return BackendClient(settings.admin_api_url, timeout=settings.request_timeout_seconds)


@lru_cache
def _fixture_ids() -> FixtureIds:
    return FixtureIds()


def get_pet_gateway(
    admin: BackendClient = Depends(get_admin_client),
    api: BackendClient = Depends(get_backend_client),
) -> FallbackGateway:
    return FallbackGateway(
        RemotePetGateway(admin, api),
        FixturePetGateway(_fixture_ids()),
    )


def get_client_gateway(admin: BackendClient = Depends(get_admin_client)) -> FallbackGateway:
    return FallbackGateway(RemoteClientGateway(admin), FixtureClientGateway(_fixture_ids()))


def get_appointment_gateway(
    admin: BackendClient = Depends(get_admin_client),
    api: BackendClient = Depends(get_backend_client),
) -> FallbackGateway:
    return FallbackGateway(
        RemoteAppointmentGateway(admin, api),
        FixtureAppointmentGateway(),
    )


def get_dashboard_gateway(
    admin: BackendClient = Depends(get_admin_client),
    api: BackendClient = Depends(get_backend_client),
) -> FallbackGateway:
    return FallbackGateway(
        RemoteDashboardGateway(admin, api),
        FixtureDashboardGateway(),
    )


def get_user_gateway(api: BackendClient = Depends(get_backend_client)) -> FallbackGateway:
    return FallbackGateway(RemoteUserGateway(api), FixtureUserGateway())


def get_notification_gateway(
    api: BackendClient = Depends(get_backend_client),
) -> RemoteNotificationGateway:
    """Notifications have no canned answer; the refresh chain handles failures."""

    return RemoteNotificationGateway(api)


@lru_cache
def get_key_value_store() -> KeyValueStore:
    return SqlKeyValueStore(lambda: database.SessionLocal())


@lru_cache
def get_feed_registry() -> NotificationFeedRegistry:
    return NotificationFeedRegistry(get_key_value_store())


def get_current_user_email(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> str | None:
    """Return the email of the signed-in user, or ``None`` for anonymous callers."""

    if credentials is None:
        return None
    return email_from_token(credentials.credentials)


def get_notification_feed(
    email: str | None = Depends(get_current_user_email),
    registry: NotificationFeedRegistry = Depends(get_feed_registry),
) -> NotificationFeed:
    return registry.feed_for(email)


def websocket_user_email(websocket: WebSocket) -> str | None:
    """Read the session token of a websocket from its ``token`` query parameter."""

    return email_from_token(websocket.query_params.get("token"))


def reset_dependency_caches() -> None:
    """Drop cached clients and stores so that new settings take effect."""

    for cached in (
        get_backend_client,
        get_admin_client,
        _fixture_ids,
        get_key_value_store,
        get_feed_registry,
    ):
        cached.cache_clear()


__all__ = [
    "bearer_scheme",
    "get_admin_client",
    "get_appointment_gateway",
    "get_backend_client",
    "get_client_gateway",
    "get_current_user_email",
    "get_dashboard_gateway",
    "get_feed_registry",
    "get_key_value_store",
    "get_notification_feed",
    "get_notification_gateway",
    "get_pet_gateway",
    "get_user_gateway",
    "reset_dependency_caches",
    "websocket_user_email",
]
