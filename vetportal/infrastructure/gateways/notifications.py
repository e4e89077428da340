"""Remote gateway for appointment notifications."""

from __future__ import annotations

from urllib.parse import quote

from vetportal.domain.entities import Notification
from vetportal.infrastructure.http import BackendClient
from vetportal.utils import build_entities


class RemoteNotificationGateway:
    """Notification endpoints of the clinic backend.

    There is no offline counterpart: the refresh workflow decides what to do
    when these calls fail.
    """

    def __init__(self, api: BackendClient) -> None:
        self._api = api

    def general(self) -> list[Notification]:
        return build_entities(Notification, self._api.get("/appointment-notifications"))

    def for_user(self, email: str) -> list[Notification]:
        path = f"/appointment-notifications/user/{quote(email, safe='')}"
        return build_entities(Notification, self._api.get(path))


__all__ = ["RemoteNotificationGateway"]
