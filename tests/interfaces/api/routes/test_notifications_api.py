"""Tests for the notification endpoints and websocket."""

from __future__ import annotations

import asyncio

import httpx
import pytest

pytest.importorskip("fastapi")
from fastapi.testclient import TestClient

from vetportal.application.notifications import NotificationFeedRegistry
from vetportal.infrastructure.http import BackendClient
from vetportal.infrastructure.security import create_access_token
from vetportal.infrastructure.storage import InMemoryKeyValueStore
from vetportal.interfaces.api.dependencies import (
    get_admin_client,
    get_backend_client,
    get_feed_registry,
)

GENERAL = [
    {"message": "Clinic closed on Friday", "type": "info", "date": "2024-01-01"},
    {"message": "Vaccination week", "type": "reminder", "date": "2024-01-02"},
]
PERSONAL = [
    {"message": "Buddy is due for a checkup", "type": "reminder", "date": "2024-01-03",
     "userEmail": "jane@example.com"},
]


def _backend(request: httpx.Request) -> httpx.Response:
    if request.url.path.startswith("/api/appointment-notifications/user/"):
        return httpx.Response(200, json=PERSONAL)
    if request.url.path == "/api/appointment-notifications":
        return httpx.Response(200, json=GENERAL)
    raise httpx.ConnectError("connection refused", request=request)


@pytest.fixture()
def client():
    from main import create_app

    backend = BackendClient("http://backend.test/api", transport=httpx.MockTransport(_backend))
    registry = NotificationFeedRegistry(InMemoryKeyValueStore())

    app = create_app()
    app.dependency_overrides[get_admin_client] = lambda: backend
    app.dependency_overrides[get_backend_client] = lambda: backend
    app.dependency_overrides[get_feed_registry] = lambda: registry
    with TestClient(app) as test_client:
        yield test_client


def _messages(response: httpx.Response) -> list[str]:
    return [item["message"] for item in response.json()["notifications"]]


def test_refresh_publishes_general_notifications(client: TestClient) -> None:
    response = client.post("/notifications/refresh")

    assert response.status_code == 200
    assert response.json()["count"] == 2
    assert _messages(client.get("/notifications/")) == [
        "Clinic closed on Friday",
        "Vaccination week",
    ]


def test_signed_in_user_gets_personal_notifications(client: TestClient) -> None:
    headers = {"Authorization": f"Bearer {create_access_token('Jane@example.com')}"}

    response = client.post("/notifications/refresh", headers=headers)

    assert _messages(response) == ["Buddy is due for a checkup"]
    assert response.json()["notifications"][0]["user_email"] == "jane@example.com"
    assert client.get("/notifications/").json()["count"] == 0


def test_invalid_token_is_treated_as_anonymous(client: TestClient) -> None:
    response = client.post("/notifications/refresh", headers={"Authorization": "Bearer nope"})

    assert response.json()["count"] == 2


def test_dismissed_notification_stays_hidden_until_cleared(client: TestClient) -> None:
    client.post("/notifications/refresh")

    dismissed = client.post("/notifications/0/dismiss")
    refreshed = client.post("/notifications/refresh")

    assert _messages(dismissed) == ["Vaccination week"]
    assert _messages(refreshed) == ["Vaccination week"]

    client.delete("/notifications/dismissed")

    assert client.post("/notifications/refresh").json()["count"] == 2


def test_dismissing_a_missing_position_is_ignored(client: TestClient) -> None:
    client.post("/notifications/refresh")

    response = client.post("/notifications/7/dismiss")

    assert response.status_code == 200
    assert response.json()["count"] == 2


def test_added_notifications_are_deduplicated(client: TestClient) -> None:
    payload = {"message": "Lab results ready", "type": "info", "date": "2024-02-01"}

    first = client.post("/notifications/", json=payload)
    second = client.post("/notifications/", json=payload)

    assert first.json()["added"] is True
    assert second.json()["added"] is False
    assert second.json()["count"] == 1


def test_clear_empties_the_live_set(client: TestClient) -> None:
    client.post("/notifications/refresh")

    response = client.delete("/notifications/")

    assert response.json() == {"notifications": [], "count": 0}


def test_websocket_sends_the_live_set_and_answers_pings(client: TestClient) -> None:
    client.post("/notifications/refresh")

    with client.websocket_connect("/notifications/ws") as websocket:
        initial = websocket.receive_json()
        websocket.send_json({"type": "ping"})
        pong = websocket.receive_json()

    assert initial["type"] == "notifications"
    assert [item["message"] for item in initial["data"]] == [
        "Clinic closed on Friday",
        "Vaccination week",
    ]
    assert pong == {"type": "pong"}


def test_websocket_receives_changes_made_over_http(client: TestClient) -> None:
    with client.websocket_connect("/notifications/ws") as websocket:
        assert websocket.receive_json() == {"type": "notifications", "data": []}

        client.post(
            "/notifications/",
            json={"message": "Lab results ready", "type": "info", "date": "2024-02-01"},
        )
        update = websocket.receive_json()

    assert update == {
        "type": "notifications",
        "data": [{"message": "Lab results ready", "type": "info", "date": "2024-02-01"}],
    }


def test_websocket_dismiss_message_updates_the_feed(client: TestClient) -> None:
    client.post("/notifications/refresh")

    with client.websocket_connect("/notifications/ws") as websocket:
        websocket.receive_json()
        websocket.send_json({"type": "dismiss", "index": 0})
        update = websocket.receive_json()

    assert [item["message"] for item in update["data"]] == ["Vaccination week"]
    assert client.get("/notifications/").json()["count"] == 1


class LoopAwareStore(InMemoryKeyValueStore):
    def __init__(self) -> None:
        super().__init__()
        self.writes_on_loop: list[bool] = []

    def set(self, key: str, value: str) -> None:
        try:
            asyncio.get_running_loop()
        except RuntimeError:
            self.writes_on_loop.append(False)
        else:
            self.writes_on_loop.append(True)
        super().set(key, value)


def test_websocket_dismiss_writes_outside_the_event_loop() -> None:
    from main import create_app

    backend = BackendClient("http://backend.test/api", transport=httpx.MockTransport(_backend))
    store = LoopAwareStore()
    registry = NotificationFeedRegistry(store)

    app = create_app()
    app.dependency_overrides[get_backend_client] = lambda: backend
    app.dependency_overrides[get_feed_registry] = lambda: registry
    with TestClient(app) as test_client:
        test_client.post("/notifications/refresh")
        with test_client.websocket_connect("/notifications/ws") as websocket:
            websocket.receive_json()
            websocket.send_json({"type": "dismiss", "index": 0})
            websocket.receive_json()

    assert store.writes_on_loop
    assert not any(store.writes_on_loop)
