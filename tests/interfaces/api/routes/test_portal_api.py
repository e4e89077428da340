"""Integration tests for the portal REST endpoints with the backend offline."""

from __future__ import annotations

import io

import httpx
import pytest

pytest.importorskip("fastapi")
from fastapi.testclient import TestClient

from vetportal.application.notifications import NotificationFeedRegistry
from vetportal.infrastructure.http import BackendClient
from vetportal.infrastructure.storage import InMemoryKeyValueStore
from vetportal.interfaces.api.dependencies import (
    get_admin_client,
    get_backend_client,
    get_feed_registry,
)


def _unreachable(request: httpx.Request) -> httpx.Response:
    raise httpx.ConnectError("connection refused", request=request)


@pytest.fixture()
def client():
    """Return a test client whose backend cannot be reached."""

    from main import create_app

    offline = BackendClient("http://backend.test/api", transport=httpx.MockTransport(_unreachable))
    registry = NotificationFeedRegistry(InMemoryKeyValueStore())

    app = create_app()
    app.dependency_overrides[get_admin_client] = lambda: offline
    app.dependency_overrides[get_backend_client] = lambda: offline
    app.dependency_overrides[get_feed_registry] = lambda: registry
    with TestClient(app) as test_client:
        yield test_client


def test_pet_listing_is_filtered_and_paged(client: TestClient) -> None:
    response = client.get("/pets/", params={"type": "Dog", "page_size": 2})

    assert response.status_code == 200
    body = response.json()
    assert [pet["name"] for pet in body["items"]] == ["Buddy", "Rex"]
    assert body["total_items"] == 3
    assert body["total_pages"] == 2
    assert body["page_numbers"] == [1, 2]


def test_out_of_range_page_returns_the_first_page(client: TestClient) -> None:
    response = client.get("/pets/", params={"page": 9, "page_size": 4})

    body = response.json()
    assert body["page"] == 1
    assert [pet["id"] for pet in body["items"]] == [1, 2, 3, 4]


def test_free_text_search_over_pets(client: TestClient) -> None:
    response = client.get("/pets/", params={"search": "persian"})

    assert [pet["name"] for pet in response.json()["items"]] == ["Whiskers"]


def test_unknown_pet_lookup_returns_404(client: TestClient) -> None:
    response = client.get("/pets/find", params={"petname": "Nobody", "owner": "x@example.com"})

    assert response.status_code == 404
    assert response.json()["detail"] == "Pet not found"


def test_empty_pet_update_is_rejected(client: TestClient) -> None:
    response = client.put("/pets/1", json={})

    assert response.status_code == 400
    assert response.json()["detail"] == "No changes provided"


def test_document_upload_rejects_unsupported_types(client: TestClient) -> None:
    response = client.post(
        "/pets/1/documents",
        files={"file": ("notes.txt", io.BytesIO(b"hello"), "text/plain")},
        data={"document_type": "other"},
    )

    assert response.status_code == 400
    assert "Invalid file type" in response.json()["detail"]


def test_owner_search_uses_canned_owners(client: TestClient) -> None:
    response = client.get("/owners/search", params={"q": "john"})

    assert [owner["email"] for owner in response.json()] == [
        "john.doe@example.com",
        "bob.johnson@example.com",
    ]


def test_client_listing_and_statistics(client: TestClient) -> None:
    listing = client.get("/clients/", params={"search_term": "sarah"})
    statistics = client.get("/clients/statistics")

    assert [item["name"] for item in listing.json()["items"]] == ["Sarah Johnson"]
    assert statistics.json()["total_clients"] == 156


def test_client_creation_validates_contact_method(client: TestClient) -> None:
    response = client.post(
        "/clients/",
        json={"name": "Ana Lopez", "email": "ana@example.com", "preferred_contact_method": "fax"},
    )

    assert response.status_code == 422


def test_missing_appointment_returns_404(client: TestClient) -> None:
    response = client.get("/appointments/5")

    assert response.status_code == 404


def test_appointment_commands_report_failure_offline(client: TestClient) -> None:
    response = client.put("/appointments/5/status", json={"status": "confirmed"})

    assert response.status_code == 200
    assert response.json() == {"success": False, "message": "Failed to update appointment status"}


def test_accepting_an_appointment_requires_the_backend(client: TestClient) -> None:
    response = client.post("/appointments/5/accept")

    assert response.status_code == 502


def test_doctors_are_listed_offline(client: TestClient) -> None:
    response = client.get("/doctors/")

    assert [doctor["id"] for doctor in response.json()] == [1, 2, 3, 4]


def test_dashboard_stats_are_derived_offline(client: TestClient) -> None:
    response = client.get("/dashboard/stats")

    assert response.status_code == 200
    assert response.json() == {
        "total_users": 0,
        "today_appointments": 0,
        "total_appointments": 0,
        "total_pets": 0,
        "pending_appointments": 0,
        "completed_appointments": 0,
    }


def test_password_change_is_validated_before_calling_the_backend(client: TestClient) -> None:
    response = client.post(
        "/profile/john@example.com/password",
        json={
            "current_password": "secret1",
            "new_password": "abcdefg1",
            "new_password_confirmation": "abcdefg2",
        },
    )

    assert response.status_code == 400
    assert response.json()["detail"] == "New passwords do not match"
