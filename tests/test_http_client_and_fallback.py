"""Tests for the backend client, remote gateways and the fallback policy."""

from __future__ import annotations

import json

import httpx
import pytest

from vetportal.application.listing import AppointmentFilters, PetFilters
from vetportal.domain.entities import OperationResult
from vetportal.infrastructure.gateways import (
    FallbackGateway,
    RemoteAppointmentGateway,
    RemoteClientGateway,
    RemotePetGateway,
    command_result,
)
from vetportal.infrastructure.gateways.fixtures import (
    FixtureAppointmentGateway,
    FixtureClientGateway,
    FixturePetGateway,
)
from vetportal.infrastructure.http import BackendClient, BackendUnavailableError


def _client(handler, base_url: str = "http://backend.test/api") -> BackendClient:
    return BackendClient(base_url, transport=httpx.MockTransport(handler))


def _unreachable(request: httpx.Request) -> httpx.Response:
    raise httpx.ConnectError("connection refused", request=request)


def test_get_decodes_json_and_sends_query_params() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json=[{"id": 1}])

    client = _client(handler)

    assert client.get("/pets", params={"type": "Dog"}) == [{"id": 1}]
    assert seen[0].url.path == "/api/pets"
    assert seen[0].url.params["type"] == "Dog"


def test_error_status_raises_backend_unavailable() -> None:
    client = _client(lambda request: httpx.Response(500, json={"detail": "boom"}))

    with pytest.raises(BackendUnavailableError) as exc_info:
        client.get("/pets")

    assert exc_info.value.status_code == 500
    assert exc_info.value.path == "/pets"


def test_transport_failure_raises_backend_unavailable() -> None:
    with pytest.raises(BackendUnavailableError):
        _client(_unreachable).get("/pets")


def test_invalid_json_raises_backend_unavailable() -> None:
    client = _client(lambda request: httpx.Response(200, text="<html>"))

    with pytest.raises(BackendUnavailableError):
        client.get("/pets")


def test_empty_body_returns_none() -> None:
    client = _client(lambda request: httpx.Response(204))

    assert client.delete("/pets/1") is None


def test_remote_pets_read_camel_case_payloads() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.params["type"] == "Dog"
        return httpx.Response(
            200,
            json=[
                {"id": 7, "name": "Rex", "type": "Dog", "breed": "Boxer", "age": 4,
                 "owner": "bob@example.com", "ownerName": "Bob", "isActive": True},
            ],
        )

    client = _client(handler, "http://backend.test/api/admin")
    gateway = RemotePetGateway(client, client)

    pets = gateway.list_pets(PetFilters(type="Dog"))

    assert pets[0].owner_name == "Bob"
    assert pets[0].is_active is True


def test_remote_pet_creation_sends_camel_case_body() -> None:
    bodies: list[dict] = []

    def handler(request: httpx.Request) -> httpx.Response:
        body = json.loads(request.content)
        bodies.append(body)
        return httpx.Response(201, json={"id": 9, **body})

    client = _client(handler)
    gateway = RemotePetGateway(client, client)

    pet = gateway.create_pet(
        {"name": "Kiwi", "type": "Bird", "breed": "Budgie", "age": 1, "owner": "a@b.c",
         "microchip_id": "X1"}
    )

    assert bodies[0]["microchipId"] == "X1"
    assert pet.id == 9
    assert pet.microchip_id == "X1"


def test_appointments_fall_back_to_the_basic_listing() -> None:
    def admin(request: httpx.Request) -> httpx.Response:
        return httpx.Response(404)

    def api(request: httpx.Request) -> httpx.Response:
        return httpx.Response(
            200,
            json=[{"id": 1, "date": "2024-03-01", "time": "10:00", "petname": "Buddy",
                   "docname": "Dr. Smith", "name": "John", "email": "john@example.com"}],
        )

    gateway = RemoteAppointmentGateway(_client(admin), _client(api))

    appointments = gateway.list_appointments(AppointmentFilters(search_term="john"))

    assert [appointment.id for appointment in appointments] == [1]
    assert appointments[0].status == "pending"


def test_fallback_gateway_serves_fixture_data_when_backend_is_down() -> None:
    client = _client(_unreachable)
    gateway = FallbackGateway(RemotePetGateway(client, client), FixturePetGateway())

    pets = gateway.list_pets(PetFilters(type="Cat"))

    assert [pet.name for pet in pets] == ["Whiskers", "Milo"]


def test_fallback_gateway_prefers_the_backend() -> None:
    client = _client(lambda request: httpx.Response(200, json=["Springfield"]))
    gateway = FallbackGateway(RemoteClientGateway(client), FixtureClientGateway())

    assert gateway.cities() == ["Springfield"]


def test_fallback_gateway_reraises_without_a_fixture_method() -> None:
    client = _client(_unreachable)
    gateway = FallbackGateway(
        RemoteAppointmentGateway(client, client), FixtureAppointmentGateway()
    )

    with pytest.raises(BackendUnavailableError):
        gateway.accept_appointment(3)

    assert gateway.create_appointment({"date": "2024-01-01"}) == OperationResult(
        success=False, message="Failed to create appointment"
    )


def test_command_result_reads_backend_acknowledgements() -> None:
    assert command_result({"success": False, "message": "Nope"}, "Done") == OperationResult(
        success=False, message="Nope"
    )
    assert command_result({}, "Done") == OperationResult(success=True, message="Done")
    assert command_result(None, "Done") == OperationResult(success=True, message="Done")
