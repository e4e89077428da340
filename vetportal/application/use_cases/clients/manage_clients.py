"""Use cases for reading and changing a single client."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from vetportal.application.gateways import ClientGateway
from vetportal.domain.entities import CONTACT_METHODS, Client, ClientStatistics, OperationResult


def get_client(gateway: ClientGateway, client_id: int) -> Client:
    """Return the client identified by ``client_id`` or raise an error."""

    client = gateway.get_client(client_id)
    if client is None or client.id is None:
        raise ValueError("Client not found")
    return client


def _ensure_contact_method(data: Mapping[str, Any]) -> None:
    method = data.get("preferred_contact_method")
    if method is not None and method not in CONTACT_METHODS:
        raise ValueError(f"Unsupported contact method: {method}")


def create_client(gateway: ClientGateway, data: Mapping[str, Any]) -> Client:
    _ensure_contact_method(data)
    return gateway.create_client(data)


def update_client(gateway: ClientGateway, client_id: int, changes: Mapping[str, Any]) -> Client:
    if not changes:
        raise ValueError("No changes provided")
    _ensure_contact_method(changes)
    return gateway.update_client(client_id, changes)


def delete_client(gateway: ClientGateway, client_id: int) -> OperationResult:
    return gateway.delete_client(client_id)


def get_client_statistics(gateway: ClientGateway) -> ClientStatistics:
    return gateway.client_statistics()
