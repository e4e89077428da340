"""Use cases for client administration."""

from .client_details import (
    add_contact,
    delete_contact,
    link_pet,
    list_client_pets,
    list_contacts,
    list_visits,
    unlink_pet,
    update_contact,
)
from .list_clients import (
    export_clients_csv,
    list_cities,
    list_clients,
    list_states,
    search_clients,
)
from .manage_clients import (
    create_client,
    delete_client,
    get_client,
    get_client_statistics,
    update_client,
)

__all__ = [
    "add_contact",
    "create_client",
    "delete_client",
    "delete_contact",
    "export_clients_csv",
    "get_client",
    "get_client_statistics",
    "link_pet",
    "list_cities",
    "list_client_pets",
    "list_clients",
    "list_contacts",
    "list_states",
    "list_visits",
    "search_clients",
    "unlink_pet",
    "update_client",
    "update_contact",
]
