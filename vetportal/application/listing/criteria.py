"""Filter criteria accepted by the listing screens and their filter specs."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any

from vetportal.utils import snake_to_camel

from .filters import (
    Between,
    Contains,
    DateBetween,
    Equals,
    FilterSpec,
    SearchAny,
    read_field,
)

PET_SEARCH_FIELDS = ("name", "type", "breed", "owner", "owner_name")
CLIENT_SEARCH_FIELDS = ("name", "email", "phone", "city")
APPOINTMENT_SEARCH_FIELDS = ("name", "petname", "email", "docname")
OWNER_SEARCH_FIELDS = ("name", "email")


@dataclass
class PetFilters:
    search: str | None = None
    type: str | None = None
    breed: str | None = None
    owner: str | None = None
    age_min: float | None = None
    age_max: float | None = None
    is_active: bool | None = None
    registration_date_from: str | None = None
    registration_date_to: str | None = None


@dataclass
class ClientFilters:
    search_term: str | None = None
    status: bool | None = None
    city: str | None = None
    state: str | None = None
    registration_date_from: str | None = None
    registration_date_to: str | None = None
    last_visit_from: str | None = None
    last_visit_to: str | None = None
    has_pets: bool | None = None
    min_visits: int | None = None
    max_visits: int | None = None
    contact_method: str | None = None


@dataclass
class AppointmentFilters:
    date_from: str | None = None
    date_to: str | None = None
    status: str | None = None
    doctor: str | None = None
    search_term: str | None = None


@dataclass(frozen=True)
class HasAny:
    """Match entities whose count field is positive (or zero when ``expected`` is false)."""

    field: str
    expected: bool | None = None

    @property
    def is_set(self) -> bool:
        return isinstance(self.expected, bool)

    def matches(self, entity: Any) -> bool:
        candidate = read_field(entity, self.field)
        if isinstance(candidate, bool) or not isinstance(candidate, (int, float)):
            candidate = 0
        return (candidate > 0) is self.expected


def pet_filter_spec(filters: PetFilters | None) -> FilterSpec:
    if filters is None:
        return FilterSpec()
    return FilterSpec.of(
        Equals("type", filters.type),
        Equals("breed", filters.breed),
        Equals("owner", filters.owner),
        Between("age", filters.age_min, filters.age_max),
        Equals("is_active", filters.is_active),
        DateBetween(
            "registration_date",
            filters.registration_date_from,
            filters.registration_date_to,
        ),
        SearchAny(PET_SEARCH_FIELDS, filters.search),
    )


def client_filter_spec(filters: ClientFilters | None) -> FilterSpec:
    if filters is None:
        return FilterSpec()
    return FilterSpec.of(
        Equals("is_active", filters.status),
        Equals("city", filters.city),
        Equals("state", filters.state),
        DateBetween(
            "registration_date",
            filters.registration_date_from,
            filters.registration_date_to,
        ),
        DateBetween("last_visit", filters.last_visit_from, filters.last_visit_to),
        HasAny("total_pets", filters.has_pets),
        Between("total_visits", filters.min_visits, filters.max_visits),
        Equals("preferred_contact_method", filters.contact_method),
        SearchAny(CLIENT_SEARCH_FIELDS, filters.search_term),
    )


def appointment_filter_spec(filters: AppointmentFilters | None) -> FilterSpec:
    if filters is None:
        return FilterSpec()
    # Doctor names are typed partially in the UI, hence substring semantics.
    return FilterSpec.of(
        DateBetween("date", filters.date_from, filters.date_to),
        Equals("status", filters.status),
        Contains("docname", filters.doctor),
        SearchAny(APPOINTMENT_SEARCH_FIELDS, filters.search_term),
    )


def owner_search_spec(query: str | None) -> FilterSpec:
    return FilterSpec.of(SearchAny(OWNER_SEARCH_FIELDS, query))


def to_query_params(
    filters: Any, *, renames: dict[str, str] | None = None
) -> dict[str, str]:
    """Return the non-empty criteria of ``filters`` as backend query parameters."""

    if filters is None:
        return {}
    renames = renames or {}
    params: dict[str, str] = {}
    for name, value in asdict(filters).items():
        if value is None or value == "":
            continue
        key = renames.get(name, snake_to_camel(name))
        params[key] = str(value).lower() if isinstance(value, bool) else str(value)
    return params


__all__ = [
    "AppointmentFilters",
    "ClientFilters",
    "HasAny",
    "PetFilters",
    "appointment_filter_spec",
    "client_filter_spec",
    "owner_search_spec",
    "pet_filter_spec",
    "to_query_params",
    "PET_SEARCH_FIELDS",
    "CLIENT_SEARCH_FIELDS",
    "APPOINTMENT_SEARCH_FIELDS",
    "OWNER_SEARCH_FIELDS",
]
