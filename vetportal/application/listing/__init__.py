"""Client-side filtering and pagination of entity listings."""

from .criteria import (
    AppointmentFilters,
    ClientFilters,
    PetFilters,
    appointment_filter_spec,
    client_filter_spec,
    owner_search_spec,
    pet_filter_spec,
    to_query_params,
)
from .filters import (
    Between,
    Contains,
    DateBetween,
    Equals,
    EqualsIgnoreCase,
    FilterSpec,
    SearchAny,
    evaluate,
)
from .pagination import (
    Page,
    PageState,
    paginate,
    total_pages,
    windowed_page_numbers,
)
from .view_state import ListingViewState, build_page

__all__ = [
    "AppointmentFilters",
    "ClientFilters",
    "PetFilters",
    "appointment_filter_spec",
    "client_filter_spec",
    "owner_search_spec",
    "pet_filter_spec",
    "to_query_params",
    "Between",
    "Contains",
    "DateBetween",
    "Equals",
    "EqualsIgnoreCase",
    "FilterSpec",
    "SearchAny",
    "evaluate",
    "Page",
    "PageState",
    "paginate",
    "total_pages",
    "windowed_page_numbers",
    "ListingViewState",
    "build_page",
]
