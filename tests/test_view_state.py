"""Tests for listing view state transitions."""

from __future__ import annotations

from vetportal.application.listing import (
    ListingViewState,
    PageState,
    PetFilters,
    build_page,
    pet_filter_spec,
)
from vetportal.infrastructure.gateways.fixtures import fixture_pets


def _numbered(count: int) -> list[dict[str, object]]:
    return [{"id": index, "name": f"Pet {index}", "type": "Dog"} for index in range(1, count + 1)]


def test_applying_filters_returns_to_the_first_page() -> None:
    view = ListingViewState(spec_builder=pet_filter_spec, page_state=PageState(items_per_page=2))
    view.load(fixture_pets())
    view.change_page(3)

    view.apply_filters(PetFilters(type="Cat"))

    assert view.page_state.current_page == 1
    assert [pet.name for pet in view.visible] == ["Whiskers", "Milo"]


def test_clearing_filters_restores_every_item() -> None:
    view = ListingViewState(spec_builder=pet_filter_spec)
    view.load(fixture_pets())
    view.apply_filters(PetFilters(search="buddy"))

    view.clear_filters()

    assert len(view.filtered) == len(fixture_pets())
    assert view.filters is None


def test_build_page_returns_the_requested_slice() -> None:
    page = build_page(
        _numbered(23),
        spec_builder=pet_filter_spec,
        filters=None,
        page=3,
        page_size=10,
    )

    assert [item["id"] for item in page.items] == [21, 22, 23]
    assert page.total_pages == 3
    assert page.total_items == 23


def test_build_page_ignores_out_of_range_requests() -> None:
    page = build_page(
        _numbered(23),
        spec_builder=pet_filter_spec,
        filters=None,
        page=4,
        page_size=10,
    )

    assert page.page == 1
    assert [item["id"] for item in page.items] == list(range(1, 11))


def test_snapshot_lists_only_active_filters() -> None:
    view = ListingViewState(spec_builder=pet_filter_spec)
    view.load(fixture_pets())
    view.apply_filters(PetFilters(type="Dog"))

    snapshot = view.snapshot()

    assert snapshot["filters"] == {"type": "Dog"}
    assert snapshot["total_items"] == 3
    assert snapshot["current_page"] == 1
