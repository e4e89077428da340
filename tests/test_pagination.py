"""Tests for page arithmetic and navigation."""

from __future__ import annotations

import pytest

from vetportal.application.listing import (
    PageState,
    paginate,
    total_pages,
    windowed_page_numbers,
)


@pytest.mark.parametrize(
    ("total_items", "page_size", "expected"),
    [(0, 10, 1), (1, 10, 1), (10, 10, 1), (11, 10, 2), (23, 10, 3), (5, 0, 1)],
)
def test_total_pages(total_items: int, page_size: int, expected: int) -> None:
    assert total_pages(total_items, page_size) == expected


def test_last_page_holds_the_remainder() -> None:
    items = list(range(23))

    assert paginate(items, 3, 10) == [20, 21, 22]
    assert paginate(items, 4, 10) == []


def test_pages_concatenate_to_the_original_sequence() -> None:
    items = [f"item-{index}" for index in range(37)]
    pages = total_pages(len(items), 8)

    rebuilt = [item for page in range(1, pages + 1) for item in paginate(items, page, 8)]

    assert rebuilt == items


def test_out_of_range_navigation_is_ignored() -> None:
    state = PageState(items_per_page=10, total_items=23)

    assert state.change_page(3) == 3
    assert state.change_page(4) == 3
    assert state.change_page(0) == 3
    assert state.change_page(-1) == 3
    assert state.current_page == 3


def test_current_page_is_clamped_when_items_shrink() -> None:
    state = PageState(items_per_page=10, total_items=23)
    state.change_page(3)

    state.update_total(12)

    assert state.current_page == 2
    assert state.total_pages == 2


def test_page_window_stays_inside_bounds() -> None:
    assert windowed_page_numbers(1, 10, 5) == [1, 2, 3, 4, 5]
    assert windowed_page_numbers(6, 10, 5) == [4, 5, 6, 7, 8]
    assert windowed_page_numbers(10, 10, 5) == [6, 7, 8, 9, 10]
    assert windowed_page_numbers(2, 3, 5) == [1, 2, 3]
