"""Page arithmetic for filtered sequences."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Generic, TypeVar

ItemT = TypeVar("ItemT")

DEFAULT_WINDOW_SIZE = 5


def total_pages(total_items: int, page_size: int) -> int:
    """Return the number of pages, never less than one."""

    if page_size <= 0 or total_items <= 0:
        return 1
    return max(1, math.ceil(total_items / page_size))


def paginate(items: Sequence[ItemT], page: int, page_size: int) -> list[ItemT]:
    """Return the slice of ``items`` shown on the 1-based ``page``."""

    if page < 1 or page_size <= 0:
        return []
    start = (page - 1) * page_size
    return list(items[start : start + page_size])


def windowed_page_numbers(
    current: int, total: int, window_size: int = DEFAULT_WINDOW_SIZE
) -> list[int]:
    """Return up to ``window_size`` consecutive page numbers around ``current``.

    The window is centred on ``current`` and shifted to stay inside
    ``[1, total]`` when it would overflow either edge.
    """

    total = max(1, total)
    if window_size <= 0:
        return []
    current = min(max(1, current), total)
    start = max(1, current - window_size // 2)
    end = min(total, start + window_size - 1)
    if end - start + 1 < window_size:
        start = max(1, end - window_size + 1)
    return list(range(start, end + 1))


@dataclass
class PageState:
    """Pagination position of a single listing view.

    ``current_page`` is kept inside ``[1, total_pages]`` whenever the number
    of items changes. Out-of-range navigation requests are ignored.
    """

    items_per_page: int = 10
    current_page: int = 1
    total_items: int = 0

    def __post_init__(self) -> None:
        self.items_per_page = max(1, int(self.items_per_page))
        self.total_items = max(0, int(self.total_items))
        self._clamp()

    @property
    def total_pages(self) -> int:
        return total_pages(self.total_items, self.items_per_page)

    def update_total(self, total_items: int) -> None:
        self.total_items = max(0, total_items)
        self._clamp()

    def change_page(self, requested: int) -> int:
        """Move to ``requested`` when it is a valid page and return the current page."""

        if 1 <= requested <= self.total_pages:
            self.current_page = requested
        return self.current_page

    def reset(self) -> None:
        self.current_page = 1

    def slice(self, items: Sequence[ItemT]) -> list[ItemT]:
        return paginate(items, self.current_page, self.items_per_page)

    def page_numbers(self, window_size: int = DEFAULT_WINDOW_SIZE) -> list[int]:
        return windowed_page_numbers(self.current_page, self.total_pages, window_size)

    def _clamp(self) -> None:
        self.current_page = min(max(1, self.current_page), self.total_pages)


@dataclass
class Page(Generic[ItemT]):
    """A visible slice together with the figures needed to render navigation."""

    items: list[ItemT]
    page: int
    page_size: int
    total_items: int
    total_pages: int
    page_numbers: list[int] = field(default_factory=list)


__all__ = [
    "DEFAULT_WINDOW_SIZE",
    "Page",
    "PageState",
    "paginate",
    "total_pages",
    "windowed_page_numbers",
]
