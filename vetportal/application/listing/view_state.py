"""Per-screen listing state: loaded items, active filters and page position."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import asdict, dataclass, field, is_dataclass
from typing import Any, Generic, TypeVar

from .filters import FilterSpec, evaluate
from .pagination import DEFAULT_WINDOW_SIZE, Page, PageState

ItemT = TypeVar("ItemT")
FiltersT = TypeVar("FiltersT")


@dataclass
class ListingViewState(Generic[ItemT, FiltersT]):
    """State owned by one listing screen for the lifetime of a view session.

    Every transition is a discrete user action: loading items, applying or
    clearing filters and changing page. Applying or clearing filters always
    returns to the first page.
    """

    spec_builder: Callable[[FiltersT | None], FilterSpec]
    page_state: PageState = field(default_factory=PageState)
    window_size: int = DEFAULT_WINDOW_SIZE
    filters: FiltersT | None = None
    items: list[ItemT] = field(default_factory=list)
    filtered: list[ItemT] = field(default_factory=list)

    def load(self, items: Iterable[ItemT]) -> None:
        self.items = list(items)
        self._refilter()

    def apply_filters(self, filters: FiltersT | None) -> None:
        self.filters = filters
        self._refilter()
        self.page_state.reset()

    def clear_filters(self) -> None:
        self.apply_filters(None)

    def change_page(self, requested: int) -> int:
        return self.page_state.change_page(requested)

    @property
    def visible(self) -> list[ItemT]:
        return self.page_state.slice(self.filtered)

    def page(self) -> Page[ItemT]:
        return Page(
            items=self.visible,
            page=self.page_state.current_page,
            page_size=self.page_state.items_per_page,
            total_items=self.page_state.total_items,
            total_pages=self.page_state.total_pages,
            page_numbers=self.page_state.page_numbers(self.window_size),
        )

    def snapshot(self) -> dict[str, Any]:
        """Return a serializable description of the view position."""

        filters: Any = self.filters
        if is_dataclass(filters) and not isinstance(filters, type):
            filters = {key: value for key, value in asdict(filters).items() if value is not None}
        return {
            "filters": filters,
            "current_page": self.page_state.current_page,
            "items_per_page": self.page_state.items_per_page,
            "total_items": self.page_state.total_items,
        }

    def _refilter(self) -> None:
        self.filtered = evaluate(self.items, self.spec_builder(self.filters))
        self.page_state.update_total(len(self.filtered))


def build_page(
    items: Iterable[ItemT],
    *,
    spec_builder: Callable[[FiltersT | None], FilterSpec],
    filters: FiltersT | None,
    page: int,
    page_size: int,
    window_size: int = DEFAULT_WINDOW_SIZE,
) -> Page[ItemT]:
    """Filter ``items`` and return the requested page.

    An out-of-range ``page`` is ignored and the first page is returned.
    """

    view = ListingViewState(
        spec_builder=spec_builder,
        page_state=PageState(items_per_page=page_size),
        window_size=window_size,
    )
    view.load(items)
    view.apply_filters(filters)
    view.change_page(page)
    return view.page()


__all__ = ["ListingViewState", "build_page"]
