"""Helper utilities shared across API route handlers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from fastapi import HTTPException, Query, status

from vetportal.config import get_settings

NOT_FOUND_MARKER = "not found"


@dataclass(frozen=True)
class Pagination:
    """Page position requested by the caller."""

    page: int
    page_size: int
    window_size: int

    def as_kwargs(self) -> dict[str, int]:
        return {"page": self.page, "page_size": self.page_size, "window_size": self.window_size}


def pagination_params(
    page: int = Query(1, description="Page to return; out-of-range pages yield the first one"),
    page_size: int | None = Query(None, ge=1, le=100),
) -> Pagination:
    settings = get_settings()
    return Pagination(
        page=page,
        page_size=page_size or settings.default_page_size,
        window_size=settings.page_window_size,
    )


def http_error_from(exc: ValueError) -> HTTPException:
    """Translate a use case validation error into an HTTP error."""

    detail = str(exc)
    if NOT_FOUND_MARKER in detail.lower():
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=detail)
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)


def changes_from(model: Any) -> dict[str, Any]:
    """Return the fields the caller actually sent in an update payload."""

    return model.model_dump(exclude_unset=True)


__all__ = ["Pagination", "changes_from", "http_error_from", "pagination_params"]
