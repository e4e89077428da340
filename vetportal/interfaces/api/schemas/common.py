"""Schemas shared by several resources."""

from __future__ import annotations

from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict

ItemT = TypeVar("ItemT")


class PageRead(BaseModel, Generic[ItemT]):
    """One page of a filtered listing."""

    items: list[ItemT]
    page: int
    page_size: int
    total_items: int
    total_pages: int
    page_numbers: list[int]

    model_config = ConfigDict(from_attributes=True)


class OperationResultRead(BaseModel):
    success: bool
    message: str | None = None

    model_config = ConfigDict(from_attributes=True)


__all__ = ["OperationResultRead", "PageRead"]
