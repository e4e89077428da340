"""Utility helpers for reusable functionality."""

from .datetime import (
    coerce_date,
    get_app_timezone,
    now_in_app_timezone,
    today_in_app_timezone,
)
from .payloads import (
    build_entities,
    build_entity,
    camel_to_snake,
    entity_to_payload,
    snake_to_camel,
)

__all__ = [
    "coerce_date",
    "get_app_timezone",
    "now_in_app_timezone",
    "today_in_app_timezone",
    "build_entities",
    "build_entity",
    "camel_to_snake",
    "entity_to_payload",
    "snake_to_camel",
]
