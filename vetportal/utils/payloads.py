"""Conversion between backend JSON payloads and domain dataclasses."""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import MISSING, asdict, fields, is_dataclass
from typing import Any, TypeVar

EntityT = TypeVar("EntityT")

_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")


def camel_to_snake(name: str) -> str:
    """Return ``name`` converted from ``camelCase`` to ``snake_case``."""

    return _CAMEL_BOUNDARY.sub("_", name).lower()


def snake_to_camel(name: str) -> str:
    """Return ``name`` converted from ``snake_case`` to ``camelCase``."""

    head, *tail = name.split("_")
    return head + "".join(part[:1].upper() + part[1:] for part in tail)


def build_entity(entity_type: type[EntityT], payload: Any) -> EntityT:
    """Instantiate ``entity_type`` from a backend payload.

    Keys may use either camelCase or snake_case. Unknown keys are ignored and
    fields the backend omitted fall back to their default, or ``None`` when the
    dataclass declares no default.
    """

    source = payload if isinstance(payload, Mapping) else {}
    normalized = {camel_to_snake(str(key)): value for key, value in source.items()}
    values: dict[str, Any] = {}
    for field in fields(entity_type):  # type: ignore[arg-type]
        if field.name in normalized:
            values[field.name] = normalized[field.name]
        elif field.default is MISSING and field.default_factory is MISSING:
            values[field.name] = None
    return entity_type(**values)


def build_entities(entity_type: type[EntityT], payload: Any) -> list[EntityT]:
    """Instantiate a list of ``entity_type`` objects, skipping non-object items."""

    if not isinstance(payload, list):
        return []
    return [build_entity(entity_type, item) for item in payload if isinstance(item, Mapping)]


def entity_to_payload(value: Any, *, exclude_none: bool = True) -> dict[str, Any]:
    """Serialize a dataclass or mapping into a camelCase request body."""

    if is_dataclass(value) and not isinstance(value, type):
        data = asdict(value)
    elif isinstance(value, Mapping):
        data = dict(value)
    else:
        raise TypeError(f"Cannot serialize {type(value).__name__} as a request payload")
    return {
        snake_to_camel(key): item
        for key, item in data.items()
        if not (exclude_none and item is None)
    }


__all__ = [
    "build_entity",
    "build_entities",
    "camel_to_snake",
    "entity_to_payload",
    "snake_to_camel",
]
