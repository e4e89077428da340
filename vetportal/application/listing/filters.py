"""Predicate evaluation over in-memory entity lists.

A :class:`FilterSpec` is an ordered collection of independent clauses. Each
clause reports whether it is *set*; unset clauses (``None`` or empty values)
never constrain the result. :func:`evaluate` keeps an entity only when every
set clause matches it, preserving the input order.

Clauses read entity fields by name from dataclasses, plain objects or
mappings. A missing field or a value of the wrong type makes the clause fail
for that entity; nothing here raises on malformed data.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass, field
from datetime import date
from numbers import Real
from typing import Any, Protocol, TypeVar

from vetportal.utils import coerce_date

EntityT = TypeVar("EntityT")

_MISSING = object()


def read_field(entity: Any, name: str) -> Any:
    """Return the value stored under ``name`` or a private sentinel when absent."""

    if isinstance(entity, Mapping):
        return entity.get(name, _MISSING)
    return getattr(entity, name, _MISSING)


def _is_set(value: Any) -> bool:
    return value is not None and value != ""


def _is_number(value: Any) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)


class Clause(Protocol):
    """Single predicate applied to each entity."""

    @property
    def is_set(self) -> bool: ...

    def matches(self, entity: Any) -> bool: ...


@dataclass(frozen=True)
class Contains:
    """Case-insensitive substring match on one field."""

    field: str
    value: Any = None

    @property
    def is_set(self) -> bool:
        return isinstance(self.value, str) and self.value != ""

    def matches(self, entity: Any) -> bool:
        candidate = read_field(entity, self.field)
        if not isinstance(candidate, str):
            return False
        return self.value.lower() in candidate.lower()


@dataclass(frozen=True)
class Equals:
    """Exact match on one field; booleans only match booleans."""

    field: str
    value: Any = None

    @property
    def is_set(self) -> bool:
        return _is_set(self.value)

    def matches(self, entity: Any) -> bool:
        candidate = read_field(entity, self.field)
        if candidate is _MISSING:
            return False
        if isinstance(self.value, bool) or isinstance(candidate, bool):
            return isinstance(candidate, bool) and candidate is self.value
        return candidate == self.value


@dataclass(frozen=True)
class EqualsIgnoreCase:
    """Whole-value text match on one field, ignoring case."""

    field: str
    value: Any = None

    @property
    def is_set(self) -> bool:
        return isinstance(self.value, str) and self.value != ""

    def matches(self, entity: Any) -> bool:
        candidate = read_field(entity, self.field)
        if not isinstance(candidate, str):
            return False
        return candidate.casefold() == self.value.casefold()


@dataclass(frozen=True)
class Between:
    """Inclusive numeric range; either bound may be omitted."""

    field: str
    minimum: Any = None
    maximum: Any = None

    @property
    def is_set(self) -> bool:
        return _is_number(self.minimum) or _is_number(self.maximum)

    def matches(self, entity: Any) -> bool:
        candidate = read_field(entity, self.field)
        if not _is_number(candidate):
            return False
        if _is_number(self.minimum) and candidate < self.minimum:
            return False
        if _is_number(self.maximum) and candidate > self.maximum:
            return False
        return True


@dataclass(frozen=True)
class DateBetween:
    """Inclusive calendar-date range over ISO date strings or ``date`` values."""

    field: str
    start: Any = None
    end: Any = None

    @property
    def _bounds(self) -> tuple[date | None, date | None]:
        return coerce_date(self.start), coerce_date(self.end)

    @property
    def is_set(self) -> bool:
        lower, upper = self._bounds
        return lower is not None or upper is not None

    def matches(self, entity: Any) -> bool:
        candidate = coerce_date(read_field(entity, self.field))
        if candidate is None:
            return False
        lower, upper = self._bounds
        if lower is not None and candidate < lower:
            return False
        if upper is not None and candidate > upper:
            return False
        return True


@dataclass(frozen=True)
class SearchAny:
    """Free-text term matched case-insensitively against several fields.

    When set, the search decides the outcome for the entity: clauses listed
    after it in the filter are not consulted.
    """

    fields: tuple[str, ...]
    term: Any = None

    @property
    def is_set(self) -> bool:
        return isinstance(self.term, str) and self.term != ""

    def matches(self, entity: Any) -> bool:
        needle = self.term.lower()
        for name in self.fields:
            candidate = read_field(entity, name)
            if isinstance(candidate, str) and needle in candidate.lower():
                return True
        return False


@dataclass(frozen=True)
class FilterSpec:
    """Ordered, possibly sparse collection of filter clauses."""

    clauses: tuple[Clause, ...] = field(default_factory=tuple)

    @classmethod
    def of(cls, *clauses: Clause) -> "FilterSpec":
        return cls(clauses=tuple(clauses))

    @classmethod
    def from_mapping(
        cls,
        constraints: Mapping[str, Any] | None,
        *,
        search_fields: Sequence[str] = (),
        search_key: str = "search",
    ) -> "FilterSpec":
        """Build a spec from a plain ``{field: constraint}`` mapping.

        Scalars become equality clauses. Mappings may carry ``contains``,
        ``min``/``max`` or ``from``/``to`` keys. The ``search_key`` entry is
        matched against ``search_fields`` and placed last. Values of any other
        shape are ignored.
        """

        if not isinstance(constraints, Mapping):
            return cls()

        clauses: list[Clause] = []
        search: Clause | None = None
        for name, constraint in constraints.items():
            if name == search_key and search_fields:
                search = SearchAny(tuple(search_fields), constraint)
                continue
            if isinstance(constraint, Mapping):
                if "contains" in constraint:
                    clauses.append(Contains(name, constraint.get("contains")))
                elif "min" in constraint or "max" in constraint:
                    clauses.append(Between(name, constraint.get("min"), constraint.get("max")))
                elif "from" in constraint or "to" in constraint:
                    clauses.append(DateBetween(name, constraint.get("from"), constraint.get("to")))
                continue
            if isinstance(constraint, (str, int, float, bool)) or constraint is None:
                clauses.append(Equals(name, constraint))
        if search is not None:
            clauses.append(search)
        return cls(clauses=tuple(clauses))

    @property
    def active_clauses(self) -> tuple[Clause, ...]:
        return tuple(clause for clause in self.clauses if clause.is_set)

    @property
    def is_empty(self) -> bool:
        return not self.active_clauses


def matches(entity: Any, clauses: Iterable[Clause]) -> bool:
    """Return ``True`` when ``entity`` satisfies every clause in ``clauses``."""

    for clause in clauses:
        if isinstance(clause, SearchAny):
            return clause.matches(entity)
        if not clause.matches(entity):
            return False
    return True


def evaluate(
    entities: Iterable[EntityT],
    spec: FilterSpec | Mapping[str, Any] | None,
) -> list[EntityT]:
    """Return the entities matching ``spec`` in their original order."""

    if not isinstance(spec, FilterSpec):
        spec = FilterSpec.from_mapping(spec)
    clauses = spec.active_clauses
    if not clauses:
        return list(entities)
    return [entity for entity in entities if matches(entity, clauses)]


__all__ = [
    "Between",
    "Clause",
    "Contains",
    "DateBetween",
    "Equals",
    "EqualsIgnoreCase",
    "FilterSpec",
    "SearchAny",
    "evaluate",
    "matches",
    "read_field",
]
