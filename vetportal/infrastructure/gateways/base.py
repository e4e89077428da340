"""Data sources with a degradation policy.

Each resource has a remote gateway that talks to the clinic backend and a
fixture gateway exposing the same methods over canned records.
:class:`FallbackGateway` routes every call to the remote implementation and
substitutes the fixture result when the backend cannot be reached.
"""

from __future__ import annotations

import functools
import itertools
import logging
from collections.abc import Mapping
from typing import Any, Generic, TypeVar

from vetportal.domain.entities import OperationResult
from vetportal.infrastructure.http import BackendUnavailableError

logger = logging.getLogger(__name__)

PrimaryT = TypeVar("PrimaryT")


class FallbackGateway(Generic[PrimaryT]):
    """Delegate to ``primary`` and fall back to ``fallback`` on backend failures."""

    def __init__(self, primary: PrimaryT, fallback: Any, *, name: str | None = None) -> None:
        self._primary = primary
        self._fallback = fallback
        self._name = name or type(primary).__name__

    @property
    def primary(self) -> PrimaryT:
        return self._primary

    @property
    def fallback(self) -> Any:
        return self._fallback

    def __getattr__(self, attribute: str) -> Any:
        target = getattr(self._primary, attribute)
        if attribute.startswith("_") or not callable(target):
            return target

        @functools.wraps(target)
        def call(*args: Any, **kwargs: Any) -> Any:
            try:
                return target(*args, **kwargs)
            except BackendUnavailableError as exc:
                substitute = getattr(self._fallback, attribute, None)
                if substitute is None:
                    logger.error("%s.%s failed without fallback: %s", self._name, attribute, exc)
                    raise
                logger.warning(
                    "%s.%s failed, serving fallback data: %s", self._name, attribute, exc
                )
                return substitute(*args, **kwargs)

        return call


def command_result(payload: Any, default_message: str) -> OperationResult:
    """Normalize the loosely typed acknowledgement of a backend command."""

    if isinstance(payload, Mapping):
        return OperationResult(
            success=bool(payload.get("success", True)),
            message=payload.get("message") or default_message,
        )
    return OperationResult(success=True, message=default_message)


class FixtureIds:
    """Deterministic identifiers for records created while the backend is down."""

    def __init__(self, start: int = 1000) -> None:
        self._counter = itertools.count(start)

    def next(self) -> int:
        return next(self._counter)


__all__ = ["FallbackGateway", "FixtureIds", "command_result"]
