"""Key-value stores backing state that must survive a process restart."""

from __future__ import annotations

import threading
from collections.abc import Callable
from typing import Protocol

from sqlalchemy.orm import Session

from vetportal.infrastructure.repositories import KeyValueRepository


class KeyValueStore(Protocol):
    """String values addressed by a string key."""

    def get(self, key: str) -> str | None: ...

    def set(self, key: str, value: str) -> None: ...

    def delete(self, key: str) -> None: ...


class InMemoryKeyValueStore:
    """Process-local store, used in tests and when no database is configured."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._values: dict[str, str] = dict(initial or {})
        self._lock = threading.Lock()

    def get(self, key: str) -> str | None:
        with self._lock:
            return self._values.get(key)

    def set(self, key: str, value: str) -> None:
        with self._lock:
            self._values[key] = value

    def delete(self, key: str) -> None:
        with self._lock:
            self._values.pop(key, None)


class SqlKeyValueStore:
    """Store persisted in the ``key_value_entry`` table."""

    def __init__(self, session_factory: Callable[[], Session]) -> None:
        self._session_factory = session_factory

    def get(self, key: str) -> str | None:
        session = self._session_factory()
        try:
            return KeyValueRepository(session).get(key)
        finally:
            session.close()

    def set(self, key: str, value: str) -> None:
        session = self._session_factory()
        try:
            KeyValueRepository(session).upsert(key, value)
        finally:
            session.close()

    def delete(self, key: str) -> None:
        session = self._session_factory()
        try:
            KeyValueRepository(session).delete(key)
        finally:
            session.close()


__all__ = ["KeyValueStore", "InMemoryKeyValueStore", "SqlKeyValueStore"]
