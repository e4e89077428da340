"""Tests for the key-value stores."""

from __future__ import annotations

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from vetportal.infrastructure.database import Base, initialize_database
from vetportal.infrastructure.storage import InMemoryKeyValueStore, SqlKeyValueStore


@pytest.fixture()
def sql_store(tmp_path):
    engine = create_engine(
        f"sqlite:///{tmp_path / 'store.db'}", connect_args={"check_same_thread": False}
    )
    initialize_database(engine)
    factory = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    yield SqlKeyValueStore(factory)
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


def test_sql_store_round_trip(sql_store: SqlKeyValueStore) -> None:
    assert sql_store.get("dismissedNotifications") is None

    sql_store.set("dismissedNotifications", '["a"]')
    sql_store.set("dismissedNotifications", '["a", "b"]')

    assert sql_store.get("dismissedNotifications") == '["a", "b"]'

    sql_store.delete("dismissedNotifications")
    sql_store.delete("dismissedNotifications")

    assert sql_store.get("dismissedNotifications") is None


def test_in_memory_store_copies_initial_values() -> None:
    initial = {"key": "value"}
    store = InMemoryKeyValueStore(initial)

    store.set("key", "other")

    assert initial == {"key": "value"}
    assert store.get("key") == "other"


def test_application_store_opens_sessions_from_the_shared_factory() -> None:
    from vetportal.interfaces.api.dependencies import get_key_value_store, reset_dependency_caches

    initialize_database()
    reset_dependency_caches()
    store = get_key_value_store()

    store.set("dismissedNotifications:vet@example.com", "[]")

    assert isinstance(store, SqlKeyValueStore)
    assert store.get("dismissedNotifications:vet@example.com") == "[]"
    store.delete("dismissedNotifications:vet@example.com")
    assert store.get("dismissedNotifications:vet@example.com") is None
    reset_dependency_caches()
