"""Tests for the live notification set and its persisted dismissals."""

from __future__ import annotations

import json

from vetportal.application.notifications import (
    DISMISSED_NOTIFICATIONS_KEY,
    NotificationFeed,
    NotificationFeedRegistry,
    notification_id,
)
from vetportal.domain.entities import Notification
from vetportal.infrastructure.storage import InMemoryKeyValueStore


def _notification(message: str = "A", date: str = "2024-01-01", kind: str = "reminder") -> Notification:
    return Notification(message=message, date=date, type=kind)


def test_identifier_depends_on_message_date_and_type_only() -> None:
    first = Notification(message="A", date="2024-01-01", type="reminder", id=1, priority="high")
    second = Notification(message="A", date="2024-01-01", type="reminder", id=2)

    assert notification_id(first) == notification_id(second)
    assert notification_id(first) != notification_id(_notification(kind="info"))


def test_dismissed_notification_is_not_republished() -> None:
    feed = NotificationFeed(InMemoryKeyValueStore())
    feed.publish([_notification()])

    feed.dismiss(0)
    republished = feed.publish([_notification()])

    assert republished == []
    assert feed.count == 0


def test_dismissal_survives_a_new_feed_on_the_same_store() -> None:
    store = InMemoryKeyValueStore()
    first = NotificationFeed(store)
    first.publish([_notification(), _notification("B")])
    first.dismiss(0)

    second = NotificationFeed(store)

    assert second.publish([_notification(), _notification("B")]) == [_notification("B")]
    assert json.loads(store.get(DISMISSED_NOTIFICATIONS_KEY)) == [notification_id(_notification())]


def test_dismiss_out_of_range_changes_nothing() -> None:
    store = InMemoryKeyValueStore()
    feed = NotificationFeed(store)
    feed.publish([_notification()])

    assert feed.dismiss(3) is None
    assert feed.dismiss(-1) is None
    assert feed.count == 1
    assert store.get(DISMISSED_NOTIFICATIONS_KEY) is None


def test_add_skips_dismissed_and_duplicate_notifications() -> None:
    feed = NotificationFeed(InMemoryKeyValueStore())
    feed.publish([_notification()])

    assert feed.add(_notification()) is False
    assert feed.add(_notification("B")) is True
    feed.dismiss(1)
    assert feed.add(_notification("B")) is False
    assert feed.notifications == [_notification()]


def test_clear_dismissed_allows_republication() -> None:
    feed = NotificationFeed(InMemoryKeyValueStore())
    feed.publish([_notification()])
    feed.dismiss(0)

    feed.clear_dismissed()

    assert feed.publish([_notification()]) == [_notification()]


def test_unreadable_dismissed_value_is_ignored() -> None:
    store = InMemoryKeyValueStore({DISMISSED_NOTIFICATIONS_KEY: "{not json"})
    feed = NotificationFeed(store)

    assert feed.publish([_notification()]) == [_notification()]


def test_subscribers_receive_current_set_and_every_change() -> None:
    feed = NotificationFeed(InMemoryKeyValueStore())
    feed.publish([_notification()])
    received: list[list[Notification]] = []

    unsubscribe = feed.subscribe(received.append)
    feed.add(_notification("B"))
    unsubscribe()
    feed.clear()

    assert received == [[_notification()], [_notification(), _notification("B")]]


def test_failing_subscriber_does_not_block_others() -> None:
    feed = NotificationFeed(InMemoryKeyValueStore())
    received: list[int] = []

    def broken(_: list[Notification]) -> None:
        raise RuntimeError("boom")

    feed.subscribe(broken)
    feed.subscribe(lambda notifications: received.append(len(notifications)))
    feed.publish([_notification()])

    assert received == [0, 1]


def test_registry_keeps_one_feed_per_user() -> None:
    store = InMemoryKeyValueStore()
    registry = NotificationFeedRegistry(store)

    feed = registry.feed_for("Jane@Example.com ")

    assert feed is registry.feed_for("jane@example.com")
    assert feed.key == f"{DISMISSED_NOTIFICATIONS_KEY}:jane@example.com"
    assert registry.feed_for(None).key == DISMISSED_NOTIFICATIONS_KEY

    feed.publish([_notification()])
    feed.dismiss(0)
    assert registry.feed_for(None).publish([_notification()]) == [_notification()]
