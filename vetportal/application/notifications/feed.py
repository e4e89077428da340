"""Live notification set with persisted dismissal.

Each notification is identified by a digest of its message, date and type.
Dismissed identifiers are stored as a JSON list under a single key of a
:class:`~vetportal.infrastructure.storage.KeyValueStore` and are suppressed
from every later publication until that key is cleared.
"""

from __future__ import annotations

import base64
import json
import logging
import threading
from collections.abc import Callable, Iterable

from vetportal.domain.entities import Notification
from vetportal.infrastructure.storage import KeyValueStore

logger = logging.getLogger(__name__)

DISMISSED_NOTIFICATIONS_KEY = "dismissedNotifications"

Observer = Callable[[list[Notification]], None]


def notification_id(notification: Notification) -> str:
    """Return the stable identifier of ``notification``."""

    raw = f"{notification.message}{notification.date}{notification.type}"
    return base64.urlsafe_b64encode(raw.encode("utf-8")).decode("ascii")


class NotificationFeed:
    """Publish the live notification set to subscribers."""

    def __init__(self, store: KeyValueStore, *, key: str = DISMISSED_NOTIFICATIONS_KEY) -> None:
        self._store = store
        self._key = key
        self._live: list[Notification] = []
        self._observers: list[Observer] = []
        self._lock = threading.RLock()

    @property
    def key(self) -> str:
        return self._key

    @property
    def notifications(self) -> list[Notification]:
        with self._lock:
            return list(self._live)

    @property
    def count(self) -> int:
        with self._lock:
            return len(self._live)

    def subscribe(self, observer: Observer) -> Callable[[], None]:
        """Register ``observer`` and deliver the current set to it immediately.

        Returns a callable that removes the subscription.
        """

        with self._lock:
            self._observers.append(observer)
            self._deliver(observer, list(self._live))

        def unsubscribe() -> None:
            with self._lock:
                if observer in self._observers:
                    self._observers.remove(observer)

        return unsubscribe

    def publish(self, candidates: Iterable[Notification]) -> list[Notification]:
        """Replace the live set with the non-dismissed ``candidates``."""

        with self._lock:
            dismissed = set(self.dismissed_ids())
            self._live = [
                candidate
                for candidate in candidates
                if notification_id(candidate) not in dismissed
            ]
            self._emit()
            return list(self._live)

    def add(self, candidate: Notification) -> bool:
        """Append a single notification unless it is dismissed or already live."""

        identifier = notification_id(candidate)
        with self._lock:
            if identifier in self.dismissed_ids():
                return False
            if any(notification_id(current) == identifier for current in self._live):
                return False
            self._live = [*self._live, candidate]
            self._emit()
            return True

    def dismiss(self, index: int) -> Notification | None:
        """Remove the notification at ``index`` and remember its identifier."""

        with self._lock:
            if index < 0 or index >= len(self._live):
                return None
            dismissed = self._live[index]
            self._remember_dismissed(notification_id(dismissed))
            self._live = [item for position, item in enumerate(self._live) if position != index]
            self._emit()
            return dismissed

    def clear(self) -> None:
        """Empty the live set without dismissing anything."""

        with self._lock:
            self._live = []
            self._emit()

    def clear_dismissed(self) -> None:
        """Forget every dismissed identifier."""

        with self._lock:
            self._store.delete(self._key)

    def dismissed_ids(self) -> list[str]:
        raw = self._store.get(self._key)
        if not raw:
            return []
        try:
            decoded = json.loads(raw)
        except ValueError:
            logger.warning("Ignoring unreadable dismissed notification list under %s", self._key)
            return []
        if not isinstance(decoded, list):
            logger.warning("Ignoring dismissed notification value of type %s", type(decoded).__name__)
            return []
        return [item for item in decoded if isinstance(item, str)]

    def _remember_dismissed(self, identifier: str) -> None:
        dismissed = self.dismissed_ids()
        if identifier in dismissed:
            return
        dismissed.append(identifier)
        self._store.set(self._key, json.dumps(dismissed))

    def _emit(self) -> None:
        snapshot = list(self._live)
        for observer in list(self._observers):
            self._deliver(observer, snapshot)

    def _deliver(self, observer: Observer, snapshot: list[Notification]) -> None:
        try:
            observer(list(snapshot))
        except Exception:  # pragma: no cover - isolate failing observers
            logger.exception("Notification observer %r failed", observer)


class NotificationFeedRegistry:
    """Keep one :class:`NotificationFeed` per signed-in user."""

    def __init__(self, store: KeyValueStore, *, base_key: str = DISMISSED_NOTIFICATIONS_KEY) -> None:
        self._store = store
        self._base_key = base_key
        self._feeds: dict[str, NotificationFeed] = {}
        self._lock = threading.Lock()

    def key_for(self, email: str | None) -> str:
        normalized = (email or "").strip().lower()
        if not normalized:
            return self._base_key
        return f"{self._base_key}:{normalized}"

    def feed_for(self, email: str | None) -> NotificationFeed:
        key = self.key_for(email)
        with self._lock:
            feed = self._feeds.get(key)
            if feed is None:
                feed = NotificationFeed(self._store, key=key)
                self._feeds[key] = feed
            return feed


__all__ = [
    "DISMISSED_NOTIFICATIONS_KEY",
    "NotificationFeed",
    "NotificationFeedRegistry",
    "Observer",
    "notification_id",
]
