"""Connection management helpers for notification websockets."""

from __future__ import annotations

import asyncio
import logging
from collections import defaultdict
from typing import Any

from fastapi import WebSocket

logger = logging.getLogger(__name__)


class NotificationConnectionManager:
    """Manage active websocket connections grouped by notification feed."""

    def __init__(self) -> None:
        self._connections: defaultdict[str, set[WebSocket]] = defaultdict(set)
        self._loop: asyncio.AbstractEventLoop | None = None

    @property
    def loop(self) -> asyncio.AbstractEventLoop | None:
        """Event loop serving the websockets, known once a client connected."""

        return self._loop

    async def connect(self, feed_key: str, websocket: WebSocket) -> None:
        """Accept the websocket connection and register it for ``feed_key``."""

        await websocket.accept()
        self._loop = asyncio.get_running_loop()
        self._connections[feed_key].add(websocket)

    def disconnect(self, feed_key: str, websocket: WebSocket) -> None:
        connections = self._connections.get(feed_key)
        if connections is None:
            return
        connections.discard(websocket)
        if not connections:
            self._connections.pop(feed_key, None)

    def has_connections(self, feed_key: str) -> bool:
        return bool(self._connections.get(feed_key))

    async def send(self, feed_key: str, message: dict[str, Any]) -> None:
        """Send ``message`` to every active connection for ``feed_key``."""

        for connection in list(self._connections.get(feed_key, set())):
            try:
                await connection.send_json(message)
            except Exception:  # pragma: no cover - drop broken connections
                logger.warning("Dropping notification websocket for %s", feed_key, exc_info=True)
                self.disconnect(feed_key, connection)


notification_manager = NotificationConnectionManager()


__all__ = ["NotificationConnectionManager", "notification_manager"]
