"""
Yahtzee - Change Notifier

In-process publish/subscribe channel. Each stateful component owns one
notifier and publishes an EventPayload after every mutation.
"""

from __future__ import annotations

import logging
import threading
from typing import Callable

from yahtzee.realtime.events import EventPayload, GameEvent

logger = logging.getLogger(__name__)

Subscriber = Callable[[EventPayload], None]


class ChangeNotifier:
    """Fan-out of change events to registered callbacks.

    Callbacks run synchronously on the publishing thread, which may be an
    agent thread. A failing callback is logged and does not stop delivery
    to the remaining subscribers.
    """

    def __init__(self, source: str) -> None:
        self._source = source
        self._subscribers: list[Subscriber] = []
        self._lock = threading.Lock()

    @property
    def source(self) -> str:
        return self._source

    def subscribe(self, callback: Subscriber) -> None:
        """Register a callback. Registering the same callback twice is a no-op."""
        with self._lock:
            if callback in self._subscribers:
                logger.warning("Callback already subscribed to %s", self._source)
                return
            self._subscribers.append(callback)

    def unsubscribe(self, callback: Subscriber) -> None:
        """Remove a callback; unknown callbacks are ignored."""
        with self._lock:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

    def clear(self) -> None:
        with self._lock:
            self._subscribers.clear()

    @property
    def subscriber_count(self) -> int:
        with self._lock:
            return len(self._subscribers)

    def publish(self, event: GameEvent) -> None:
        """Deliver `event` to every subscriber."""
        self.relay(EventPayload(event=event, source=self._source))

    def relay(self, payload: EventPayload) -> None:
        """Deliver a payload from another notifier unchanged."""
        with self._lock:
            subscribers = list(self._subscribers)

        for callback in subscribers:
            try:
                callback(payload)
            except Exception:
                logger.exception(
                    "Subscriber error handling %s from %s",
                    payload.event.name,
                    payload.source,
                )
