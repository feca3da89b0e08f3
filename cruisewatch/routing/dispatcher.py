"""EventStream — fans one kind of monitor event out to every listener.

Listeners are called synchronously, on the emitting thread, in
registration order.  A listener that raises is logged and skipped; the
remaining listeners still receive the event and the emitter carries on.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from typing import Generic, TypeVar

logger = logging.getLogger(__name__)

E = TypeVar("E")

Listener = Callable[[E], None]


class EventStream(Generic[E]):
    """An ordered list of listeners for a single event kind.

    Usage
    -----
    >>> polled = EventStream("polled")
    >>> polled.subscribe(on_polled)
    >>> polled.emit(MonitorPolledEvent(monitor=monitor))
    """

    def __init__(self, name: str) -> None:
        self._name = name
        self._lock = threading.Lock()
        self._listeners: list[Listener[E]] = []

    @property
    def name(self) -> str:
        return self._name

    # ------------------------------------------------------------------
    # Listener management
    # ------------------------------------------------------------------

    def subscribe(self, listener: Listener[E]) -> None:
        """Register a listener.  Registering the same one twice is ignored."""
        with self._lock:
            if listener not in self._listeners:
                self._listeners.append(listener)
                logger.debug("Subscribed %r to %s", listener, self._name)

    def unsubscribe(self, listener: Listener[E]) -> None:
        """Remove a previously registered listener."""
        with self._lock:
            try:
                self._listeners.remove(listener)
                logger.debug("Unsubscribed %r from %s", listener, self._name)
            except ValueError:
                pass

    @property
    def listeners(self) -> list[Listener[E]]:
        """Return a copy of the registered listener list."""
        with self._lock:
            return list(self._listeners)

    # ------------------------------------------------------------------
    # Emit
    # ------------------------------------------------------------------

    def emit(self, event: E) -> int:
        """Deliver *event* to every listener.

        Returns the number of listeners that handled the event without
        raising.
        """
        delivered = 0
        for listener in self.listeners:
            try:
                listener(event)
                delivered += 1
            except Exception:  # noqa: BLE001
                logger.exception(
                    "Listener %r failed while handling %s event", listener, self._name
                )
        return delivered
