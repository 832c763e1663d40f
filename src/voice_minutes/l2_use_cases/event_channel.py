"""Use case: single-consumer channel carrying engine events to the control thread."""

from __future__ import annotations

import queue
from collections.abc import Callable

from voice_minutes.l1_entities.recognition_event import EngineEvent


class EventChannel:
    """FIFO between an engine (any thread) and the one thread that owns the session.

    ``publish`` is safe to call from engine threads. ``drain``/``wait`` must only
    be called from the owning thread; each event is handed to the handler fully
    before the next is taken, so handlers never re-enter each other.
    """

    def __init__(self) -> None:
        self._queue: queue.Queue[EngineEvent] = queue.Queue()

    def publish(self, event: EngineEvent) -> None:
        self._queue.put(event)

    def pending(self) -> int:
        return self._queue.qsize()

    def drain(self, handler: Callable[[EngineEvent], None]) -> int:
        """Deliver every queued event without blocking. Returns the number delivered."""
        count = 0
        while True:
            try:
                event = self._queue.get_nowait()
            except queue.Empty:
                return count
            handler(event)
            count += 1

    def wait(self, handler: Callable[[EngineEvent], None], timeout: float) -> int:
        """Block up to *timeout* seconds for one event, then drain the rest."""
        try:
            event = self._queue.get(timeout=timeout)
        except queue.Empty:
            return 0
        handler(event)
        return 1 + self.drain(handler)
