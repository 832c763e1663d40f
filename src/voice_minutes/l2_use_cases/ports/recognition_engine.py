"""Port: continuous speech recognition engine."""

from __future__ import annotations

from collections.abc import Callable
from typing import Protocol

from voice_minutes.l1_entities.recognition_event import EngineEvent

EventListener = Callable[[EngineEvent], None]


class RecognitionEngine(Protocol):
    """Abstract continuous recognizer. Commands are fire-and-forget; effects arrive as events."""

    def subscribe(self, listener: EventListener) -> None:
        """Register the single consumer of result, error and end events."""
        ...

    def start(self) -> int:
        """Begin a new run and return its id; every event of that run carries it.

        Raises EngineStartRejectedError if the engine refuses.
        """
        ...

    def stop(self) -> None:
        """Stop listening, letting pending results through."""
        ...

    def abort(self) -> None:
        """Stop listening and discard pending results."""
        ...
