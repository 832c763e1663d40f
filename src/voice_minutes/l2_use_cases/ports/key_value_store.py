"""Port: durable string key/value storage for the transcript draft."""

from __future__ import annotations

from typing import Protocol


class KeyValueStore(Protocol):
    """Abstract key/value store. Failures surface as OSError or PersistenceError."""

    def get(self, key: str) -> str | None:
        ...

    def set(self, key: str, value: str) -> None:
        ...

    def remove(self, key: str) -> None:
        ...
