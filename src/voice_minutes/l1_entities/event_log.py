"""Bounded diagnostic log shown by the debug surface."""

from __future__ import annotations

from collections import deque
from datetime import datetime

from pydantic import BaseModel, Field

DEFAULT_CAPACITY = 50


class DebugLogEntry(BaseModel):
    message: str
    timestamp: datetime = Field(default_factory=datetime.now)

    def format(self) -> str:
        return f'{self.timestamp:%H:%M:%S} {self.message}'


class EventLog:
    """Newest-first ring buffer; entries beyond *capacity* are evicted oldest first."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        self._entries: deque[DebugLogEntry] = deque(maxlen=capacity)

    @property
    def capacity(self) -> int:
        return self._entries.maxlen or 0

    @property
    def entries(self) -> list[DebugLogEntry]:
        return list(self._entries)

    def append(self, message: str) -> DebugLogEntry:
        entry = DebugLogEntry(message=message)
        self._entries.appendleft(entry)
        return entry

    def __len__(self) -> int:
        return len(self._entries)
