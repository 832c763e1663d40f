"""L1 entity: listening state of a recognition session."""

from __future__ import annotations

import enum


class ListeningState(enum.Enum):
    IDLE = 'idle'
    LISTENING = 'listening'
