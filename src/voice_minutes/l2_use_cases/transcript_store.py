"""Use case: the durable transcript — append, replace, clear, each persisted synchronously."""

from __future__ import annotations

from voice_minutes.l2_use_cases.persistence_adapter import PersistenceAdapter


class TranscriptStore:
    """Owns the transcript text. Every mutation is written through before returning."""

    def __init__(self, persistence: PersistenceAdapter) -> None:
        self._persistence = persistence
        self._text = ''

    @property
    def text(self) -> str:
        return self._text

    def seed(self, text: str) -> None:
        """Restore a previously loaded draft without writing it back."""
        self._text = text

    def append(self, segment: str) -> None:
        self._text += segment
        self._persistence.save(self._text)

    def replace(self, value: str) -> None:
        self._text = value
        self._persistence.save(self._text)

    def clear(self) -> None:
        self._text = ''
        self._persistence.delete()
