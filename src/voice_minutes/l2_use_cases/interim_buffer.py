"""Use case: provisional recognition text, replaced wholesale and never persisted."""

from __future__ import annotations


class InterimBuffer:
    def __init__(self) -> None:
        self._text = ''

    @property
    def text(self) -> str:
        return self._text

    def replace(self, value: str) -> None:
        self._text = value

    def clear(self) -> None:
        self._text = ''
