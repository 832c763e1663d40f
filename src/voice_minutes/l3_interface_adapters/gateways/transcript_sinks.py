"""Gateways: value-only consumers of the transcript (clipboard, plain-text export)."""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import date
from pathlib import Path

import pyperclip

log = logging.getLogger('vm.sinks')


def export_filename(day: date) -> str:
    return f'minutes-{day.isoformat()}.txt'


class ClipboardSink:
    def copy(self, text: str) -> None:
        pyperclip.copy(text)
        log.debug('Copied %d chars to clipboard', len(text))


class FileExportSink:
    """Writes the transcript as ``minutes-YYYY-MM-DD.txt`` into a target directory."""

    def __init__(self, directory: Path, today: Callable[[], date] = date.today) -> None:
        self._directory = directory
        self._today = today

    @property
    def directory(self) -> Path:
        return self._directory

    def export(self, text: str) -> Path:
        self._directory.mkdir(parents=True, exist_ok=True)
        path = self._directory / export_filename(self._today())
        path.write_text(text, encoding='utf-8')
        log.info('Exported %d chars to %s', len(text), path)
        return path
