"""Debug log modal — read-only view of the session's recent diagnostic entries."""

from __future__ import annotations

from textual.app import ComposeResult
from textual.containers import VerticalScroll
from textual.screen import ModalScreen
from textual.widgets import Static

from voice_minutes.l1_entities.event_log import DebugLogEntry


class DebugLogModal(ModalScreen[None]):
    DEFAULT_CSS = """
    DebugLogModal {
        align: center middle;
    }

    DebugLogModal > VerticalScroll {
        width: 70%;
        max-width: 100;
        height: auto;
        max-height: 80%;
        background: $surface;
        border: thick $primary;
        padding: 1 2;
    }

    DebugLogModal > VerticalScroll > #debug-title {
        text-style: bold;
        margin-bottom: 1;
    }

    DebugLogModal > VerticalScroll > #debug-hint {
        text-align: center;
        color: $text-muted;
        margin-top: 1;
    }
    """

    BINDINGS = [
        ('escape', 'dismiss', 'Close'),
    ]

    def __init__(self, entries: list[DebugLogEntry], **kwargs) -> None:
        super().__init__(**kwargs)
        self._entries = entries

    def compose(self) -> ComposeResult:
        with VerticalScroll():
            yield Static(f'Debug log ({len(self._entries)} entries, newest first)', id='debug-title')
            body = '\n'.join(entry.format() for entry in self._entries) or 'No entries yet.'
            yield Static(body, id='debug-body', markup=False)
            yield Static('Press Escape to close', id='debug-hint')
