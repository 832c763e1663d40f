"""Interim line — provisional recognition text, shown below the transcript."""

from __future__ import annotations

from textual.reactive import reactive
from textual.widgets import Static


class InterimLine(Static):
    DEFAULT_CSS = """
    InterimLine {
        height: auto;
        min-height: 1;
        padding: 0 1;
        color: $text-muted;
        text-style: italic;
    }
    """

    interim: reactive[str] = reactive('')

    def render(self) -> str:
        return f'… {self.interim}' if self.interim else ''
