"""Status bar — bottom bar showing listening state, transcript size, and keybinding hints."""

from __future__ import annotations

from rich.cells import cell_len
from textual.reactive import reactive
from textual.widgets import Static


class StatusBar(Static):
    DEFAULT_CSS = """
    StatusBar {
        dock: bottom;
        height: 1;
        background: $surface;
        color: $text;
        padding: 0 1;
        overflow: hidden hidden;
    }
    """

    listening: reactive[bool] = reactive(False)
    char_count: reactive[int] = reactive(0)
    restart_count: reactive[int] = reactive(0)
    keybinding_hints: reactive[str] = reactive('')

    def render(self) -> str:
        parts = ['● Listening' if self.listening else '○ Idle', f'{self.char_count:,} chars']
        if self.restart_count:
            parts.append(f'restarts {self.restart_count}')
        left = ' │ '.join(parts)

        hints = self.keybinding_hints
        if hints:
            content_width = (self.size.width or 80) - 2
            gap = content_width - cell_len(left) - cell_len(hints.replace(r'\[', '['))
            if gap >= 2:
                left = left + ' ' * gap + hints
        return left
