"""Transcript panel — editable TextArea mirroring the session transcript."""

from __future__ import annotations

from textual.widgets import TextArea


class TranscriptPanel(TextArea):
    """Editable transcript. Recognized text is pushed in; user edits flow out via TextArea.Changed."""

    DEFAULT_CSS = """
    TranscriptPanel {
        border: solid $primary;
        height: 1fr;
    }
    TranscriptPanel:focus {
        border: solid $accent;
    }
    """

    def __init__(self, title: str = 'Minutes', **kwargs) -> None:
        super().__init__(soft_wrap=True, **kwargs)
        self.border_title = title

    def show_transcript(self, text: str) -> bool:
        """Replace the content when it differs. Returns True if the widget changed."""
        if self.text == text:
            return False
        self.load_text(text)
        self.move_cursor(self.document.end)
        return True
