"""Confirm modal — yes/no gate in front of destructive actions."""

from __future__ import annotations

from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical
from textual.screen import ModalScreen
from textual.widgets import Button, Static


class ConfirmModal(ModalScreen[bool]):
    """Modal asking a yes/no question. y/Enter on Yes → True, n/Escape → False."""

    DEFAULT_CSS = """
    ConfirmModal {
        align: center middle;
    }

    ConfirmModal > Vertical {
        width: 50;
        height: auto;
        background: $surface;
        border: thick $warning;
        padding: 1 2;
    }

    ConfirmModal > Vertical > #confirm-question {
        text-style: bold;
        margin-bottom: 1;
    }

    ConfirmModal > Vertical > Horizontal {
        height: auto;
        align: center middle;
    }

    ConfirmModal Button {
        margin: 0 1;
    }
    """

    BINDINGS = [
        ('y', 'confirm', 'Yes'),
        ('n', 'cancel', 'No'),
        ('escape', 'cancel', 'No'),
    ]

    def __init__(self, question: str, **kwargs) -> None:
        super().__init__(**kwargs)
        self._question = question

    def compose(self) -> ComposeResult:
        with Vertical():
            yield Static(self._question, id='confirm-question')
            with Horizontal():
                yield Button('Yes', variant='error', id='confirm-yes')
                yield Button('No', variant='primary', id='confirm-no')

    def on_button_pressed(self, event: Button.Pressed) -> None:
        self.dismiss(event.button.id == 'confirm-yes')

    def action_confirm(self) -> None:
        self.dismiss(True)

    def action_cancel(self) -> None:
        self.dismiss(False)
