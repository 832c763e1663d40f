"""Textual App — thin TUI shell: compose, engine event pump, and user actions."""

from __future__ import annotations

import logging

import pyperclip
from textual.app import App as TextualApp
from textual.app import ComposeResult
from textual.binding import Binding
from textual.widgets import Static, TextArea

from voice_minutes.l2_use_cases.event_channel import EventChannel
from voice_minutes.l3_interface_adapters.controllers.recognition_session import RecognitionSession
from voice_minutes.l3_interface_adapters.gateways.transcript_sinks import ClipboardSink, FileExportSink
from voice_minutes.l4_frameworks_and_drivers.widgets.confirm_modal import ConfirmModal
from voice_minutes.l4_frameworks_and_drivers.widgets.debug_log_modal import DebugLogModal
from voice_minutes.l4_frameworks_and_drivers.widgets.interim_line import InterimLine
from voice_minutes.l4_frameworks_and_drivers.widgets.status_bar import StatusBar
from voice_minutes.l4_frameworks_and_drivers.widgets.transcript_panel import TranscriptPanel

log = logging.getLogger('vm.app')

_HINTS = r'\[F2] listen  \[F3] copy  \[F4] export  \[F6] log  \[F8] clear  \[^Q] quit'


class App(TextualApp):
    """Renders the session and forwards user actions to it.

    Engine events are pulled from the channel on the app's own loop, so every
    session call happens on one thread.
    """

    TITLE = 'voice-minutes'

    BINDINGS = [
        Binding('f2', 'toggle_listening', 'Listen', priority=True),
        Binding('f3', 'copy_transcript', 'Copy', priority=True),
        Binding('f4', 'export_transcript', 'Export', priority=True),
        Binding('f5', 'reset_interim', 'Reset interim', show=False, priority=True),
        Binding('f6', 'show_debug_log', 'Debug log', priority=True),
        Binding('f8', 'clear_transcript', 'Clear', priority=True),
        Binding('ctrl+q', 'quit_app', 'Quit', priority=True),
    ]

    def __init__(
        self,
        session: RecognitionSession,
        channel: EventChannel,
        clipboard: ClipboardSink,
        exporter: FileExportSink,
        poll_interval: float = 0.05,
        **kwargs,
    ) -> None:
        super().__init__(**kwargs)
        self._session = session
        self._channel = channel
        self._clipboard = clipboard
        self._exporter = exporter
        self._poll_interval = poll_interval

    def compose(self) -> ComposeResult:
        yield Static('  voice-minutes', id='header')
        yield TranscriptPanel(id='transcript-panel')
        yield InterimLine(id='interim-line')
        yield StatusBar(id='status-bar')

    def on_mount(self) -> None:
        self.query_one('#status-bar', StatusBar).keybinding_hints = _HINTS
        self._refresh_views()
        self.set_interval(self._poll_interval, self._drain_engine_events)

    def _drain_engine_events(self) -> int:
        self._sync_pending_edit()
        count = self._channel.drain(self._session.handle_event)
        if count:
            self._refresh_views()
        return count

    def _refresh_views(self) -> None:
        self.query_one('#transcript-panel', TranscriptPanel).show_transcript(self._session.transcript)
        self.query_one('#interim-line', InterimLine).interim = self._session.interim
        bar = self.query_one('#status-bar', StatusBar)
        bar.listening = self._session.is_listening
        bar.char_count = len(self._session.transcript)
        bar.restart_count = self._session.restart_count

    def _sync_pending_edit(self) -> None:
        """Hand the session any edit whose Changed message has not been handled yet.

        Must run before anything mutates the session and reloads the panel.
        """
        text = self.query_one('#transcript-panel', TranscriptPanel).text
        if text != self._session.transcript:
            self._session.edit_transcript(text)

    def on_text_area_changed(self, message: TextArea.Changed) -> None:
        text = message.text_area.text
        if text == self._session.transcript:
            return
        self._session.edit_transcript(text)
        self.query_one('#status-bar', StatusBar).char_count = len(text)

    # --- Actions ---

    def action_toggle_listening(self) -> None:
        self._sync_pending_edit()
        if self._session.is_listening:
            self._session.stop_listening()
            self.notify('Listening stopped', timeout=2)
        elif self._session.start_listening():
            self.notify('Listening…', timeout=2)
        else:
            self.notify('Recognition engine refused to start (see debug log)', severity='warning', timeout=4)
        self._refresh_views()

    def action_reset_interim(self) -> None:
        self._sync_pending_edit()
        self._session.reset_transcript()
        self._refresh_views()

    def action_copy_transcript(self) -> None:
        self._sync_pending_edit()
        text = self._session.transcript
        if not text:
            self.notify('No transcript to copy', severity='warning', timeout=2)
            return
        try:
            self._clipboard.copy(text)
        except pyperclip.PyperclipException as e:
            log.warning('Clipboard copy failed: %s', e)
            self.notify(f'Clipboard unavailable: {e}', severity='error', timeout=4)
            return
        self.notify('Transcript copied', timeout=2)

    def action_export_transcript(self) -> None:
        self._sync_pending_edit()
        text = self._session.transcript
        if not text:
            self.notify('No transcript to export', severity='warning', timeout=2)
            return
        try:
            path = self._exporter.export(text)
        except OSError as e:
            log.warning('Export failed: %s', e)
            self.notify(f'Export failed: {e}', severity='error', timeout=4)
            return
        self.notify(f'Saved {path}', timeout=4)

    def action_clear_transcript(self) -> None:
        def _on_answer(confirmed: bool | None) -> None:
            if not confirmed:
                return
            self._session.clear_all()
            self._refresh_views()
            self.notify('Transcript cleared', timeout=2)

        self.push_screen(ConfirmModal('Clear the whole transcript?'), _on_answer)

    def action_show_debug_log(self) -> None:
        self.push_screen(DebugLogModal(self._session.event_log.entries))

    def action_quit_app(self) -> None:
        self._session.shutdown()
        self.exit()
