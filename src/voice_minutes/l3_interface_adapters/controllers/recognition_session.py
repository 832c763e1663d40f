"""RecognitionSession — listening state machine bridging a recognition engine to the transcript."""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime

from voice_minutes.l1_entities.config import SessionConfig
from voice_minutes.l1_entities.errors import EngineStartRejectedError
from voice_minutes.l1_entities.event_log import EventLog
from voice_minutes.l1_entities.listening_state import ListeningState
from voice_minutes.l1_entities.recognition_event import EndEvent, EngineEvent, ErrorEvent, ResultEvent
from voice_minutes.l1_entities.transcript import Segment, SegmentFormat
from voice_minutes.l2_use_cases.classify_results_use_case import classify_results
from voice_minutes.l2_use_cases.interim_buffer import InterimBuffer
from voice_minutes.l2_use_cases.ports.recognition_engine import RecognitionEngine
from voice_minutes.l2_use_cases.transcript_store import TranscriptStore

log = logging.getLogger('vm.session')


class RecognitionSession:
    """Owns the listening state, the transcript, the interim text and the debug log.

    The session's own ``state`` is authoritative: engine confirmations are never
    awaited, and events delivered after a stop cannot flip it back to listening.
    End and error events are honoured only for the engine run the session last
    started; a late end from an earlier run must not end the current one.
    Engine events and user commands must arrive on one thread, one at a time
    (see ``EventChannel``).
    """

    def __init__(
        self,
        engine: RecognitionEngine,
        transcript: TranscriptStore,
        interim: InterimBuffer,
        event_log: EventLog,
        config: SessionConfig,
        segment_format: SegmentFormat | None = None,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self._engine = engine
        self._transcript = transcript
        self._interim = interim
        self._event_log = event_log
        self._config = config
        self._format = segment_format or SegmentFormat()
        self._clock = clock

        self.state = ListeningState.IDLE
        self.restart_count = 0
        self._idle_restarts = 0
        self._closed = False
        self._run_id: int | None = None

    @property
    def is_listening(self) -> bool:
        return self.state is ListeningState.LISTENING

    @property
    def transcript(self) -> str:
        return self._transcript.text

    @property
    def interim(self) -> str:
        return self._interim.text

    @property
    def event_log(self) -> EventLog:
        return self._event_log

    # --- User commands ---

    def start_listening(self) -> bool:
        """Ask the engine to start. Returns True if the session is now listening."""
        if self._closed:
            log.debug('start_listening ignored: session shut down')
            return False
        if self.is_listening:
            return True
        try:
            self._run_id = self._engine.start()
        except EngineStartRejectedError as e:
            self._trace(logging.WARNING, 'Start rejected: %s', e)
            return False
        self.state = ListeningState.LISTENING
        self._idle_restarts = 0
        self._trace(logging.INFO, 'Listening started')
        return True

    def stop_listening(self) -> None:
        if not self.is_listening:
            return
        self._engine.stop()
        self.state = ListeningState.IDLE
        self._interim.clear()
        self._trace(logging.INFO, 'Listening stopped')

    def reset_transcript(self) -> None:
        """Drop provisional text only; the transcript itself is untouched."""
        self._interim.clear()

    def edit_transcript(self, value: str) -> None:
        self._transcript.replace(value)

    def clear_all(self) -> None:
        """Empty transcript and interim text and delete the draft. Caller confirms first."""
        self._transcript.clear()
        self._interim.clear()
        self._trace(logging.INFO, 'Transcript cleared')

    def shutdown(self) -> None:
        if self._closed:
            return
        if self.is_listening:
            self._engine.abort()
            self.state = ListeningState.IDLE
        self._interim.clear()
        self._closed = True
        self._trace(logging.INFO, 'Session shut down')

    # --- Engine events ---

    def handle_event(self, event: EngineEvent) -> None:
        if self._closed:
            log.debug('Dropped %s event after shutdown', event.kind)
            return
        if isinstance(event, ResultEvent):
            self._on_result(event)
        elif event.run_id != self._run_id:
            self._trace(logging.DEBUG, 'Ignored %s event from finished run %d', event.kind, event.run_id)
        elif isinstance(event, ErrorEvent):
            self._on_error(event)
        elif isinstance(event, EndEvent):
            self._on_end()
        else:  # pragma: no cover -- EngineEvent union is closed
            log.warning('Unknown engine event: %r', event)

    def _on_result(self, event: ResultEvent) -> None:
        chunks = classify_results(event)
        if chunks.final:
            segment = Segment(text=chunks.final, committed_at=self._clock())
            self._transcript.append(segment.render(self._format))
            log.debug('Committed segment (%d chars, listening=%s)', len(chunks.final), self.is_listening)
        # Interim text belongs to the live run only; trailing events keep it empty.
        if not self.is_listening:
            self._interim.clear()
        elif event.run_id == self._run_id:
            if chunks.final or chunks.interim:
                self._idle_restarts = 0
            self._interim.replace(chunks.interim)

    def _on_error(self, event: ErrorEvent) -> None:
        reason = f'{event.error}: {event.message}' if event.message else event.error
        self.state = ListeningState.IDLE
        self._interim.clear()
        self._trace(logging.ERROR, 'Recognition error: %s', reason)

    def _on_end(self) -> None:
        self._interim.clear()
        if not self.is_listening:
            self._trace(logging.DEBUG, 'Engine ended')
            return
        if self._config.on_end == 'stop':
            self.state = ListeningState.IDLE
            self._trace(logging.INFO, 'Engine ended on its own; stopped')
            return
        if self._idle_restarts >= self._config.max_restarts:
            self.state = ListeningState.IDLE
            self._trace(logging.WARNING, 'Engine ended; giving up after %d silent restarts', self._idle_restarts)
            return
        try:
            self._run_id = self._engine.start()
        except EngineStartRejectedError as e:
            self.state = ListeningState.IDLE
            self._trace(logging.WARNING, 'Restart rejected: %s', e)
            return
        self._idle_restarts += 1
        self.restart_count += 1
        self._trace(logging.INFO, 'Engine ended on its own; restarted (#%d)', self.restart_count)

    def _trace(self, level: int, msg: str, *args: object) -> None:
        log.log(level, msg, *args)
        self._event_log.append(msg % args if args else msg)
