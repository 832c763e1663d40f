"""Gateway: replays a recorded recognition script — implements RecognitionEngine port."""

from __future__ import annotations

import logging
import threading
from pathlib import Path

import yaml
from pydantic import BaseModel, Field, TypeAdapter, ValidationError

from voice_minutes.l1_entities.errors import EngineStartRejectedError, EngineUnavailableError
from voice_minutes.l1_entities.recognition_event import EndEvent, EngineEvent, ErrorEvent
from voice_minutes.l2_use_cases.ports.recognition_engine import EventListener

log = logging.getLogger('vm.engine')


class ScriptStep(BaseModel):
    """One recorded engine event, published *delay* seconds after the previous one."""

    delay: float = Field(default=0.0, ge=0.0)
    event: EngineEvent


_SCRIPT_ADAPTER = TypeAdapter(list[ScriptStep])


def load_script(path: Path) -> list[ScriptStep]:
    """Parse a YAML replay script. Raises EngineUnavailableError if unreadable."""
    try:
        raw = yaml.safe_load(path.read_text(encoding='utf-8'))
    except (OSError, yaml.YAMLError) as e:
        raise EngineUnavailableError(f'Cannot read replay script {path}: {e}') from e
    try:
        return _SCRIPT_ADAPTER.validate_python(raw or [])
    except ValidationError as e:
        raise EngineUnavailableError(f'Invalid replay script {path}: {e}') from e


class ReplayRecognitionEngine:
    """Publishes scripted events from a daemon thread, like a live continuous recognizer.

    The script is consumed once: a restart resumes where the previous run
    stopped, and starting with nothing left is rejected. Each run gets a fresh id
    that is stamped on its events, and every run ends with an ``EndEvent``.
    ``stop()`` still delivers the event that was pending; ``abort()`` drops it.
    A scripted ``ErrorEvent`` or ``EndEvent`` ends the run.
    """

    def __init__(self, script: list[ScriptStep], speed: float = 1.0) -> None:
        if speed <= 0:
            raise ValueError('speed must be positive')
        self._script = list(script)
        self._speed = speed
        self._cursor = 0
        self._listener: EventListener | None = None
        self._lock = threading.Lock()
        self._halt = threading.Event()
        self._aborted = False
        self._thread: threading.Thread | None = None
        self._running = False
        self._run_id = 0

    @classmethod
    def from_file(cls, path: Path, speed: float = 1.0) -> ReplayRecognitionEngine:
        if not path.is_file():
            raise EngineUnavailableError(f'Replay script not found: {path}')
        return cls(load_script(path), speed=speed)

    @property
    def remaining(self) -> int:
        return len(self._script) - self._cursor

    @property
    def running(self) -> bool:
        return self._running

    def subscribe(self, listener: EventListener) -> None:
        self._listener = listener

    def start(self) -> int:
        with self._lock:
            if self._running:
                raise EngineStartRejectedError('recognition already started')
            if self._cursor >= len(self._script):
                raise EngineStartRejectedError('replay script exhausted')
            self._halt.clear()
            self._aborted = False
            self._running = True
            self._run_id += 1
            run_id = self._run_id
            self._thread = threading.Thread(
                target=self._run, args=(run_id,), name=f'replay-engine-{run_id}', daemon=True
            )
            self._thread.start()
        log.debug('Replay run %d started at step %d/%d', run_id, self._cursor, len(self._script))
        return run_id

    def stop(self) -> None:
        self._halt.set()

    def abort(self) -> None:
        self._aborted = True
        self._halt.set()

    def join(self, timeout: float | None = None) -> None:
        thread = self._thread
        if thread is not None:
            thread.join(timeout)

    def _run(self, run_id: int) -> None:
        while self._cursor < len(self._script):
            step = self._script[self._cursor]
            interrupted = self._halt.wait(step.delay / self._speed) if step.delay > 0 else self._halt.is_set()
            if interrupted and self._aborted:
                break
            self._cursor += 1
            if isinstance(step.event, EndEvent):
                break  # scripted silence timeout; the closing EndEvent below stands in for it
            self._emit(step.event, run_id)
            if interrupted or isinstance(step.event, ErrorEvent):
                break
        with self._lock:
            self._running = False
        log.debug('Replay run %d ended at step %d/%d', run_id, self._cursor, len(self._script))
        self._emit(EndEvent(), run_id)

    def _emit(self, event: EngineEvent, run_id: int) -> None:
        if self._listener is None:
            log.warning('Dropped %s event: no listener subscribed', event.kind)
            return
        self._listener(event.model_copy(update={'run_id': run_id}))
