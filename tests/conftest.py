"""Shared test fixtures and protocol-conforming fakes."""

from __future__ import annotations

from pathlib import Path

import pytest

from voice_minutes.l1_entities.config import SessionConfig
from voice_minutes.l1_entities.errors import EngineStartRejectedError, PersistenceError
from voice_minutes.l1_entities.event_log import EventLog
from voice_minutes.l1_entities.recognition_event import EngineEvent, RecognitionResult, ResultEvent
from voice_minutes.l2_use_cases.interim_buffer import InterimBuffer
from voice_minutes.l2_use_cases.persistence_adapter import PersistenceAdapter
from voice_minutes.l2_use_cases.ports.recognition_engine import EventListener
from voice_minutes.l2_use_cases.transcript_store import TranscriptStore
from voice_minutes.l3_interface_adapters.controllers.recognition_session import RecognitionSession

# --- Protocol-conforming Fakes ---


class FakeRecognitionEngine:
    """Fake engine: records commands, delivers events synchronously via ``emit``.

    Each accepted ``start`` opens a new run; ``emit`` stamps the current run id
    unless the test passes an older one.
    """

    def __init__(self) -> None:
        self._listener: EventListener | None = None
        self._reject_reason: str | None = None
        self.start_calls = 0
        self.stop_calls = 0
        self.abort_calls = 0
        self.run_id = 0

    def subscribe(self, listener: EventListener) -> None:
        self._listener = listener

    def start(self) -> int:
        self.start_calls += 1
        if self._reject_reason is not None:
            raise EngineStartRejectedError(self._reject_reason)
        self.run_id += 1
        return self.run_id

    def stop(self) -> None:
        self.stop_calls += 1

    def abort(self) -> None:
        self.abort_calls += 1

    def reject_starts(self, reason: str = 'recognition already started') -> None:
        self._reject_reason = reason

    def accept_starts(self) -> None:
        self._reject_reason = None

    def emit(self, event: EngineEvent, run_id: int | None = None) -> None:
        assert self._listener is not None, 'no listener subscribed'
        stamp = self.run_id if run_id is None else run_id
        self._listener(event.model_copy(update={'run_id': stamp}))


class FakeKeyValueStore:
    """In-memory key/value store that survives being reopened via ``data``."""

    def __init__(self, data: dict[str, str] | None = None) -> None:
        self.data: dict[str, str] = dict(data or {})
        self.set_calls: list[tuple[str, str]] = []
        self.remove_calls: list[str] = []

    def get(self, key: str) -> str | None:
        return self.data.get(key)

    def set(self, key: str, value: str) -> None:
        self.set_calls.append((key, value))
        self.data[key] = value

    def remove(self, key: str) -> None:
        self.remove_calls.append(key)
        self.data.pop(key, None)


class FailingKeyValueStore:
    """Key/value store whose every operation fails, like a full or unavailable disk."""

    def __init__(self, error: Exception | None = None) -> None:
        self._error = error or PersistenceError('quota exceeded')
        self.attempts = 0

    def get(self, key: str) -> str | None:
        self.attempts += 1
        raise self._error

    def set(self, key: str, value: str) -> None:
        self.attempts += 1
        raise self._error

    def remove(self, key: str) -> None:
        self.attempts += 1
        raise self._error


def result_event(*entries: tuple[str, bool], result_index: int = 0) -> ResultEvent:
    """Build a ResultEvent from (text, is_final) pairs."""
    return ResultEvent(
        results=[RecognitionResult.of(text, is_final=final) for text, final in entries],
        result_index=result_index,
    )


def make_session(
    engine: FakeRecognitionEngine,
    store: FakeKeyValueStore | FailingKeyValueStore,
    config: SessionConfig | None = None,
    **kwargs,
) -> RecognitionSession:
    persistence = PersistenceAdapter(store)
    transcript = TranscriptStore(persistence)
    transcript.seed(persistence.load())
    session = RecognitionSession(
        engine=engine,
        transcript=transcript,
        interim=InterimBuffer(),
        event_log=EventLog(),
        config=config or SessionConfig(on_end='restart', max_restarts=5),
        **kwargs,
    )
    engine.subscribe(session.handle_event)
    return session


# --- Standard Fixtures ---


@pytest.fixture
def fake_engine() -> FakeRecognitionEngine:
    return FakeRecognitionEngine()


@pytest.fixture
def fake_store() -> FakeKeyValueStore:
    return FakeKeyValueStore()


@pytest.fixture
def session(fake_engine: FakeRecognitionEngine, fake_store: FakeKeyValueStore) -> RecognitionSession:
    return make_session(fake_engine, fake_store)


@pytest.fixture
def replay_script(tmp_path: Path) -> Path:
    content = """\
- event:
    kind: result
    results:
      - is_final: false
        alternatives: [{transcript: "Hel"}]
- event:
    kind: result
    results:
      - is_final: true
        alternatives: [{transcript: "Hello "}]
- event:
    kind: result
    result_index: 1
    results:
      - is_final: true
        alternatives: [{transcript: "Hello "}]
      - is_final: true
        alternatives: [{transcript: "world"}]
"""
    p = tmp_path / 'script.yaml'
    p.write_text(content, encoding='utf-8')
    return p
