"""Tests for ReplayRecognitionEngine — real thread, events collected through an EventChannel."""

from __future__ import annotations

from pathlib import Path

import pytest

from voice_minutes.l1_entities.errors import EngineStartRejectedError, EngineUnavailableError
from voice_minutes.l1_entities.recognition_event import EndEvent, ErrorEvent, ResultEvent
from voice_minutes.l2_use_cases.event_channel import EventChannel
from voice_minutes.l3_interface_adapters.gateways.replay_recognition_engine import (
    ReplayRecognitionEngine,
    ScriptStep,
    load_script,
)
from tests.conftest import result_event


def _run_to_end(engine: ReplayRecognitionEngine, channel: EventChannel) -> list:
    engine.join(timeout=5)
    received: list = []
    channel.drain(received.append)
    return received


def _engine(steps: list[ScriptStep]) -> tuple[ReplayRecognitionEngine, EventChannel]:
    channel = EventChannel()
    engine = ReplayRecognitionEngine(steps)
    engine.subscribe(channel.publish)
    return engine, channel


class TestLoadScript:
    def test_parses_yaml(self, replay_script: Path):
        steps = load_script(replay_script)
        assert len(steps) == 3
        assert isinstance(steps[0].event, ResultEvent)
        assert steps[2].event.result_index == 1

    def test_missing_file_unavailable(self, tmp_path: Path):
        with pytest.raises(EngineUnavailableError):
            ReplayRecognitionEngine.from_file(tmp_path / 'nope.yaml')

    def test_invalid_script_unavailable(self, tmp_path: Path):
        p = tmp_path / 'bad.yaml'
        p.write_text('- event: {kind: telepathy}\n', encoding='utf-8')
        with pytest.raises(EngineUnavailableError):
            load_script(p)

    def test_empty_file_is_empty_script(self, tmp_path: Path):
        p = tmp_path / 'empty.yaml'
        p.write_text('', encoding='utf-8')
        assert load_script(p) == []


class TestReplay:
    def test_publishes_script_then_end(self, replay_script: Path):
        channel = EventChannel()
        engine = ReplayRecognitionEngine.from_file(replay_script)
        engine.subscribe(channel.publish)
        engine.start()
        received = _run_to_end(engine, channel)
        assert [e.kind for e in received] == ['result', 'result', 'result', 'end']
        assert engine.remaining == 0
        assert not engine.running

    def test_start_when_exhausted_rejected(self):
        engine, channel = _engine([ScriptStep(event=result_event(('a', True)))])
        engine.start()
        _run_to_end(engine, channel)
        with pytest.raises(EngineStartRejectedError, match='exhausted'):
            engine.start()

    def test_start_while_running_rejected(self):
        engine, channel = _engine([ScriptStep(delay=5.0, event=result_event(('a', True)))])
        engine.start()
        try:
            with pytest.raises(EngineStartRejectedError, match='already started'):
                engine.start()
        finally:
            engine.abort()
            _run_to_end(engine, channel)

    def test_stop_delivers_pending_event(self):
        engine, channel = _engine(
            [
                ScriptStep(delay=5.0, event=result_event(('trailing', True))),
                ScriptStep(event=result_event(('never', True))),
            ]
        )
        engine.start()
        engine.stop()
        received = _run_to_end(engine, channel)
        assert [e.kind for e in received] == ['result', 'end']
        assert received[0].results[0].text == 'trailing'
        assert engine.remaining == 1

    def test_abort_drops_pending_event(self):
        engine, channel = _engine([ScriptStep(delay=5.0, event=result_event(('dropped', True)))])
        run_id = engine.start()
        engine.abort()
        received = _run_to_end(engine, channel)
        assert received == [EndEvent(run_id=run_id)]

    def test_scripted_end_pauses_run_and_restart_resumes(self):
        engine, channel = _engine(
            [
                ScriptStep(event=result_event(('first', True))),
                ScriptStep(event=EndEvent()),
                ScriptStep(event=result_event(('second', True))),
            ]
        )
        engine.start()
        first_run = _run_to_end(engine, channel)
        assert [e.kind for e in first_run] == ['result', 'end']
        engine.start()
        second_run = _run_to_end(engine, channel)
        assert [e.kind for e in second_run] == ['result', 'end']
        assert second_run[0].results[0].text == 'second'

    def test_each_run_stamps_its_own_id(self):
        engine, channel = _engine(
            [
                ScriptStep(event=result_event(('first', True))),
                ScriptStep(event=EndEvent()),
                ScriptStep(event=result_event(('second', True))),
            ]
        )
        first_id = engine.start()
        first_run = _run_to_end(engine, channel)
        second_id = engine.start()
        second_run = _run_to_end(engine, channel)
        assert second_id != first_id
        assert {e.run_id for e in first_run} == {first_id}
        assert {e.run_id for e in second_run} == {second_id}

    def test_scripted_error_ends_run(self):
        engine, channel = _engine(
            [
                ScriptStep(event=ErrorEvent(error='network')),
                ScriptStep(event=result_event(('after', True))),
            ]
        )
        engine.start()
        received = _run_to_end(engine, channel)
        assert [e.kind for e in received] == ['error', 'end']

    def test_speed_must_be_positive(self):
        with pytest.raises(ValueError):
            ReplayRecognitionEngine([], speed=0)
