"""Dependency container — composition root for wiring all layers together."""

from __future__ import annotations

from pathlib import Path

from voice_minutes.l1_entities.config import AppConfig
from voice_minutes.l1_entities.errors import EngineUnavailableError
from voice_minutes.l1_entities.event_log import EventLog
from voice_minutes.l2_use_cases.event_channel import EventChannel
from voice_minutes.l2_use_cases.interim_buffer import InterimBuffer
from voice_minutes.l2_use_cases.persistence_adapter import PersistenceAdapter
from voice_minutes.l2_use_cases.ports.key_value_store import KeyValueStore
from voice_minutes.l2_use_cases.ports.recognition_engine import RecognitionEngine
from voice_minutes.l2_use_cases.transcript_store import TranscriptStore
from voice_minutes.l3_interface_adapters.controllers.recognition_session import RecognitionSession
from voice_minutes.l3_interface_adapters.gateways.json_key_value_store import JsonKeyValueStore
from voice_minutes.l3_interface_adapters.gateways.paths import DEFAULT_DRAFT_PATH
from voice_minutes.l3_interface_adapters.gateways.replay_recognition_engine import ReplayRecognitionEngine
from voice_minutes.l3_interface_adapters.gateways.transcript_sinks import ClipboardSink, FileExportSink
from voice_minutes.l3_interface_adapters.gateways.yaml_config_loader import YamlConfigLoader
from voice_minutes.l4_frameworks_and_drivers.infra_config import InfraConfig


def build_store(config: AppConfig) -> KeyValueStore:
    path = Path(config.persistence.path).expanduser() if config.persistence.path else DEFAULT_DRAFT_PATH
    return JsonKeyValueStore(path)


def build_engine(infra: InfraConfig) -> RecognitionEngine:
    """Build the configured engine. Raises EngineUnavailableError when none can be built."""
    if infra.engine != 'replay':
        raise EngineUnavailableError(f'Unknown recognition engine: {infra.engine!r}')
    if not infra.replay.script:
        raise EngineUnavailableError('No recognition engine available: pass --replay or set replay.script')
    return ReplayRecognitionEngine.from_file(Path(infra.replay.script).expanduser(), speed=infra.replay.speed)


class DependencyContainer:
    """Creates and wires all concrete instances. Easy to override for testing.

    The engine is built first so an unavailable engine fails before any draft
    is touched. The transcript is seeded from the persisted draft exactly once.
    """

    def __init__(
        self,
        config: AppConfig,
        infra: InfraConfig | None = None,
        export_dir: Path | None = None,
        engine: RecognitionEngine | None = None,
        store: KeyValueStore | None = None,
    ) -> None:
        self.config = config
        _infra = infra or InfraConfig()

        self.engine: RecognitionEngine = engine if engine is not None else build_engine(_infra)
        self.store: KeyValueStore = store if store is not None else build_store(config)
        self.persistence = PersistenceAdapter(self.store, key=config.persistence.draft_key)

        self.transcript = TranscriptStore(self.persistence)
        self.transcript.seed(self.persistence.load())
        self.interim = InterimBuffer()
        self.event_log = EventLog(capacity=config.debug.log_capacity)

        self.channel = EventChannel()
        self.engine.subscribe(self.channel.publish)

        self.session = RecognitionSession(
            engine=self.engine,
            transcript=self.transcript,
            interim=self.interim,
            event_log=self.event_log,
            config=config.session,
            segment_format=config.transcript,
        )

        self.clipboard = ClipboardSink()
        self.exporter = FileExportSink(export_dir or Path.cwd())

    @staticmethod
    def config_loader() -> YamlConfigLoader:
        return YamlConfigLoader()
