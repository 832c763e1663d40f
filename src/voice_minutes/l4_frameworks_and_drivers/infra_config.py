"""Infrastructure configs and application defaults — lives in L4, not domain."""

from __future__ import annotations

import copy

from pydantic import BaseModel, Field

from voice_minutes.l1_entities.config import AppConfig
from voice_minutes.l1_entities.event_log import DEFAULT_CAPACITY
from voice_minutes.l2_use_cases.persistence_adapter import DRAFT_KEY
from voice_minutes.l3_interface_adapters.gateways.yaml_config_loader import deep_merge

APP_CONFIG_DEFAULTS: dict = {
    'transcript': {
        'timestamp': False,
        'separator': '\n',
    },
    'session': {
        'on_end': 'restart',
        'max_restarts': 5,
    },
    'persistence': {
        'draft_key': DRAFT_KEY,
        'path': None,
    },
    'debug': {
        'log_capacity': DEFAULT_CAPACITY,
        'log_dir': None,
    },
}


def build_app_config(raw: dict) -> AppConfig:
    """Merge *raw* user overrides on top of defaults, then validate."""
    merged = copy.deepcopy(APP_CONFIG_DEFAULTS)
    deep_merge(merged, raw)
    return AppConfig.model_validate(merged)


class ReplayEngineConfig(BaseModel):
    script: str | None = None  # path to a YAML replay script
    speed: float = Field(default=1.0, gt=0)


class InfraConfig(BaseModel):
    """Groups engine-specific settings outside the domain layer."""

    engine: str = 'replay'  # only bundled engine
    replay: ReplayEngineConfig = Field(default_factory=ReplayEngineConfig)
