"""Tests for L4 config defaults and build_app_config factory."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from voice_minutes.l4_frameworks_and_drivers.infra_config import (
    APP_CONFIG_DEFAULTS,
    InfraConfig,
    build_app_config,
)


class TestBuildAppConfig:
    def test_defaults_produce_valid_config(self):
        cfg = build_app_config({})
        assert cfg.transcript.timestamp is False
        assert cfg.transcript.separator == '\n'
        assert cfg.session.on_end == 'restart'
        assert cfg.session.max_restarts == 5
        assert cfg.persistence.draft_key == 'voice-minutes-draft'
        assert cfg.persistence.path is None
        assert cfg.debug.log_capacity == 50

    def test_user_overrides_take_precedence(self):
        cfg = build_app_config({'session': {'on_end': 'stop'}, 'transcript': {'timestamp': True}})
        assert cfg.session.on_end == 'stop'
        assert cfg.session.max_restarts == 5  # default preserved
        assert cfg.transcript.timestamp is True
        assert cfg.transcript.separator == '\n'

    def test_defaults_not_mutated(self):
        build_app_config({'session': {'max_restarts': 1}})
        assert APP_CONFIG_DEFAULTS['session']['max_restarts'] == 5

    def test_invalid_policy_rejected(self):
        with pytest.raises(ValidationError):
            build_app_config({'session': {'on_end': 'explode'}})


class TestInfraConfig:
    def test_defaults(self):
        infra = InfraConfig()
        assert infra.engine == 'replay'
        assert infra.replay.script is None
        assert infra.replay.speed == 1.0

    def test_from_raw_ignores_app_sections(self):
        infra = InfraConfig.model_validate({'session': {'on_end': 'stop'}, 'replay': {'script': 'x.yaml'}})
        assert infra.replay.script == 'x.yaml'
