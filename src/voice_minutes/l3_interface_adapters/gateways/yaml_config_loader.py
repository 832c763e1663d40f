"""Gateway: YAML configuration loader."""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path

import yaml

from voice_minutes.l1_entities.config import AppConfig
from voice_minutes.l3_interface_adapters.gateways.paths import DEFAULT_CONFIG_PATHS

CONFIG_ENV_VAR = 'VOICE_MINUTES_CONFIG'


class YamlConfigLoader:
    """Reads user configuration from YAML.

    Resolution order: explicit path, then ``$VOICE_MINUTES_CONFIG``, then the
    first existing file among *search_paths*. An explicit or env path that does
    not exist is an error; missing default files just mean "no overrides".
    """

    def __init__(
        self,
        search_paths: list[Path] | None = None,
        env: Mapping[str, str] | None = None,
    ) -> None:
        self._search_paths = search_paths if search_paths is not None else DEFAULT_CONFIG_PATHS
        self._env = env if env is not None else os.environ

    def resolve(self, config_path: str | None = None) -> Path | None:
        explicit = config_path or self._env.get(CONFIG_ENV_VAR)
        if explicit:
            path = Path(explicit).expanduser()
            if not path.exists():
                raise FileNotFoundError(f'Config file not found: {path}')
            return path
        return next((p for p in self._search_paths if p.exists()), None)

    def load_raw(
        self,
        config_path: str | None = None,
        overrides: dict | None = None,
    ) -> dict:
        """Return the merged YAML data as a raw dict (before Pydantic validation)."""
        path = self.resolve(config_path)
        data = _read_mapping(path) if path is not None else {}
        if overrides:
            deep_merge(data, overrides)
        return data

    def load(
        self,
        config_path: str | None = None,
        overrides: dict | None = None,
    ) -> AppConfig:
        return AppConfig.model_validate(self.load_raw(config_path, overrides))


def _read_mapping(path: Path) -> dict:
    try:
        data = yaml.safe_load(path.read_text(encoding='utf-8'))
    except yaml.YAMLError as e:
        raise ValueError(f'Config file {path} is not valid YAML: {e}') from e
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f'Config file {path} must contain a mapping, got {type(data).__name__}')
    return data


def deep_merge(base: dict, override: dict) -> dict:
    """Recursively merge *override* into *base* (mutates base)."""
    for key, value in override.items():
        if key in base and isinstance(base[key], dict) and isinstance(value, dict):
            deep_merge(base[key], value)
        else:
            base[key] = value
    return base
