"""Shared path constants for configuration, draft storage and logs."""

from __future__ import annotations

from platformdirs import user_config_path, user_data_path, user_log_path

APP_NAME = 'voice-minutes'

CONFIG_DIR = user_config_path(APP_NAME)
DATA_DIR = user_data_path(APP_NAME)
LOG_DIR = user_log_path(APP_NAME)

DEFAULT_DRAFT_PATH = DATA_DIR / 'drafts.json'

DEFAULT_CONFIG_PATHS = [
    CONFIG_DIR / 'config.yaml',
    CONFIG_DIR / 'config.yml',
]
