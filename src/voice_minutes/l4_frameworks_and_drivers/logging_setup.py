"""File-based debug logging setup."""

from __future__ import annotations

import logging
from pathlib import Path


def setup_file_logging(log_dir: Path, level: int = logging.DEBUG) -> Path:
    """Attach a debug log file under *log_dir* to the ``vm`` logger tree. Idempotent."""
    log_dir.mkdir(parents=True, exist_ok=True)
    log_path = log_dir / 'vm_debug.log'
    root = logging.getLogger('vm')
    root.setLevel(level)
    for handler in root.handlers:
        if isinstance(handler, logging.FileHandler) and Path(handler.baseFilename) == log_path.absolute():
            return log_path
    handler = logging.FileHandler(log_path, encoding='utf-8')
    handler.setFormatter(logging.Formatter('%(asctime)s %(levelname)s %(name)s %(message)s'))
    root.addHandler(handler)
    logging.getLogger('vm.app').info('Debug logging started → %s', log_path)
    return log_path
