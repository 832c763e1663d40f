"""Gateway: key/value store backed by one JSON file — implements KeyValueStore port."""

from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path

from voice_minutes.l1_entities.errors import PersistenceError

log = logging.getLogger('vm.store')


class JsonKeyValueStore:
    """Keeps every key in a single JSON object; each write replaces the file atomically."""

    def __init__(self, path: Path) -> None:
        self._path = path

    @property
    def path(self) -> Path:
        return self._path

    def get(self, key: str) -> str | None:
        value = self._read().get(key)
        if value is not None and not isinstance(value, str):
            raise PersistenceError(f'Value for {key!r} in {self._path} is not a string')
        return value

    def set(self, key: str, value: str) -> None:
        data = self._read()
        data[key] = value
        self._write(data)

    def remove(self, key: str) -> None:
        data = self._read()
        if key not in data:
            return
        del data[key]
        self._write(data)

    def _read(self) -> dict:
        if not self._path.exists():
            return {}
        try:
            data = json.loads(self._path.read_text(encoding='utf-8'))
        except (UnicodeDecodeError, json.JSONDecodeError) as e:
            raise PersistenceError(f'Corrupt store {self._path}: {e}') from e
        if not isinstance(data, dict):
            raise PersistenceError(f'Corrupt store {self._path}: top level is not an object')
        return data

    def _write(self, data: dict) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(dir=self._path.parent, prefix=f'.{self._path.name}.', suffix='.tmp')
        try:
            with os.fdopen(fd, 'w', encoding='utf-8') as f:
                json.dump(data, f, ensure_ascii=False)
            os.replace(tmp_name, self._path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise
        log.debug('Wrote %d keys to %s', len(data), self._path.name)
