"""Use case: write-through draft persistence that never fails its caller."""

from __future__ import annotations

import logging

from voice_minutes.l1_entities.errors import PersistenceError
from voice_minutes.l2_use_cases.ports.key_value_store import KeyValueStore

log = logging.getLogger('vm.persist')

DRAFT_KEY = 'voice-minutes-draft'


class PersistenceAdapter:
    """Mirrors the transcript into a single draft key.

    Storage failures are logged and absorbed: the in-memory transcript stays
    authoritative for the rest of the session and nothing is retried.
    """

    def __init__(self, store: KeyValueStore, key: str = DRAFT_KEY) -> None:
        self._store = store
        self._key = key

    @property
    def key(self) -> str:
        return self._key

    def load(self) -> str:
        try:
            value = self._store.get(self._key)
        except (OSError, PersistenceError) as e:
            log.warning('Draft load failed, starting empty: %s', e)
            return ''
        return value or ''

    def save(self, text: str) -> bool:
        try:
            self._store.set(self._key, text)
        except (OSError, PersistenceError) as e:
            log.warning('Draft save failed (%d chars kept in memory): %s', len(text), e)
            return False
        log.debug('Saved draft (%d chars)', len(text))
        return True

    def delete(self) -> bool:
        try:
            self._store.remove(self._key)
        except (OSError, PersistenceError) as e:
            log.warning('Draft delete failed: %s', e)
            return False
        log.debug('Deleted draft')
        return True
