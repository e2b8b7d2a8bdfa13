"""Service implementing the character resource operations."""

from __future__ import annotations

import logging
import secrets
import threading
from collections import defaultdict
from contextlib import contextmanager
from datetime import datetime, timezone
from typing import Callable, Iterator

from app.exceptions import CharacterNotFoundError
from app.schemas.character import MUTABLE_FIELDS, TIMESTAMP_FORMAT, Character
from app.services.character_store import CharacterStore

logger = logging.getLogger(__name__)


def utc_timestamp() -> str:
    """Return the current UTC time in the character wire format."""

    return datetime.now(timezone.utc).strftime(TIMESTAMP_FORMAT)


def new_character_id() -> str:
    """Return a fresh 24 character hex identifier."""

    return secrets.token_hex(12)


class KeyedLock:
    """One lock per key, created on demand and dropped when unused."""

    def __init__(self) -> None:
        self._guard = threading.Lock()
        self._locks: dict[str, threading.Lock] = {}
        self._waiters: defaultdict[str, int] = defaultdict(int)

    @contextmanager
    def hold(self, key: str) -> Iterator[None]:
        with self._guard:
            lock = self._locks.setdefault(key, threading.Lock())
            self._waiters[key] += 1
        lock.acquire()
        try:
            yield
        finally:
            lock.release()
            with self._guard:
                self._waiters[key] -= 1
                if not self._waiters[key]:
                    del self._waiters[key]
                    del self._locks[key]

    def __len__(self) -> int:
        with self._guard:
            return len(self._locks)


class CharacterService:
    """CRUD operations over a :class:`CharacterStore`.

    With a store that does not persist (the stub), the service keeps the
    placeholder contract: listing is empty, creation echoes its input
    untouched and every lookup by id is not found. With a persistent store,
    creation allocates an id and timestamps, updates merge onto the stored
    record and deletes remove it. Writes to the same id are serialized.
    """

    def __init__(
        self,
        store: CharacterStore,
        *,
        clock: Callable[[], str] = utc_timestamp,
        id_factory: Callable[[], str] = new_character_id,
        locks: KeyedLock | None = None,
    ) -> None:
        self._store = store
        self._clock = clock
        self._id_factory = id_factory
        self._locks = locks if locks is not None else KeyedLock()

    # ------------------------------------------------------------------
    def list_characters(self) -> list[Character]:
        return self._store.list()

    def create_character(self, character: Character) -> Character:
        if not self._store.persistent:
            self._store.put(character.id, character)
            return character

        now = self._clock()
        record = character.model_copy(
            update={"id": self._id_factory(), "created_at": now, "updated_at": now}
        )
        with self._locks.hold(record.id):
            self._store.put(record.id, record)
        logger.info("Created character '%s'", record.id)
        return record

    def get_character(self, character_id: str) -> Character:
        record = self._store.find(character_id)
        if record is None:
            raise CharacterNotFoundError(character_id)
        return record

    def update_character(self, character_id: str, changes: Character) -> Character:
        with self._locks.hold(character_id):
            existing = self._store.find(character_id)
            if existing is None:
                raise CharacterNotFoundError(character_id)
            provided = changes.model_fields_set & MUTABLE_FIELDS
            update = {name: getattr(changes, name) for name in provided}
            update["updated_at"] = self._clock()
            record = existing.model_copy(update=update)
            self._store.put(character_id, record)
        logger.info("Updated character '%s' (%s)", character_id, ", ".join(sorted(provided)) or "no fields")
        return record

    def delete_character(self, character_id: str) -> None:
        with self._locks.hold(character_id):
            if not self._store.delete(character_id):
                raise CharacterNotFoundError(character_id)
        logger.info("Deleted character '%s'", character_id)


__all__ = ["CharacterService", "KeyedLock", "new_character_id", "utc_timestamp"]
