"""Storage collaborators for character records."""

from __future__ import annotations

import logging
import threading
from typing import Protocol, runtime_checkable

from app.schemas.character import Character

logger = logging.getLogger(__name__)


@runtime_checkable
class CharacterStore(Protocol):
    """Narrow storage interface the character service calls through.

    ``persistent`` tells the service whether records written with :meth:`put`
    can be read back. Implementations raise
    :class:`app.exceptions.StorageUnavailableError` when the backing storage
    cannot be reached.
    """

    persistent: bool

    def find(self, character_id: str) -> Character | None: ...

    def list(self) -> list[Character]: ...

    def put(self, character_id: str, record: Character) -> None: ...

    def delete(self, character_id: str) -> bool: ...

    def ping(self) -> bool: ...


class StubCharacterStore:
    """Store that keeps nothing: reads are empty and writes are discarded."""

    persistent = False

    def find(self, character_id: str) -> Character | None:
        return None

    def list(self) -> list[Character]:
        return []

    def put(self, character_id: str, record: Character) -> None:
        logger.debug("Stub store discarding write for character '%s'", character_id)

    def delete(self, character_id: str) -> bool:
        return False

    def ping(self) -> bool:
        return True


class InMemoryCharacterStore:
    """Process-local store backed by an insertion ordered dict."""

    persistent = True

    def __init__(self) -> None:
        self._records: dict[str, Character] = {}
        self._lock = threading.Lock()

    def find(self, character_id: str) -> Character | None:
        with self._lock:
            record = self._records.get(character_id)
        return record.model_copy() if record is not None else None

    def list(self) -> list[Character]:
        with self._lock:
            return [record.model_copy() for record in self._records.values()]

    def put(self, character_id: str, record: Character) -> None:
        with self._lock:
            self._records[character_id] = record.model_copy()

    def delete(self, character_id: str) -> bool:
        with self._lock:
            return self._records.pop(character_id, None) is not None

    def ping(self) -> bool:
        return True

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)


def build_character_store(backend: str) -> CharacterStore:
    """Return the store configured by ``backend`` (``stub`` or ``memory``)."""

    if backend == "memory":
        logger.info("Using in-memory character storage")
        return InMemoryCharacterStore()
    if backend == "stub":
        logger.info("Using stub character storage; nothing will be persisted")
        return StubCharacterStore()
    raise ValueError(f"Unknown storage backend: {backend}")
