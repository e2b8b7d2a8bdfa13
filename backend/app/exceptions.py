"""Custom exceptions for the character service."""

from __future__ import annotations

NOT_FOUND_MESSAGE = "Character not found"


class CharacterServiceError(Exception):
    """Base exception for the character service."""


class CharacterNotFoundError(CharacterServiceError):
    """Raised when no record exists for the requested character id."""

    def __init__(self, character_id: str) -> None:
        self.character_id = character_id
        super().__init__(NOT_FOUND_MESSAGE)


class StorageUnavailableError(CharacterServiceError):
    """Raised by a store that cannot reach its backing storage."""

    def __init__(self, message: str = "Character storage is unavailable") -> None:
        super().__init__(message)


__all__ = [
    "NOT_FOUND_MESSAGE",
    "CharacterNotFoundError",
    "CharacterServiceError",
    "StorageUnavailableError",
]
