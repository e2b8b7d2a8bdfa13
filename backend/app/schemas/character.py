"""Pydantic schemas for character endpoints."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator

TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%SZ"


class Character(BaseModel):
    """A D&D character as it travels over the wire.

    Every field is optional on input and falls back to its zero value, as does
    an explicit ``null``. Unknown keys are ignored and a value of the wrong JSON
    type is rejected rather than coerced (``"level": "5"`` does not decode).
    """

    model_config = ConfigDict(
        strict=True,
        json_schema_extra={
            "example": {
                "id": "60d5ecb74b24c72b8c8b4567",
                "name": "Aragorn",
                "race": "Human",
                "class": "Fighter",
                "level": 5,
                "createdAt": "2025-11-09T08:00:00Z",
                "updatedAt": "2025-11-09T08:00:00Z",
            }
        },
    )

    id: str = Field(default="", description="Opaque character identifier")
    name: str = Field(default="", description="Display name")
    race: str = Field(default="", description="Race, free-form")
    character_class: str = Field(default="", alias="class", description="Class, free-form")
    level: int = Field(default=0, description="Character level")
    created_at: str = Field(default="", alias="createdAt", description="Creation time, ISO-8601 UTC")
    updated_at: str = Field(default="", alias="updatedAt", description="Last update time, ISO-8601 UTC")

    @field_validator("*", mode="before")
    @classmethod
    def _null_is_zero_value(cls, value: Any, info: ValidationInfo) -> Any:
        if value is None:
            return cls.model_fields[info.field_name].get_default()
        return value


# Fields a client may change on update; the rest are owned by the server.
MUTABLE_FIELDS = frozenset({"name", "race", "character_class", "level"})
