"""Error payloads returned by the API."""

from __future__ import annotations

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    error: str = Field(..., description="Human readable error message")


class NotFoundResponse(ErrorResponse):
    id: str = Field(..., description="Identifier that had no matching record")
