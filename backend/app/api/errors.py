"""Exception handlers translating failures into the API error bodies."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.exceptions import CharacterNotFoundError, StorageUnavailableError

logger = logging.getLogger(__name__)


def format_validation_error(exc: RequestValidationError) -> str:
    """Flatten pydantic validation errors into one readable message."""

    parts: list[str] = []
    for error in exc.errors():
        location = ".".join(str(item) for item in error.get("loc", ()) if item != "body")
        message = error.get("msg", "invalid value")
        parts.append(f"{location}: {message}" if location else message)
    return "; ".join(parts) or "Invalid request body"


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    message = format_validation_error(exc)
    logger.debug("Rejected %s %s: %s", request.method, request.url.path, message)
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"error": message})


async def not_found_exception_handler(request: Request, exc: CharacterNotFoundError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content={"error": str(exc), "id": exc.character_id},
    )


async def storage_unavailable_exception_handler(request: Request, exc: StorageUnavailableError) -> JSONResponse:
    logger.error("Storage unavailable during %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, content={"error": str(exc)})


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(CharacterNotFoundError, not_found_exception_handler)
    app.add_exception_handler(StorageUnavailableError, storage_unavailable_exception_handler)


__all__ = ["format_validation_error", "register_exception_handlers"]
