"""Routing table of the HTTP API.

Every endpoint is one :class:`Route` entry mapping an HTTP method and a path
pattern to a handler. The table is plain data; :func:`register_routes` is the
only place that knows how to hand it to a FastAPI router.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable

from fastapi import APIRouter, status

from app.api.routes import characters, health
from app.schemas.character import Character
from app.schemas.errors import ErrorResponse, NotFoundResponse
from app.schemas.health import HealthStatus


@dataclass(frozen=True)
class Route:
    method: str
    path: str
    endpoint: Callable[..., Any]
    status_code: int = status.HTTP_200_OK
    response_model: Any = None
    responses: dict[int, dict[str, Any]] = field(default_factory=dict)
    summary: str = ""
    description: str = ""
    tags: tuple[str, ...] = ()


_BAD_REQUEST = {status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse, "description": "Malformed request body"}}
_NOT_FOUND = {status.HTTP_404_NOT_FOUND: {"model": NotFoundResponse, "description": "Character not found"}}
_UNAVAILABLE = {status.HTTP_503_SERVICE_UNAVAILABLE: {"model": ErrorResponse, "description": "Storage unavailable"}}

HEALTH_ROUTES: tuple[Route, ...] = (
    Route(
        "GET",
        "/health",
        health.health_check,
        response_model=HealthStatus,
        summary="Health check endpoint",
        description="Returns the health status of the service",
        tags=("health",),
    ),
    Route(
        "GET",
        "/health/live",
        health.liveness_check,
        response_model=HealthStatus,
        summary="Liveness probe",
        description="Kubernetes liveness probe endpoint",
        tags=("health",),
    ),
    Route(
        "GET",
        "/health/ready",
        health.readiness_check,
        response_model=HealthStatus,
        responses={status.HTTP_503_SERVICE_UNAVAILABLE: {"model": HealthStatus, "description": "Not ready"}},
        summary="Readiness probe",
        description="Kubernetes readiness probe endpoint",
        tags=("health",),
    ),
)

# Paths are relative to the configured API prefix.
CHARACTER_ROUTES: tuple[Route, ...] = (
    Route(
        "GET",
        "/characters",
        characters.list_characters,
        response_model=list[Character],
        responses=_UNAVAILABLE,
        summary="Get all characters",
        description="Retrieve a list of all D&D characters",
        tags=("characters",),
    ),
    Route(
        "POST",
        "/characters",
        characters.create_character,
        status_code=status.HTTP_201_CREATED,
        response_model=Character,
        responses={**_BAD_REQUEST, **_UNAVAILABLE},
        summary="Create a new character",
        description="Create a new D&D character",
        tags=("characters",),
    ),
    Route(
        "GET",
        "/characters/{id}",
        characters.get_character,
        response_model=Character,
        responses={**_NOT_FOUND, **_UNAVAILABLE},
        summary="Get a character by ID",
        description="Retrieve a specific D&D character by ID",
        tags=("characters",),
    ),
    Route(
        "PUT",
        "/characters/{id}",
        characters.update_character,
        response_model=Character,
        responses={**_BAD_REQUEST, **_NOT_FOUND, **_UNAVAILABLE},
        summary="Update a character",
        description="Update an existing D&D character",
        tags=("characters",),
    ),
    Route(
        "DELETE",
        "/characters/{id}",
        characters.delete_character,
        status_code=status.HTTP_204_NO_CONTENT,
        responses={**_NOT_FOUND, **_UNAVAILABLE},
        summary="Delete a character",
        description="Delete a D&D character by ID",
        tags=("characters",),
    ),
)


def register_routes(router: APIRouter, routes: tuple[Route, ...]) -> APIRouter:
    """Add every entry of ``routes`` to ``router`` and return it."""

    for route in routes:
        router.add_api_route(
            route.path,
            route.endpoint,
            methods=[route.method],
            status_code=route.status_code,
            response_model=route.response_model,
            responses=route.responses or None,
            summary=route.summary or None,
            description=route.description or None,
            tags=list(route.tags) or None,
        )
    return router


def build_health_router() -> APIRouter:
    return register_routes(APIRouter(), HEALTH_ROUTES)


def build_api_router(prefix: str) -> APIRouter:
    return register_routes(APIRouter(prefix=prefix), CHARACTER_ROUTES)


__all__ = [
    "CHARACTER_ROUTES",
    "HEALTH_ROUTES",
    "Route",
    "build_api_router",
    "build_health_router",
    "register_routes",
]
