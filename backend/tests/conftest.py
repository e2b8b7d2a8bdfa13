"""Shared fixtures for the web service tests."""

from __future__ import annotations

from typing import Callable

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from app.core.config import Settings, get_settings
from app.main import create_app

_ENV_VARS = (
    "GIN_MODE",
    "PORT",
    "WEBSERVICE_MODE",
    "WEBSERVICE_HOST",
    "WEBSERVICE_PORT",
    "WEBSERVICE_SERVICE_NAME",
    "WEBSERVICE_VERSION",
    "WEBSERVICE_API_PREFIX",
    "WEBSERVICE_DOCS_PATH",
    "WEBSERVICE_CORS_ALLOW_ORIGINS",
    "WEBSERVICE_STORAGE_BACKEND",
    "WEBSERVICE_READINESS_CHECK_STORAGE",
    "WEBSERVICE_LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch: pytest.MonkeyPatch):
    """Keep the process environment from leaking into settings."""

    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def make_app() -> Callable[..., FastAPI]:
    def _make(**overrides) -> FastAPI:
        overrides.setdefault("mode", "test")
        return create_app(Settings(**overrides))

    return _make


@pytest.fixture
def client(make_app) -> TestClient:
    """Client for the default application backed by the stub store."""

    return TestClient(make_app())


@pytest.fixture
def memory_client(make_app) -> TestClient:
    """Client for an application that keeps characters in memory."""

    return TestClient(make_app(storage_backend="memory"))


@pytest.fixture
def aragorn() -> dict[str, object]:
    return {
        "id": "60d5ecb74b24c72b8c8b4567",
        "name": "Aragorn",
        "race": "Human",
        "class": "Fighter",
        "level": 5,
        "createdAt": "2025-11-09T08:00:00Z",
        "updatedAt": "2025-11-09T08:00:00Z",
    }
