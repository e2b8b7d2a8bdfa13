"""Tests for environment driven settings."""

from __future__ import annotations

import logging

import pytest
from pydantic import ValidationError

from app.core.config import Settings, get_settings


def test_defaults() -> None:
    settings = Settings()

    assert settings.mode == "release"
    assert settings.port == 9876
    assert settings.host == "0.0.0.0"
    assert settings.service_name == "webservice"
    assert settings.version == "1.0.0"
    assert settings.api_prefix == "/api/v1"
    assert settings.storage_backend == "stub"
    assert settings.readiness_check_storage is False
    assert settings.debug is False
    assert settings.logging_level == logging.INFO


def test_prefixed_environment_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("WEBSERVICE_MODE", "debug")
    monkeypatch.setenv("WEBSERVICE_PORT", "8080")
    monkeypatch.setenv("WEBSERVICE_STORAGE_BACKEND", "memory")
    monkeypatch.setenv("WEBSERVICE_CORS_ALLOW_ORIGINS", '["http://localhost:3000"]')

    settings = Settings()

    assert settings.mode == "debug"
    assert settings.debug is True
    assert settings.logging_level == logging.DEBUG
    assert settings.port == 8080
    assert settings.storage_backend == "memory"
    assert settings.cors_allow_origins == ["http://localhost:3000"]


def test_conventional_environment_names(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GIN_MODE", "test")
    monkeypatch.setenv("PORT", "7000")

    settings = Settings()

    assert settings.mode == "test"
    assert settings.port == 7000
    assert settings.logging_level == logging.WARNING


def test_explicit_log_level_wins_over_mode() -> None:
    settings = Settings(mode="release", log_level="debug")

    assert settings.logging_level == logging.DEBUG


@pytest.mark.parametrize(("field", "value"), [("mode", "verbose"), ("port", 0), ("storage_backend", "mongo")])
def test_invalid_values_are_rejected(field: str, value: object) -> None:
    with pytest.raises(ValidationError):
        Settings(**{field: value})


def test_settings_are_immutable() -> None:
    settings = Settings()

    with pytest.raises(ValidationError):
        settings.port = 1234


def test_get_settings_is_resolved_once(monkeypatch: pytest.MonkeyPatch) -> None:
    first = get_settings()
    monkeypatch.setenv("WEBSERVICE_PORT", "5555")

    assert get_settings() is first
    assert get_settings().port == 9876
