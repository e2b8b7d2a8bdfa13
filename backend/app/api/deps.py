"""Common dependency functions for API routes."""

from fastapi import Depends, Request

from app.core.config import Settings
from app.services.character_store import CharacterStore
from app.services.characters import CharacterService
from app.services.health import HealthReporter


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_character_store(request: Request) -> CharacterStore:
    return request.app.state.character_store


def get_character_service(request: Request) -> CharacterService:
    return request.app.state.character_service


def get_health_reporter(
    settings: Settings = Depends(get_app_settings),
    store: CharacterStore = Depends(get_character_store),
) -> HealthReporter:
    checks = [store.ping] if settings.readiness_check_storage else []
    return HealthReporter(settings.service_name, settings.version, readiness_checks=checks)
