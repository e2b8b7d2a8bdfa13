"""Application configuration and settings management."""

import logging
from functools import lru_cache
from typing import Literal

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

RunMode = Literal["debug", "release", "test"]

_MODE_LOG_LEVELS: dict[str, int] = {
    "debug": logging.DEBUG,
    "release": logging.INFO,
    "test": logging.WARNING,
}


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    The value is frozen: resolve it once at start-up and hand it to whatever
    needs it instead of reading the environment again.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="WEBSERVICE_",
        extra="ignore",
        populate_by_name=True,
        frozen=True,
    )

    mode: RunMode = Field(
        default="release",
        validation_alias=AliasChoices("WEBSERVICE_MODE", "GIN_MODE"),
        description="Runtime mode. 'debug' enables verbose logging, 'release' is production-like.",
    )
    host: str = Field(default="0.0.0.0", description="Interface the HTTP listener binds to.")
    port: int = Field(
        default=9876,
        ge=1,
        le=65535,
        validation_alias=AliasChoices("WEBSERVICE_PORT", "PORT"),
        description="Port the HTTP listener binds to.",
    )
    service_name: str = Field(default="webservice", description="Service name reported by health probes.")
    version: str = Field(default="1.0.0", min_length=1, description="Service version reported by health probes.")
    api_prefix: str = Field(default="/api/v1", description="Path prefix of the versioned API.")
    docs_path: str = Field(default="/api-docs", description="Path the API description and Swagger UI are served under.")
    cors_allow_origins: list[str] = Field(
        default_factory=lambda: ["*"],
        description="Origins allowed to call the API from a browser (JSON list in the environment).",
    )
    storage_backend: Literal["stub", "memory"] = Field(
        default="stub",
        description="Character storage. 'stub' persists nothing, 'memory' keeps records for the process lifetime.",
    )
    readiness_check_storage: bool = Field(
        default=False,
        description="When enabled the readiness probe reports unavailable if storage cannot be reached.",
    )
    log_level: str | None = Field(
        default=None,
        description="Explicit logging level name. Derived from the runtime mode when unset.",
    )

    @property
    def debug(self) -> bool:
        return self.mode == "debug"

    @property
    def logging_level(self) -> int:
        if self.log_level:
            level = logging.getLevelName(self.log_level.upper())
            if isinstance(level, int):
                return level
        return _MODE_LOG_LEVELS[self.mode]


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings."""

    return Settings()
