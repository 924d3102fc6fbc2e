"""
Application Settings - Main Layer

Use Pydantic Settings for configuration management.
This module handles configuration settings provided using
environment variables, .env files and default values.
"""

from typing import Optional

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.shared import EnumEnvironment, EnumLogLevel
from src.shared.consts import (
    DEFAULT_API_BASE_URL,
    DEFAULT_FALLBACK_ERROR_MESSAGE,
    DEFAULT_RECENT_GAMES_PATH,
)


class GameApiSettings(BaseSettings):
    """Remote game-outcome API settings."""

    base_url: str = Field(
        default=DEFAULT_API_BASE_URL, description="Base URL of the game API"
    )
    recent_games_path: str = Field(
        default=DEFAULT_RECENT_GAMES_PATH,
        description="Path of the recent games resource",
    )
    timeout_seconds: float = Field(
        default=10.0, gt=0, description="Request timeout in seconds"
    )

    @property
    def recent_games_url(self) -> str:
        return f"{self.base_url.rstrip('/')}/{self.recent_games_path.lstrip('/')}"

    model_config = SettingsConfigDict(
        env_prefix="GAME_API_", case_sensitive=False, extra="ignore"
    )


class PollingSettings(BaseSettings):
    """Prediction cycle and fallback settings."""

    interval_seconds: float = Field(
        default=30.0, gt=0, description="Delay between scheduled cycles"
    )
    history_limit: int = Field(
        default=10, gt=0, description="Number of predictions kept in history"
    )
    default_interval_ms: float = Field(
        default=30_000.0,
        ge=0,
        description="Interval assumed when fewer than two games are known",
    )
    default_duration_seconds: float = Field(
        default=15.0, ge=0, description="Duration assumed when no game is known"
    )
    fallback_min_delay_seconds: int = Field(default=5, ge=0)
    fallback_max_delay_seconds: int = Field(default=119, ge=0)
    fallback_min_duration_seconds: int = Field(default=1, ge=0)
    fallback_max_duration_seconds: int = Field(default=30, ge=0)
    fallback_seed: Optional[int] = Field(
        default=None, description="Seed for fallback randomness (tests, demos)"
    )
    error_message: str = Field(
        default=DEFAULT_FALLBACK_ERROR_MESSAGE,
        description="Message shown when a fetch fails",
    )

    @model_validator(mode="after")
    def _check_fallback_ranges(self) -> "PollingSettings":
        if self.fallback_min_delay_seconds > self.fallback_max_delay_seconds:
            raise ValueError("fallback delay range is empty")
        if self.fallback_min_duration_seconds > self.fallback_max_duration_seconds:
            raise ValueError("fallback duration range is empty")
        return self

    model_config = SettingsConfigDict(
        env_prefix="POLLING_", case_sensitive=False, extra="ignore"
    )


class ServiceSettings(BaseSettings):
    """HTTP service settings."""

    title: str = Field(default="Flight Predictor", description="Service title")
    description: str = Field(
        default="Predicts the time and duration of the next flight "
        "from recent game outcomes",
        description="Service description",
    )
    version: str = Field(default="1.0.0", description="Service version")
    debug: bool = Field(default=False, description="Enable debug mode")
    host: str = Field(default="0.0.0.0", description="Host to bind the server")
    port: int = Field(default=8000, description="Port to bind the server")
    reload: bool = Field(
        default=False, description="Enable auto-reload for development"
    )

    model_config = SettingsConfigDict(
        env_prefix="SERVICE_", case_sensitive=False, extra="ignore"
    )


class LoggingSettings(BaseSettings):
    """Logging configuration settings."""

    level: EnumLogLevel = Field(default=EnumLogLevel.INFO, description="Logging level")
    file_path: Optional[str] = Field(
        default=None, description="Log file path (if None, logs to console)"
    )

    model_config = SettingsConfigDict(
        env_prefix="LOG_", case_sensitive=False, extra="ignore"
    )


class AppSettings(BaseSettings):
    """Main application settings, aggregating all sub-settings."""

    environment: EnumEnvironment = Field(
        default=EnumEnvironment.DEVELOPMENT, description="Application environment"
    )

    game_api: GameApiSettings = Field(default_factory=GameApiSettings)
    polling: PollingSettings = Field(default_factory=PollingSettings)
    service: ServiceSettings = Field(default_factory=ServiceSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        env_nested_delimiter="__",
        extra="ignore",
    )


def get_settings() -> AppSettings:
    """
    Get application settings instance Factory.

    Used to be mocked in tests, allowing different settings based on enviroment.
    """
    return AppSettings()
