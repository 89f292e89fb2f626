"""Settings for hosts embedding the combat engine."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

__all__ = [
    "GameSettings",
    "get_settings",
    "normalize_log_level",
]

_LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


def normalize_log_level(value: str) -> str:
    """
    :param value: Level name in any case, surrounding spaces allowed.
    :return: The upper-case level name.
    :raises ValueError: For names outside the standard logging levels.
    """
    level = value.strip().upper()
    if level not in _LOG_LEVELS:
        raise ValueError(f"log_level must be one of {sorted(_LOG_LEVELS)}, got {value!r}")
    return level


class GameSettings(BaseSettings):
    """World, difficulty and logging settings (env prefix ``GAMEFRAME_``)."""

    model_config = SettingsConfigDict(env_prefix="GAMEFRAME_", env_file=".env", env_file_encoding="utf-8",
                                      extra="ignore")

    world_max_x: int = Field(default=100, ge=0, description="Horizontal world bound")
    world_max_y: int = Field(default=100, ge=0, description="Vertical world bound")
    world_name: str = Field(default="Basic World", description="Display name of the world")
    difficulty_level: str = Field(default="N/A", description="Free-form difficulty label")
    log_level: str = Field(default="INFO", description="Root log level used by configure_logging")
    combat_log_file: Optional[Path] = Field(default=None, description="Where CombatLogger mirrors combat events")

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        return normalize_log_level(value)


@lru_cache
def get_settings() -> GameSettings:
    """Return a cached GameSettings instance."""

    return GameSettings()
