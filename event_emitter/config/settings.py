"""
Emitter Settings

Centralized configuration for the event emitter, read from the environment
(and an optional ``.env`` file) and validated with pydantic.
"""

from typing import Any, Dict, Optional
import os

import dotenv
from pydantic import BaseModel, Field, field_validator

from event_emitter.config.logging import LOG_LEVELS, apply_emitter_level

ENV_PREFIX = "EVENT_EMITTER_"

_TRUTHY = {"1", "true", "yes", "on"}


class EmitterSettings(BaseModel):
    """Runtime settings for emitter logging"""

    log_level: str = Field(
        default="WARNING", description="Level of the emitter's own logger"
    )
    log_dispatch: bool = Field(
        default=False, description="Log every trigger call at DEBUG level"
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def validate_log_level(cls, v):
        level = str(v).upper()
        if level not in LOG_LEVELS:
            raise ValueError(
                f"Invalid log level '{v}', expected one of {', '.join(LOG_LEVELS)}"
            )
        return level

    @classmethod
    def from_env(cls, load_dotenv: bool = True) -> "EmitterSettings":
        """Build settings from EVENT_EMITTER_* environment variables"""
        if load_dotenv:
            dotenv.load_dotenv()

        data: Dict[str, Any] = {}
        level = os.getenv(f"{ENV_PREFIX}LOG_LEVEL")
        if level:
            data["log_level"] = level
        dispatch = os.getenv(f"{ENV_PREFIX}LOG_DISPATCH")
        if dispatch is not None:
            data["log_dispatch"] = dispatch.strip().lower() in _TRUTHY
        return cls(**data)


# Global settings instance
_settings: Optional[EmitterSettings] = None


def get_settings() -> EmitterSettings:
    """Get the global settings instance"""
    global _settings
    if _settings is None:
        _settings = EmitterSettings.from_env()
    return _settings


def initialize_settings(**overrides) -> EmitterSettings:
    """Initialize settings from the environment, then apply overrides"""
    global _settings

    base = EmitterSettings.from_env()
    _settings = EmitterSettings(**{**base.model_dump(), **overrides})
    apply_emitter_level(_settings.log_level)
    return _settings


def reset_settings() -> None:
    """Reset settings and the emitter log level to defaults (useful for testing)"""
    global _settings
    _settings = None
    apply_emitter_level(EmitterSettings().log_level)
