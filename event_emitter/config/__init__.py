from .settings import (
    EmitterSettings,
    get_settings,
    initialize_settings,
    reset_settings,
)

__all__ = [
    "EmitterSettings",
    "get_settings",
    "initialize_settings",
    "reset_settings",
]
