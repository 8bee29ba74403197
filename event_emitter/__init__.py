"""
Event Emitter

Unified import layer for the event_emitter package.
"""

from event_emitter.config.settings import (
    EmitterSettings,
    get_settings,
    initialize_settings,
    reset_settings,
)
from event_emitter.core.events.event_emitter import EventEmitter, augment, is_emitter
from event_emitter.loggers.base import Logger

__all__ = [
    "EventEmitter",
    "augment",
    "is_emitter",
    "EmitterSettings",
    "get_settings",
    "initialize_settings",
    "reset_settings",
    "Logger",
]
