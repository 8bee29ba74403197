"""
Core type definitions for the event emitter.
"""

from .event_types import (
    CAPABILITY_METHODS,
    EventPayload,
    ListenerRegistry,
    ListenerWrapper,
    UnbinderRegistry,
)

__all__ = [
    "CAPABILITY_METHODS",
    "EventPayload",
    "ListenerRegistry",
    "ListenerWrapper",
    "UnbinderRegistry",
]
