"""
Event System

The emitter mixin and its augmentation entry point.
"""

from .event_emitter import EventEmitter, augment, is_emitter

__all__ = [
    "EventEmitter",
    "augment",
    "is_emitter",
]
