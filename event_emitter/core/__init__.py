"""
Core Module

Contains the emitter mixin and its type definitions.
"""

from .events import EventEmitter, augment, is_emitter

__all__ = [
    "EventEmitter",
    "augment",
    "is_emitter",
]
