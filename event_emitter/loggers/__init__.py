"""
Logging module for the event emitter.
Provides customized logging functionality.
"""

from .base import Logger

__all__ = ["Logger"]
