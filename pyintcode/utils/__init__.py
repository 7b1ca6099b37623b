"""Utility helpers for the Intcode machine."""

from .debug import (
    CATEGORIES,
    debug_enabled,
    debug_log,
    parse_categories,
    reset_debug_categories,
    set_debug_categories,
)
from .trace import TraceEntry, TraceRecorder

__all__ = [
    "CATEGORIES",
    "debug_enabled",
    "debug_log",
    "parse_categories",
    "reset_debug_categories",
    "set_debug_categories",
    "TraceEntry",
    "TraceRecorder",
]
