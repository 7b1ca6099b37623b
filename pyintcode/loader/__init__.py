"""Loaders for Intcode program sources."""

from __future__ import annotations

from .program import ProgramImage
from .source import (
    ProgramFormatError,
    load_program,
    load_program_from_path,
    parse_program,
)

__all__ = [
    "ProgramImage",
    "ProgramFormatError",
    "load_program",
    "load_program_from_path",
    "parse_program",
]
