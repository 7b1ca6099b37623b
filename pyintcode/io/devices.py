"""Device interfaces behind the input and output instructions."""

from __future__ import annotations

import re

INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")


class InputError(Exception):
    """Base error for failures of the input instruction."""


class InputExhaustedError(InputError):
    """Raised when no further input value is available."""


class InputMalformedError(InputError):
    """Raised when the input source yields something that is not an integer."""


class InputDevice:
    """Interface for sources feeding opcode 3."""

    def read_value(self) -> int:  # pragma: no cover - interface
        raise NotImplementedError


class OutputDevice:
    """Interface for sinks receiving opcode 4 values."""

    def write_value(self, value: int) -> None:  # pragma: no cover - interface
        raise NotImplementedError


def parse_input_value(text: str) -> int:
    """Parse one line of input into an integer."""

    stripped = text.strip()
    if not INTEGER_PATTERN.fullmatch(stripped):
        raise InputMalformedError(f"failed to parse integer from {stripped!r}")
    return int(stripped)
