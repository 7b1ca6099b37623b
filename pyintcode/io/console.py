"""Line-oriented console devices."""

from __future__ import annotations

import sys
from typing import TextIO

from pyintcode.utils import debug_enabled, debug_log

from .devices import InputDevice, InputExhaustedError, OutputDevice, parse_input_value

DEFAULT_PROMPT = "Input: "
OUTPUT_PREFIX = "Output: "


class ConsoleInput(InputDevice):
    """Prompt for a value and block until a full line has been read."""

    def __init__(
        self,
        stream: TextIO | None = None,
        prompt_stream: TextIO | None = None,
        *,
        prompt: str = DEFAULT_PROMPT,
    ) -> None:
        self._stream = stream
        self._prompt_stream = prompt_stream
        self._prompt = prompt

    def read_value(self) -> int:
        stream = self._stream or sys.stdin
        prompt_stream = self._prompt_stream or sys.stdout
        if self._prompt:
            prompt_stream.write(self._prompt)
            prompt_stream.flush()
        line = stream.readline()
        if not line:
            raise InputExhaustedError("input stream closed before a value was read")
        value = parse_input_value(line)
        if debug_enabled("io"):
            debug_log("io", "input=%d", value)
        return value


class ConsoleOutput(OutputDevice):
    """Print each emitted value on its own line."""

    def __init__(self, stream: TextIO | None = None, *, prefix: str = OUTPUT_PREFIX) -> None:
        self._stream = stream
        self._prefix = prefix

    def write_value(self, value: int) -> None:
        stream = self._stream or sys.stdout
        stream.write(f"{self._prefix}{value}\n")
        stream.flush()
        if debug_enabled("io"):
            debug_log("io", "output=%d", value)
