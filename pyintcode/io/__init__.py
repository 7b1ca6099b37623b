"""Input and output devices wired to opcodes 3 and 4."""

from .buffer import CollectingOutput, QueueInput
from .console import DEFAULT_PROMPT, ConsoleInput, ConsoleOutput
from .devices import (
    InputDevice,
    InputError,
    InputExhaustedError,
    InputMalformedError,
    OutputDevice,
    parse_input_value,
)

__all__ = [
    "CollectingOutput",
    "ConsoleInput",
    "ConsoleOutput",
    "DEFAULT_PROMPT",
    "InputDevice",
    "InputError",
    "InputExhaustedError",
    "InputMalformedError",
    "OutputDevice",
    "QueueInput",
    "parse_input_value",
]
