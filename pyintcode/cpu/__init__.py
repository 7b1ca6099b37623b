"""CPU package for the Intcode machine."""

from .core import (
    CPUError,
    CPUState,
    ExecutionContext,
    IllegalOpcodeError,
    InstructionOutOfRangeError,
    IntcodeCPU,
    InvalidModeError,
    StepLimitExceededError,
)
from . import addressing, handlers, opcodes
from .opcodes import Instruction, ParameterMode, lookup

__all__ = [
    "IntcodeCPU",
    "CPUState",
    "CPUError",
    "ExecutionContext",
    "IllegalOpcodeError",
    "InstructionOutOfRangeError",
    "InvalidModeError",
    "StepLimitExceededError",
    "Instruction",
    "ParameterMode",
    "lookup",
    "addressing",
    "handlers",
    "opcodes",
]
