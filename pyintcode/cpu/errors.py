"""Exceptions raised by the Intcode CPU."""

from __future__ import annotations


class CPUError(Exception):
    """Base error for CPU-related failures."""


class IllegalOpcodeError(CPUError):
    """Raised when the CPU encounters an opcode outside the instruction table."""


class InvalidModeError(CPUError):
    """Raised when a parameter mode digit is not position, immediate or relative."""


class StepLimitExceededError(CPUError):
    """Raised when a bounded run reaches its step limit before halting."""


class InstructionOutOfRangeError(CPUError):
    """Raised when an instruction or one of its operand slots lies past the end of the tape."""
