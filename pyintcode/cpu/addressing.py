"""Parameter mode decoding and operand address resolution."""

from __future__ import annotations

from typing import Sequence

from pyintcode.bus import NegativeAddressError, Tape

from .errors import InvalidModeError
from .opcodes import ParameterMode


def decode_modes(word: int, count: int) -> tuple[ParameterMode, ...]:
    """Decode ``count`` parameter modes from an instruction word.

    Missing digits decode as position mode.
    """

    digits = word // 100
    modes: list[ParameterMode] = []
    for position in range(count):
        digit = (digits // 10**position) % 10
        try:
            modes.append(ParameterMode(digit))
        except ValueError as exc:
            raise InvalidModeError(f"invalid parameter mode {digit} in word {word}") from exc
    return tuple(modes)


def resolve_operand(
    tape: Tape,
    ip: int,
    position: int,
    mode: ParameterMode,
    relative_base: int,
) -> int:
    """Return the tape index addressed by operand ``position`` of the instruction at ``ip``."""

    slot = ip + 1 + position
    if mode is ParameterMode.POSITION:
        index = tape.read(slot)
    elif mode is ParameterMode.IMMEDIATE:
        index = slot
    elif mode is ParameterMode.RELATIVE_BASE:
        index = tape.read(slot) + relative_base
    else:  # pragma: no cover - the enum is closed
        raise InvalidModeError(f"addressing mode {mode} cannot be resolved")
    if index < 0:
        raise NegativeAddressError(
            f"operand {position} of instruction at {ip} resolves to negative address {index}"
        )
    return index


def resolve_operands(
    tape: Tape,
    ip: int,
    modes: Sequence[ParameterMode],
    relative_base: int,
) -> tuple[int, ...]:
    """Resolve every operand of the current instruction and grow the tape to fit."""

    operands = tuple(
        resolve_operand(tape, ip, position, mode, relative_base)
        for position, mode in enumerate(modes)
    )
    if operands:
        highest = max(operands)
        if highest >= len(tape):
            tape.ensure_capacity(highest)
    return operands
