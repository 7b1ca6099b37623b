"""Opcode metadata for the Intcode instruction set."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Final, Iterable, List, Sequence, TYPE_CHECKING

from . import handlers
from .errors import IllegalOpcodeError

if TYPE_CHECKING:  # pragma: no cover - typing only
    from .state import ExecutionContext

HALT_OPCODE: Final[int] = 99


class ParameterMode(Enum):
    """Addressing modes encoded in the digits above the opcode."""

    POSITION = 0
    IMMEDIATE = 1
    RELATIVE_BASE = 2


Handler = Callable[["ExecutionContext"], None]


@dataclass(frozen=True)
class Instruction:
    """Metadata describing a single Intcode opcode."""

    opcode: int
    mnemonic: str
    arity: int
    handler: Handler

    def __post_init__(self) -> None:
        if not 0 <= self.opcode < HALT_OPCODE:
            raise ValueError(f"opcode out of range: {self.opcode}")
        if self.arity < 0:
            raise ValueError("arity must not be negative")


class OpcodeTable:
    """Mutable builder for the instruction lookup table."""

    _TABLE_SIZE: Final[int] = 10

    def __init__(self) -> None:
        self._table: List[Instruction | None] = [None] * self._TABLE_SIZE

    def register(self, instruction: Instruction) -> None:
        opcode = instruction.opcode
        if opcode >= self._TABLE_SIZE:
            raise ValueError(f"opcode {opcode} exceeds table size {self._TABLE_SIZE}")
        existing = self._table[opcode]
        if existing is not None:
            raise ValueError(f"opcode {opcode} already registered as {existing.mnemonic}")
        self._table[opcode] = instruction

    def register_all(self, instructions: Iterable[Instruction]) -> None:
        for instruction in instructions:
            self.register(instruction)

    def freeze(self) -> Sequence[Instruction | None]:
        return tuple(self._table)


def build_instruction_table(instructions: Iterable[Instruction]) -> Sequence[Instruction | None]:
    """Build the opcode-indexed instruction lookup table."""

    table = OpcodeTable()
    table.register_all(instructions)
    return table.freeze()


DEFAULT_INSTRUCTIONS: Sequence[Instruction] = (
    Instruction(0, "NOP", 0, handlers.op_nop),
    Instruction(1, "ADD", 3, handlers.op_add),
    Instruction(2, "MUL", 3, handlers.op_multiply),
    Instruction(3, "IN", 1, handlers.op_input),
    Instruction(4, "OUT", 1, handlers.op_output),
    Instruction(5, "JNZ", 2, handlers.op_jump_non_zero),
    Instruction(6, "JZ", 2, handlers.op_jump_zero),
    Instruction(7, "LT", 3, handlers.op_less_than),
    Instruction(8, "EQ", 3, handlers.op_equals),
    Instruction(9, "ARB", 1, handlers.op_adjust_relative_base),
)

OPCODE_TABLE: Sequence[Instruction | None] = build_instruction_table(DEFAULT_INSTRUCTIONS)


def opcode_number(word: int) -> int:
    """Return the two low-order decimal digits of an instruction word."""

    if word < 0:
        raise IllegalOpcodeError(f"illegal opcode word {word}")
    return word % 100


def lookup(
    word: int,
    table: Sequence[Instruction | None] = OPCODE_TABLE,
) -> Instruction:
    """Return the instruction selected by ``word``.

    The halt opcode is not part of the table; the CPU checks for it before
    calling this function.
    """

    number = opcode_number(word)
    instruction = table[number] if number < len(table) else None
    if instruction is None:
        raise IllegalOpcodeError(f"illegal opcode {number} in word {word}")
    return instruction
