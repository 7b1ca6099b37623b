"""Tests for the Intcode instruction table."""

from __future__ import annotations

import pytest

from pyintcode.cpu import IllegalOpcodeError, lookup
from pyintcode.cpu.handlers import op_nop
from pyintcode.cpu.opcodes import (
    HALT_OPCODE,
    OPCODE_TABLE,
    Instruction,
    OpcodeTable,
    build_instruction_table,
)

EXPECTED_ARITY = {0: 0, 1: 3, 2: 3, 3: 1, 4: 1, 5: 2, 6: 2, 7: 3, 8: 3, 9: 1}


@pytest.mark.parametrize("opcode,arity", sorted(EXPECTED_ARITY.items()))
def test_lookup_returns_expected_arity(opcode: int, arity: int) -> None:
    instruction = lookup(opcode)

    assert instruction.opcode == opcode
    assert instruction.arity == arity


def test_lookup_ignores_mode_digits() -> None:
    assert lookup(1101).mnemonic == "ADD"
    assert lookup(21107).mnemonic == "LT"
    assert lookup(204).mnemonic == "OUT"


@pytest.mark.parametrize("word", [10, 11, 42, 98, HALT_OPCODE, 1199, 150])
def test_lookup_rejects_unknown_opcodes(word: int) -> None:
    with pytest.raises(IllegalOpcodeError):
        lookup(word)


def test_lookup_rejects_negative_words() -> None:
    with pytest.raises(IllegalOpcodeError):
        lookup(-99)


def test_table_is_immutable_and_complete() -> None:
    assert isinstance(OPCODE_TABLE, tuple)
    assert all(entry is not None for entry in OPCODE_TABLE)
    assert len(OPCODE_TABLE) == len(EXPECTED_ARITY)


def test_builder_refuses_duplicate_registration() -> None:
    table = OpcodeTable()
    table.register(Instruction(0, "NOP", 0, op_nop))

    with pytest.raises(ValueError):
        table.register(Instruction(0, "NOP2", 0, op_nop))


def test_instruction_rejects_reserved_halt_opcode() -> None:
    with pytest.raises(ValueError):
        Instruction(HALT_OPCODE, "HLT", 0, op_nop)


def test_partial_table_leaves_gaps_unmapped() -> None:
    table = build_instruction_table([Instruction(0, "NOP", 0, op_nop)])

    assert lookup(0, table).mnemonic == "NOP"
    with pytest.raises(IllegalOpcodeError):
        lookup(1, table)
