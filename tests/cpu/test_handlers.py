"""Direct tests for the instruction handlers."""

from __future__ import annotations

from pyintcode.bus import Tape
from pyintcode.cpu import CPUState, ExecutionContext
from pyintcode.cpu import handlers
from pyintcode.io import CollectingOutput, QueueInput


def make_context(values: list[int], operands: tuple[int, ...], *, inputs=()) -> ExecutionContext:
    return ExecutionContext(
        tape=Tape(values),
        state=CPUState(),
        input_device=QueueInput(inputs),
        output_device=CollectingOutput(),
        operands=operands,
    )


def test_add_handles_signs() -> None:
    ctx = make_context([1, 2, 0], (0, 1, 2))
    handlers.op_add(ctx)
    assert ctx.tape.snapshot() == [1, 2, 3]

    ctx = make_context([-3, 2, 0], (0, 1, 2))
    handlers.op_add(ctx)
    assert ctx.tape.snapshot() == [-3, 2, -1]

    ctx = make_context([-3, -2, 0], (0, 1, 2))
    handlers.op_add(ctx)
    assert ctx.tape.snapshot() == [-3, -2, -5]


def test_multiply_handles_signs() -> None:
    ctx = make_context([4, 2, 0], (0, 1, 2))
    handlers.op_multiply(ctx)
    assert ctx.tape.snapshot() == [4, 2, 8]

    ctx = make_context([-3, -2, 0], (0, 1, 2))
    handlers.op_multiply(ctx)
    assert ctx.tape.snapshot() == [-3, -2, 6]


def test_input_stores_next_value() -> None:
    ctx = make_context([0, 0], (1,), inputs=[17])
    handlers.op_input(ctx)
    assert ctx.tape.read(1) == 17


def test_output_emits_value() -> None:
    ctx = make_context([55], (0,))
    handlers.op_output(ctx)
    assert ctx.output_device.values == [55]


def test_jump_non_zero() -> None:
    ctx = make_context([1, 0, 42], (1, 2))

    handlers.op_jump_non_zero(ctx)
    assert ctx.state.ip == 0
    assert ctx.advance_ip is True

    ctx.tape.write(1, 3)
    handlers.op_jump_non_zero(ctx)
    assert ctx.state.ip == 42
    assert ctx.advance_ip is False


def test_jump_zero() -> None:
    ctx = make_context([1, 3, 42], (1, 2))

    handlers.op_jump_zero(ctx)
    assert ctx.state.ip == 0
    assert ctx.advance_ip is True

    ctx.tape.write(1, 0)
    handlers.op_jump_zero(ctx)
    assert ctx.state.ip == 42
    assert ctx.advance_ip is False


def test_comparisons_write_flags() -> None:
    ctx = make_context([3, 8, 9], (0, 1, 2))
    handlers.op_less_than(ctx)
    assert ctx.tape.read(2) == 1
    handlers.op_equals(ctx)
    assert ctx.tape.read(2) == 0

    ctx = make_context([8, 8, 9], (0, 1, 2))
    handlers.op_less_than(ctx)
    assert ctx.tape.read(2) == 0
    handlers.op_equals(ctx)
    assert ctx.tape.read(2) == 1


def test_adjust_relative_base() -> None:
    ctx = make_context([42], (0,))
    handlers.op_adjust_relative_base(ctx)
    assert ctx.state.relative_base == 42

    ctx.tape.write(0, -100)
    handlers.op_adjust_relative_base(ctx)
    assert ctx.state.relative_base == -58
