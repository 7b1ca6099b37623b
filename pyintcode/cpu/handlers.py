"""Instruction handlers.

Every handler receives the :class:`ExecutionContext` for the running step and
works on the operand indices resolved by the CPU. Values are always read by
dereferencing an index, immediate operands included.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover - typing only
    from .state import ExecutionContext


def op_nop(_: "ExecutionContext") -> None:
    """No operation."""


def op_add(ctx: "ExecutionContext") -> None:
    ctx.store(2, ctx.load(0) + ctx.load(1))


def op_multiply(ctx: "ExecutionContext") -> None:
    ctx.store(2, ctx.load(0) * ctx.load(1))


def op_input(ctx: "ExecutionContext") -> None:
    """Block on the input device and store the value it returns."""

    ctx.store(0, ctx.input_device.read_value())


def op_output(ctx: "ExecutionContext") -> None:
    ctx.output_device.write_value(ctx.load(0))


def op_jump_non_zero(ctx: "ExecutionContext") -> None:
    if ctx.load(0) != 0:
        _jump(ctx, ctx.load(1))


def op_jump_zero(ctx: "ExecutionContext") -> None:
    if ctx.load(0) == 0:
        _jump(ctx, ctx.load(1))


def op_less_than(ctx: "ExecutionContext") -> None:
    ctx.store(2, 1 if ctx.load(0) < ctx.load(1) else 0)


def op_equals(ctx: "ExecutionContext") -> None:
    ctx.store(2, 1 if ctx.load(0) == ctx.load(1) else 0)


def op_adjust_relative_base(ctx: "ExecutionContext") -> None:
    ctx.state.relative_base += ctx.load(0)


def _jump(ctx: "ExecutionContext", target: int) -> None:
    ctx.state.ip = target
    ctx.advance_ip = False
