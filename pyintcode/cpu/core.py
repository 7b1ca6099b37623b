"""Intcode CPU: fetch, decode, resolve, execute, advance."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Sequence

from pyintcode.bus import Tape
from pyintcode.io import CollectingOutput, InputDevice, OutputDevice, QueueInput
from pyintcode.utils import TraceRecorder, debug_enabled, debug_log

from .addressing import decode_modes, resolve_operands
from .errors import (
    CPUError,
    IllegalOpcodeError,
    InstructionOutOfRangeError,
    InvalidModeError,
    StepLimitExceededError,
)
from .opcodes import HALT_OPCODE, OPCODE_TABLE, Instruction, lookup
from .state import CPUState, ExecutionContext

__all__ = [
    "CPUError",
    "CPUState",
    "ExecutionContext",
    "IllegalOpcodeError",
    "InstructionOutOfRangeError",
    "IntcodeCPU",
    "InvalidModeError",
    "StepLimitExceededError",
]


@dataclass
class IntcodeCPU:
    """Executes one Intcode program against its own tape."""

    tape: Tape
    input_device: InputDevice = field(default_factory=QueueInput)
    output_device: OutputDevice = field(default_factory=CollectingOutput)
    instruction_table: Sequence[Instruction | None] = field(default=OPCODE_TABLE)
    trace: TraceRecorder | None = None

    state: CPUState = field(default_factory=CPUState)
    step_count: int = 0

    def __post_init__(self) -> None:
        self._context = self._build_context()

    @property
    def halted(self) -> bool:
        return self.state.halted

    def reset(self, program: Iterable[int] | None = None) -> None:
        """Reset the registers and optionally reload the tape."""

        if program is not None:
            self.tape.load(program)
        self.state = CPUState()
        self.step_count = 0
        self._context = self._build_context()

    def step(self) -> bool:
        """Execute a single instruction and report whether the CPU is still running."""

        if self.state.halted:
            return False

        context = self._context
        context.advance_ip = True
        ip = self.state.ip
        if ip >= len(self.tape):
            raise InstructionOutOfRangeError(
                f"instruction pointer {ip} is past the end of the tape (length {len(self.tape)})"
            )
        word = self.tape.read(ip)
        if word == HALT_OPCODE:
            self.state.halted = True
            if debug_enabled("cpu"):
                debug_log("cpu", "ip=%d halt steps=%d", ip, self.step_count)
            if self.trace is not None:
                self.trace.record_step(self.state, word, (), len(self.tape), mnemonic="HLT")
            return False

        instruction = lookup(word, self.instruction_table)
        modes = decode_modes(word, instruction.arity)
        if ip + instruction.arity >= len(self.tape):
            raise InstructionOutOfRangeError(
                f"{instruction.mnemonic} at ip={ip} takes {instruction.arity} operands "
                f"but the tape ends at {len(self.tape)}"
            )
        context.operands = resolve_operands(self.tape, ip, modes, self.state.relative_base)
        if debug_enabled("cpu"):
            debug_log(
                "cpu",
                "ip=%d word=%d %s operands=%s rb=%d",
                ip,
                word,
                instruction.mnemonic,
                context.operands,
                self.state.relative_base,
            )
        if self.trace is not None:
            self.trace.record_step(
                self.state,
                word,
                context.operands,
                len(self.tape),
                mnemonic=instruction.mnemonic,
            )

        instruction.handler(context)

        if context.advance_ip:
            self.state.ip = ip + 1 + instruction.arity
        context.operands = ()
        self.step_count += 1
        return True

    def run(self, max_steps: int | None = None) -> int:
        """Step until halt and return the number of executed instructions."""

        executed = 0
        while not self.state.halted:
            if max_steps is not None and executed >= max_steps and not self.halt_pending():
                raise StepLimitExceededError(
                    f"program did not halt within {max_steps} steps (ip={self.state.ip})"
                )
            if self.step():
                executed += 1
        return executed

    def halt_pending(self) -> bool:
        """Return True when the next fetch would read the halt opcode."""

        ip = self.state.ip
        return 0 <= ip < len(self.tape) and self.tape.read(ip) == HALT_OPCODE

    def _build_context(self) -> ExecutionContext:
        return ExecutionContext(
            tape=self.tape,
            state=self.state,
            input_device=self.input_device,
            output_device=self.output_device,
        )
