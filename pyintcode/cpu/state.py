"""Register file and per-step execution context."""

from __future__ import annotations

from dataclasses import dataclass

from pyintcode.bus import Tape
from pyintcode.io import InputDevice, OutputDevice


@dataclass
class CPUState:
    """Snapshot of the Intcode register file."""

    ip: int = 0
    relative_base: int = 0
    halted: bool = False


@dataclass
class ExecutionContext:
    """Everything an instruction handler is allowed to touch.

    ``operands`` holds the tape indices resolved for the current instruction.
    Handlers that take a jump store the target in ``state.ip`` and clear
    ``advance_ip`` so the CPU does not step past it.
    """

    tape: Tape
    state: CPUState
    input_device: InputDevice
    output_device: OutputDevice
    operands: tuple[int, ...] = ()
    advance_ip: bool = True

    def load(self, position: int) -> int:
        return self.tape.read(self.operands[position])

    def store(self, position: int, value: int) -> None:
        self.tape.write(self.operands[position], value)
