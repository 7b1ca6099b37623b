"""Intcode machine assembly."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional

from pyintcode.bus import DEFAULT_GROWTH_PAD, DEFAULT_MAX_LENGTH, GrowthPolicy, Tape
from pyintcode.cpu import IntcodeCPU
from pyintcode.io import CollectingOutput, InputDevice, OutputDevice, QueueInput
from pyintcode.utils import TraceRecorder


@dataclass
class MachineConfig:
    """Runtime configuration for one Intcode machine."""

    growth_pad: int = DEFAULT_GROWTH_PAD
    growth_policy: GrowthPolicy = GrowthPolicy.FIXED_PAD
    max_tape_length: int = DEFAULT_MAX_LENGTH
    trace_capacity: int = 0
    input_device: Optional[InputDevice] = None
    output_device: Optional[OutputDevice] = None


@dataclass
class Machine:
    """Aggregates the components of one program run."""

    tape: Tape
    cpu: IntcodeCPU
    input_device: InputDevice
    output_device: OutputDevice
    trace: TraceRecorder | None = None

    def run(self, max_steps: int | None = None) -> int:
        return self.cpu.run(max_steps)


def create_machine(program: Iterable[int], config: MachineConfig | None = None) -> Machine:
    """Instantiate a machine whose tape holds ``program``."""

    config = config or MachineConfig()
    tape = Tape(
        program,
        growth_pad=config.growth_pad,
        growth_policy=config.growth_policy,
        max_length=config.max_tape_length,
    )
    input_device = config.input_device or QueueInput()
    output_device = config.output_device or CollectingOutput()
    trace = TraceRecorder(config.trace_capacity) if config.trace_capacity > 0 else None
    cpu = IntcodeCPU(
        tape,
        input_device=input_device,
        output_device=output_device,
        trace=trace,
    )
    return Machine(
        tape=tape,
        cpu=cpu,
        input_device=input_device,
        output_device=output_device,
        trace=trace,
    )


def run_program(
    program: Iterable[int],
    inputs: Iterable[int] = (),
    *,
    max_steps: int | None = None,
) -> list[int]:
    """Run ``program`` with scripted ``inputs`` and return everything it printed."""

    output = CollectingOutput()
    machine = create_machine(
        program,
        MachineConfig(input_device=QueueInput(inputs), output_device=output),
    )
    machine.run(max_steps)
    return list(output.values)
