"""Tests for machine assembly."""

from __future__ import annotations

from pyintcode.bus import GrowthPolicy
from pyintcode.io import CollectingOutput, QueueInput
from pyintcode.system import MachineConfig, create_machine, run_program


def test_create_machine_defaults() -> None:
    machine = create_machine([104, 1, 99])

    assert machine.tape.snapshot() == [104, 1, 99]
    assert machine.cpu.tape is machine.tape
    assert machine.trace is None
    assert isinstance(machine.output_device, CollectingOutput)

    machine.run()

    assert machine.output_device.values == [1]


def test_create_machine_uses_configured_devices_and_growth() -> None:
    output = CollectingOutput()
    config = MachineConfig(
        growth_pad=1,
        input_device=QueueInput([9]),
        output_device=output,
        trace_capacity=4,
    )
    machine = create_machine([3, 100, 4, 100, 99], config)

    machine.run()

    assert output.values == [9]
    assert len(machine.tape) == 101
    assert machine.trace is not None
    assert machine.trace.last_entry().mnemonic == "HLT"


def test_doubling_policy_machine() -> None:
    config = MachineConfig(growth_policy=GrowthPolicy.DOUBLING)
    machine = create_machine([1101, 1, 1, 5, 99], config)

    machine.run()

    assert len(machine.tape) == 10
    assert machine.tape.read(5) == 2


def test_independent_machines_share_nothing() -> None:
    first = create_machine([1101, 1, 1, 0, 99])
    second = create_machine([1101, 1, 1, 0, 99])

    first.run()

    assert first.tape.read(0) == 2
    assert second.tape.read(0) == 1101
    assert second.cpu.state.ip == 0


def test_run_program_returns_outputs() -> None:
    assert run_program([3, 0, 4, 0, 4, 0, 99], [6]) == [6, 6]
