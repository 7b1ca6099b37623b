"""Console front end that loads a program file and runs it to completion."""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, TextIO

from pyintcode.bus import DEFAULT_GROWTH_PAD, DEFAULT_MAX_LENGTH, GrowthPolicy, TapeError
from pyintcode.cpu import CPUError
from pyintcode.io import (
    DEFAULT_PROMPT,
    ConsoleInput,
    ConsoleOutput,
    InputDevice,
    InputError,
    QueueInput,
)
from pyintcode.loader import ProgramFormatError, ProgramImage, load_program_from_path
from pyintcode.system import Machine, MachineConfig, create_machine
from pyintcode.utils import debug_enabled, debug_log

DEFAULT_TRACE_CAPACITY = 64


@dataclass
class AppConfig:
    """Configuration for a console run."""

    program_path: Optional[Path] = None
    inputs: List[int] = field(default_factory=list)
    prompt: str = DEFAULT_PROMPT
    report_timing: bool = True
    max_steps: Optional[int] = None
    growth_pad: int = DEFAULT_GROWTH_PAD
    growth_policy: GrowthPolicy = GrowthPolicy.FIXED_PAD
    max_tape_length: int = DEFAULT_MAX_LENGTH
    trace_capacity: int = 0


@dataclass
class RunReport:
    """Summary of a finished run."""

    steps: int
    elapsed: float
    tape_length: int
    growth_count: int


class IntcodeApp:
    """Loads the configured program, wires the console devices and runs it."""

    def __init__(
        self,
        config: AppConfig,
        *,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
    ) -> None:
        self._config = config
        self._stdin = stdin
        self._stdout = stdout
        self._machine: Machine | None = None

    @property
    def machine(self) -> Machine | None:
        return self._machine

    def run(self) -> RunReport:
        if self._config.program_path is None:
            raise RuntimeError("program file is required")
        program_path = self._config.program_path
        if not program_path.exists():
            raise RuntimeError(f"program file not found: {program_path}")

        try:
            program = load_program_from_path(program_path)
        except (OSError, ProgramFormatError) as exc:
            raise RuntimeError(f"failed to load {program_path}: {exc}") from exc

        machine = self._create_machine(program)
        self._machine = machine

        started = time.perf_counter()
        try:
            steps = machine.run(self._config.max_steps)
        except (CPUError, TapeError, InputError) as exc:
            self._report_failure(machine)
            raise RuntimeError(
                f"execution failed at ip={machine.cpu.state.ip}: {exc}"
            ) from exc
        elapsed = time.perf_counter() - started

        report = RunReport(
            steps=steps,
            elapsed=elapsed,
            tape_length=len(machine.tape),
            growth_count=machine.tape.growth_count,
        )
        if self._config.report_timing:
            self._write(f"Execution took {_format_duration(elapsed)}\n")
        if debug_enabled("app"):
            debug_log(
                "app",
                "program=%s values=%d steps=%d tape=%d growths=%d",
                program.name,
                len(program),
                report.steps,
                report.tape_length,
                report.growth_count,
            )
        return report

    def _create_machine(self, program: ProgramImage) -> Machine:
        trace_capacity = self._config.trace_capacity
        if trace_capacity <= 0 and debug_enabled("trace"):
            trace_capacity = DEFAULT_TRACE_CAPACITY
        config = MachineConfig(
            growth_pad=self._config.growth_pad,
            growth_policy=self._config.growth_policy,
            max_tape_length=self._config.max_tape_length,
            trace_capacity=trace_capacity,
            input_device=self._build_input(),
            output_device=ConsoleOutput(self._stdout),
        )
        return create_machine(program.values, config)

    def _build_input(self) -> InputDevice:
        if self._config.inputs:
            return QueueInput(self._config.inputs)
        return ConsoleInput(self._stdin, self._stdout, prompt=self._config.prompt)

    def _report_failure(self, machine: Machine) -> None:
        if machine.trace is None:
            return
        if debug_enabled("trace"):
            machine.trace.dump("trace")
            return
        for line in machine.trace.format_entries():
            self._write(f"{line}\n")

    def _write(self, text: str) -> None:
        if self._stdout is not None:
            self._stdout.write(text)
        else:
            print(text, end="")


def _format_duration(seconds: float) -> str:
    if seconds >= 1.0:
        return f"{seconds:.3f}s"
    if seconds >= 1e-3:
        return f"{seconds * 1e3:.3f}ms"
    return f"{seconds * 1e6:.3f}µs"
