"""Intcode system assembly helpers."""

from __future__ import annotations

from .machine import Machine, MachineConfig, create_machine, run_program

__all__ = [
    "MachineConfig",
    "Machine",
    "create_machine",
    "run_program",
]
