"""Intcode virtual machine.

The package is split the same way the machine is: ``bus`` holds the growable
tape, ``cpu`` the instruction table and execution loop, ``io`` the devices
behind the input and output instructions, ``loader`` the source parser,
``system`` the machine assembly and ``ui`` the console front end used by
``run.py``.
"""

from __future__ import annotations

from . import bus, cpu, io, loader, system, ui, utils

__all__: list[str] = [
    "bus",
    "cpu",
    "io",
    "loader",
    "system",
    "ui",
    "utils",
]
