"""Loader for comma-separated Intcode source files."""

from __future__ import annotations

from pathlib import Path
from typing import TextIO

from pyintcode.bus.memory import INT64_MAX, INT64_MIN
from pyintcode.io.devices import INTEGER_PATTERN

from .program import ProgramImage


class ProgramFormatError(RuntimeError):
    """Raised when Intcode source text cannot be parsed."""


SEPARATOR = ","


def parse_program(text: str, *, name: str = "", source: str = "") -> ProgramImage:
    """Parse comma-separated integers into a :class:`ProgramImage`."""

    flattened = text.replace("\r", "").replace("\n", "")
    items = [item.strip() for item in flattened.split(SEPARATOR)]
    if items and items[-1] == "":
        items.pop()
    if not items:
        raise ProgramFormatError("program is empty")

    values: list[int] = []
    for position, item in enumerate(items):
        values.append(_parse_item(item, position))
    return ProgramImage(values=values, name=name, source=source)


def load_program(handle: TextIO, *, name: str = "") -> ProgramImage:
    """Load an Intcode program from an open text ``handle``."""

    source = getattr(handle, "name", "")
    return parse_program(handle.read(), name=name, source=source if isinstance(source, str) else "")


def load_program_from_path(path: Path, *, encoding: str = "utf-8") -> ProgramImage:
    """Load an Intcode program from ``path``."""

    with path.open("r", encoding=encoding) as handle:
        program = load_program(handle, name=path.stem)
    program.source = str(path)
    return program


def _parse_item(item: str, position: int) -> int:
    if not item:
        raise ProgramFormatError(f"empty value at position {position}")
    if not INTEGER_PATTERN.fullmatch(item):
        raise ProgramFormatError(f"invalid integer {item!r} at position {position}")
    value = int(item)
    if not INT64_MIN <= value <= INT64_MAX:
        raise ProgramFormatError(f"value {value} at position {position} exceeds 64 bits")
    return value
