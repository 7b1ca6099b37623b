"""In-memory devices for scripted runs and tests."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from typing import Iterable, List

from .devices import InputDevice, InputExhaustedError, OutputDevice


class QueueInput(InputDevice):
    """Feed pre-seeded values to the input instruction in order."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._pending: deque[int] = deque(values)

    def push(self, *values: int) -> None:
        self._pending.extend(values)

    def pending(self) -> int:
        return len(self._pending)

    def read_value(self) -> int:
        if not self._pending:
            raise InputExhaustedError("no input values left")
        return self._pending.popleft()


@dataclass
class CollectingOutput(OutputDevice):
    """Collect emitted values in program order."""

    values: List[int] = field(default_factory=list)

    def write_value(self, value: int) -> None:
        self.values.append(value)

    def clear(self) -> None:
        self.values.clear()
