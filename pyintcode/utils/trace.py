"""Lightweight execution trace buffer for diagnostics."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Sequence

from .debug import debug_log


@dataclass
class TraceEntry:
    ip: int
    opcode_word: int | None
    mnemonic: str
    operands: tuple[int, ...]
    relative_base: int
    tape_length: int
    halted: bool
    note: str = ""


class TraceRecorder:
    """Ring buffer that stores the most recent executed steps."""

    def __init__(self, capacity: int = 256) -> None:
        if capacity <= 0:
            raise ValueError("capacity must be positive")
        self._capacity = capacity
        self._entries: List[TraceEntry | None] = [None] * capacity
        self._index = 0
        self._size = 0

    @property
    def capacity(self) -> int:
        return self._capacity

    def __len__(self) -> int:
        return self._size

    def record_step(
        self,
        cpu_state,
        opcode_word: int | None,
        operands: Sequence[int],
        tape_length: int,
        *,
        mnemonic: str = "",
        note: str = "",
    ) -> None:
        entry = TraceEntry(
            ip=cpu_state.ip,
            opcode_word=opcode_word,
            mnemonic=mnemonic,
            operands=tuple(operands),
            relative_base=cpu_state.relative_base,
            tape_length=tape_length,
            halted=cpu_state.halted,
            note=note,
        )
        self._append(entry)

    def entries(self, limit: int | None = None) -> Iterable[TraceEntry]:
        count = self._size if limit is None else min(self._size, max(limit, 0))
        for offset in range(count):
            index = (self._index - count + offset) % self._capacity
            entry = self._entries[index]
            if entry is not None:
                yield entry

    def last_entry(self) -> TraceEntry | None:
        if self._size == 0:
            return None
        index = (self._index - 1) % self._capacity
        return self._entries[index]

    def format_entries(self, limit: int | None = None) -> Sequence[str]:
        lines: list[str] = []
        for entry in self.entries(limit):
            word = "--" if entry.opcode_word is None else str(entry.opcode_word)
            mnemonic = entry.mnemonic or "?"
            operands = ",".join(str(index) for index in entry.operands) or "-"
            flags: list[str] = []
            if entry.halted:
                flags.append("HALT")
            if entry.note:
                flags.append(entry.note)
            flag_repr = ",".join(flags) if flags else "-"
            line = (
                f"ip={entry.ip:06d} word={word:>6} {mnemonic:<4} operands={operands} "
                f"rb={entry.relative_base} len={entry.tape_length} flags={flag_repr}"
            )
            lines.append(line)
        return lines

    def dump(self, category: str, limit: int | None = None) -> None:
        for line in self.format_entries(limit):
            debug_log(category, line)

    def _append(self, entry: TraceEntry) -> None:
        self._entries[self._index] = entry
        self._index = (self._index + 1) % self._capacity
        if self._size < self._capacity:
            self._size += 1
