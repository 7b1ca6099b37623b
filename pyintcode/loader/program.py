"""Program image produced by the source loader."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, List


@dataclass
class ProgramImage:
    """Initial tape contents plus where they were read from."""

    values: List[int] = field(default_factory=list)
    name: str = ""
    source: str = ""

    def __len__(self) -> int:
        return len(self.values)

    def __iter__(self) -> Iterator[int]:
        return iter(self.values)
