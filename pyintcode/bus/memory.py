"""Growable integer tape used as Intcode memory.

Programs address a zero-indexed sequence of signed 64-bit cells. The tape is
extended with zero-filled cells whenever an instruction resolves an index past
the current end, and it never shrinks. Cells are stored in an ``array('q')`` so
every value keeps the signed 64-bit range.
"""

from __future__ import annotations

from array import array
from enum import Enum
from typing import Iterable

from pyintcode.utils import debug_enabled, debug_log

DEFAULT_GROWTH_PAD = 42
DEFAULT_MAX_LENGTH = 1 << 26

INT64_MIN = -(1 << 63)
INT64_MAX = (1 << 63) - 1


class TapeError(Exception):
    """Raised when the tape is misconfigured or used incorrectly."""


class NegativeAddressError(TapeError):
    """Raised when a negative index is dereferenced."""


class ValueOverflowError(TapeError):
    """Raised when a value does not fit into a signed 64-bit cell."""


class TapeCapacityError(TapeError):
    """Raised when the tape cannot grow far enough to reach an address."""


class GrowthPolicy(Enum):
    """How far the tape is extended once an index runs past its end."""

    FIXED_PAD = "fixed"
    DOUBLING = "doubling"


class Tape:
    """Zero-indexed int64 memory that grows on demand."""

    def __init__(
        self,
        values: Iterable[int] = (),
        *,
        growth_pad: int = DEFAULT_GROWTH_PAD,
        growth_policy: GrowthPolicy = GrowthPolicy.FIXED_PAD,
        max_length: int = DEFAULT_MAX_LENGTH,
    ) -> None:
        if growth_pad <= 0:
            raise TapeError(f"growth pad must be positive, got {growth_pad}")
        if max_length <= 0:
            raise TapeError(f"maximum tape length must be positive, got {max_length}")
        self._growth_pad = growth_pad
        self._growth_policy = growth_policy
        self._max_length = max_length
        self._cells = array("q")
        self.growth_count = 0
        self.load(values)

    @property
    def growth_pad(self) -> int:
        return self._growth_pad

    @property
    def growth_policy(self) -> GrowthPolicy:
        return self._growth_policy

    @property
    def max_length(self) -> int:
        return self._max_length

    def __len__(self) -> int:
        return len(self._cells)

    def load(self, values: Iterable[int]) -> None:
        """Replace the tape contents with ``values``."""

        cells = array("q")
        for value in values:
            cells.append(_checked(value))
        self._cells = cells

    def read(self, index: int) -> int:
        return self._cells[self._offset(index)]

    def write(self, index: int, value: int) -> None:
        self._cells[self._offset(index)] = _checked(value)

    def ensure_capacity(self, index: int) -> None:
        """Grow the tape so that ``index`` becomes addressable."""

        if index < 0:
            raise NegativeAddressError(f"negative address {index}")
        old_length = len(self._cells)
        if index < old_length:
            return
        if index >= self._max_length:
            raise TapeCapacityError(
                f"address {index} exceeds the maximum tape length {self._max_length}"
            )
        if self._growth_policy is GrowthPolicy.DOUBLING:
            new_length = max(index + 1, old_length * 2)
        else:
            new_length = index + self._growth_pad
        # The pad may overshoot the ceiling; the requested cell still fits.
        new_length = min(new_length, self._max_length)
        try:
            self._cells.extend(array("q", bytes(8 * (new_length - old_length))))
        except (MemoryError, OverflowError) as exc:
            raise TapeCapacityError(
                f"cannot grow tape from {old_length} to {new_length} cells"
            ) from exc
        self.growth_count += 1
        if debug_enabled("tape"):
            debug_log("tape", "expanded tape from %d to %d", old_length, new_length)

    def snapshot(self) -> list[int]:
        return self._cells.tolist()

    def _offset(self, index: int) -> int:
        if index < 0:
            raise NegativeAddressError(f"negative address {index}")
        if index >= len(self._cells):
            raise TapeError(f"address {index} beyond tape length {len(self._cells)}")
        return index


def _checked(value: int) -> int:
    if not INT64_MIN <= value <= INT64_MAX:
        raise ValueOverflowError(f"value {value} does not fit into a 64-bit cell")
    return value
