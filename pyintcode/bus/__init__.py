"""Memory helpers for the Intcode machine."""

from .memory import (
    DEFAULT_GROWTH_PAD,
    DEFAULT_MAX_LENGTH,
    GrowthPolicy,
    NegativeAddressError,
    Tape,
    TapeError,
    TapeCapacityError,
    ValueOverflowError,
)

__all__ = [
    "DEFAULT_GROWTH_PAD",
    "DEFAULT_MAX_LENGTH",
    "GrowthPolicy",
    "NegativeAddressError",
    "Tape",
    "TapeError",
    "TapeCapacityError",
    "ValueOverflowError",
]
