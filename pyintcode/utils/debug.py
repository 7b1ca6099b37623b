"""Category-gated diagnostics for the Intcode machine.

Categories come from the ``INTCODE_DEBUG`` environment variable (a
comma-separated list, or ``all``) unless a caller such as ``run.py --debug``
sets them explicitly. Lines go to stderr so they never mix with the program's
own ``Output:`` lines on stdout.
"""

from __future__ import annotations

import os
import sys
from typing import FrozenSet, Iterable, Optional

ENV_VARIABLE = "INTCODE_DEBUG"

CATEGORIES = ("cpu", "tape", "io", "trace", "app")

_active: Optional[FrozenSet[str]] = None


def parse_categories(value: str) -> FrozenSet[str]:
    """Split a comma-separated category list into lower-case names."""

    return frozenset(part.strip().lower() for part in value.split(",") if part.strip())


def set_debug_categories(categories: Iterable[str]) -> None:
    """Enable exactly ``categories``, overriding the environment."""

    global _active
    _active = frozenset(category.lower() for category in categories)


def reset_debug_categories() -> None:
    """Drop any override so the environment is consulted again."""

    global _active
    _active = None


def _categories() -> FrozenSet[str]:
    global _active
    if _active is None:
        _active = parse_categories(os.environ.get(ENV_VARIABLE, ""))
    return _active


def debug_enabled(category: str | None = None) -> bool:
    categories = _categories()
    if not categories:
        return False
    if category is None or "all" in categories:
        return True
    return category.lower() in categories


def debug_log(category: str, message: str, *args) -> None:
    if not debug_enabled(category):
        return
    if args:
        try:
            message = message % args
        except (TypeError, ValueError):
            message = f"{message} {args!r}"
    print(f"[INTCODE][{category}] {message}", file=sys.stderr)
