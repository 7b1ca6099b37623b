"""Command-line entry point for the Intcode virtual machine."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from pyintcode.bus import DEFAULT_GROWTH_PAD, DEFAULT_MAX_LENGTH, GrowthPolicy
from pyintcode.io import InputMalformedError, parse_input_value
from pyintcode.ui import AppConfig, IntcodeApp
from pyintcode.utils import CATEGORIES, parse_categories, set_debug_categories


def _integer(text: str) -> int:
    try:
        return parse_input_value(text)
    except InputMalformedError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="run.py",
        description="Run an Intcode program",
    )
    parser.add_argument(
        "program",
        type=Path,
        help="Path to a comma-separated Intcode program",
    )
    parser.add_argument(
        "--input",
        dest="inputs",
        type=_integer,
        action="append",
        default=[],
        help="Value for the input instruction; repeat for more (default: prompt on stdin)",
    )
    parser.add_argument(
        "--growth-pad",
        type=int,
        default=DEFAULT_GROWTH_PAD,
        help=f"Cells added past the requested address when the tape grows (default: {DEFAULT_GROWTH_PAD})",
    )
    parser.add_argument(
        "--growth-policy",
        choices=[policy.value for policy in GrowthPolicy],
        default=GrowthPolicy.FIXED_PAD.value,
        help="Tape growth strategy (default: fixed)",
    )
    parser.add_argument(
        "--max-tape-length",
        type=int,
        default=DEFAULT_MAX_LENGTH,
        help=f"Largest number of cells the tape may grow to (default: {DEFAULT_MAX_LENGTH})",
    )
    parser.add_argument(
        "--max-steps",
        type=int,
        help="Abort if the program has not halted after this many instructions",
    )
    parser.add_argument(
        "--trace",
        type=int,
        default=0,
        metavar="N",
        help="Keep the last N executed instructions and print them on failure",
    )
    parser.add_argument(
        "--debug",
        metavar="CATEGORIES",
        help=f"Comma-separated debug categories ({', '.join(CATEGORIES)} or all); overrides INTCODE_DEBUG",
    )
    parser.add_argument(
        "--no-timing",
        action="store_true",
        help="Do not report the execution time",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_arg_parser()
    args = parser.parse_args(argv)

    if not args.program.exists():
        parser.error(f"Program file not found: {args.program}")
    if args.growth_pad <= 0:
        parser.error("--growth-pad must be positive")
    if args.max_tape_length <= 0:
        parser.error("--max-tape-length must be positive")
    if args.max_steps is not None and args.max_steps < 0:
        parser.error("--max-steps must not be negative")
    if args.trace < 0:
        parser.error("--trace must not be negative")
    if args.debug is not None:
        categories = parse_categories(args.debug)
        unknown = sorted(categories - set(CATEGORIES) - {"all"})
        if unknown:
            parser.error(f"unknown debug categories: {', '.join(unknown)}")
        set_debug_categories(categories)

    config = AppConfig(
        program_path=args.program,
        inputs=list(args.inputs),
        report_timing=not args.no_timing,
        max_steps=args.max_steps,
        growth_pad=args.growth_pad,
        growth_policy=GrowthPolicy(args.growth_policy),
        max_tape_length=args.max_tape_length,
        trace_capacity=args.trace,
    )
    app = IntcodeApp(config)
    try:
        app.run()
    except RuntimeError as exc:
        parser.exit(1, f"run.py: {exc}\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
