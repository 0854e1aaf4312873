"""
CLI interface for rosezip.

Demo driver: grows a tree through a Zipper, rewinding the cursor every few
steps, then pretty-prints the result.
"""

from __future__ import annotations

import argparse
import sys

from .config import get_config
from .zipper import Zipper, ZipperError


def parse_args(args: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    cfg = get_config()

    parser = argparse.ArgumentParser(
        prog="rosezip",
        description="Grow a tree with a zipper cursor and print it",
    )

    parser.add_argument(
        "--count",
        "-n",
        type=int,
        default=cfg.demo.count,
        help=f"Number of demo steps (default: {cfg.demo.count})",
    )

    parser.add_argument(
        "--period",
        "-p",
        type=int,
        default=cfg.demo.period,
        help=f"Rewind on every step i where i %% PERIOD == PERIOD - 1 (default: {cfg.demo.period})",
    )

    parser.add_argument(
        "--rewind",
        "-r",
        type=int,
        default=cfg.demo.rewind,
        help=f"How many levels to step back on a rewind step (default: {cfg.demo.rewind})",
    )

    parser.add_argument(
        "--root",
        type=int,
        default=cfg.demo.root,
        help=f"Value of the root node (default: {cfg.demo.root})",
    )

    parser.add_argument(
        "--indent",
        "-i",
        type=int,
        default=cfg.render.indent,
        help=f"Field width added per depth level when printing (default: {cfg.render.indent})",
    )

    return parser.parse_args(args)


def validate_args(parsed: argparse.Namespace) -> None:
    """Raise ValueError on arguments the demo loop cannot use."""
    if parsed.count < 0:
        raise ValueError(f"Count must be >= 0, got {parsed.count}")
    if parsed.period < 1:
        raise ValueError(f"Period must be >= 1, got {parsed.period}")
    if parsed.rewind < 0:
        raise ValueError(f"Rewind must be >= 0, got {parsed.rewind}")
    if parsed.indent < 0:
        raise ValueError(f"Indent must be >= 0, got {parsed.indent}")


def run_demo(zipper: Zipper[int], count: int, period: int, rewind: int) -> None:
    """
    Enter branch i for each step, except every period-th step which steps
    back `rewind` levels instead. Stops at the first navigation error.
    """
    for i in range(count):
        if i % period == period - 1:
            zipper.step_back(rewind)
        else:
            zipper.enter_new_branch(i)


def main(args: list[str] | None = None) -> int:
    """Main entry point."""
    parsed = parse_args(args)

    try:
        validate_args(parsed)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    zipper: Zipper[int] = Zipper(parsed.root)

    # A navigation error ends the loop but the tree built so far is still printed
    try:
        run_demo(zipper, parsed.count, parsed.period, parsed.rewind)
    except ZipperError as e:
        print(f"Error: {e}", file=sys.stderr)

    zipper.print_tree(sys.stdout, indent=parsed.indent)
    return 0


if __name__ == "__main__":
    sys.exit(main())
