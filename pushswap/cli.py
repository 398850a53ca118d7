"""Command-line entry: print the moves that sort the given integers."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from pushswap.parsing import InputError, parse_arguments
from pushswap.sorter import plan_moves


def main(argv: Sequence[str] | None = None) -> int:
    """Print one move per line; print "Error" to stderr on bad input."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        numbers = parse_arguments(args)
    except InputError:
        sys.stderr.write("Error\n")
        return 0
    for move in plan_moves(numbers):
        sys.stdout.write(f"{move.value}\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())