"""Command line: print the operations that sort the given integers."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from pushswap.parsing import InputError, parse_numbers, split_string
from pushswap.sorter import sort_operations


def main(argv: Sequence[str] | None = None) -> int:
    """Run the sorter on the arguments; return the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args or (len(args) == 1 and not args[0]):
        sys.stderr.write("Error\n")
        return 1
    tokens = split_string(args[0], " ") if len(args) == 1 else args
    try:
        numbers = parse_numbers(tokens)
    except InputError:
        sys.stderr.write("Error\n")
        return 1
    for operation in sort_operations(numbers):
        sys.stdout.write(f"{operation}\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())