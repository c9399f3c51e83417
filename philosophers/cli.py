"""Command-line entry point for the dining philosophers simulation."""

from __future__ import annotations

import sys
from typing import Sequence

from .arguments import ArgumentError, parse_arguments
from .table import Table


def main(argv: Sequence[str] | None = None) -> int:
    """Run the simulation; return the process exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        settings = parse_arguments(args)
    except ArgumentError as err:
        print(f"Error: {err}")
        return 1
    try:
        table = Table(settings)
    except ValueError:
        return 1
    table.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())