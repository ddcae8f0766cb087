"""Command that prints the operations sorting its arguments."""

from __future__ import annotations

import sys
from typing import Optional, Sequence

from pushswap.sorter import sort_values
from pushswap.stack import InputError, parse_arguments


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Print one operation per line; print ``Error`` and return 1 on bad input."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args or (len(args) == 1 and not args[0]):
        return 0
    try:
        values = parse_arguments(args)
    except InputError:
        sys.stdout.write("Error\n")
        return 1
    sys.stdout.write("".join(f"{operation.value}\n" for operation in sort_values(values)))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())