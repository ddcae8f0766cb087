"""Command that checks whether a list of operations sorts its arguments."""

from __future__ import annotations

import sys
from typing import Iterable, Optional, Sequence

from pushswap.stack import InputError, Operation, Stack, parse_arguments

OK = "\033[0;32mOK\033[0m\n"
KO = "\033[0;31mKO\033[0m\n"

_DIGITS = frozenset("0123456789")


def all_digits(args: Iterable[str]) -> bool:
    """True when every word is an optional sign followed only by digits."""
    for word in args:
        body = word[1:] if word[:1] in ("+", "-") else word
        if not set(body) <= _DIGITS:
            return False
    return True


def run_commands(values: Iterable[int], lines: Iterable[str]) -> bool:
    """Apply each command line to a fresh pair of stacks.

    Returns True when ``a`` ends sorted and holds every value. Raises
    InputError at the first line that is not a command.
    """
    a = Stack(values)
    b = Stack()
    length = len(a)
    for line in lines:
        Operation.from_command(line).apply(a, b)
    return a.is_sorted() and len(a) == length


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Read commands from standard input and print OK or KO."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) == 1:
        words = [part for part in args[0].split(" ") if part]
    else:
        words = args
    if not args or (len(args) == 1 and not args[0]) or not all_digits(words):
        sys.stdout.write("Error\n")
        return 0
    try:
        values = parse_arguments(args)
    except InputError:
        sys.stdout.write("Error\n")
        values = []
    try:
        ok = run_commands(values, sys.stdin)
    except InputError:
        sys.stderr.write("Error\n")
        return 1
    sys.stdout.write(OK if ok else KO)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())