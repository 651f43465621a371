"""Interactive calculator for base-four numbers."""

from __future__ import annotations

import sys
from collections.abc import Iterator, Sequence
from enum import Enum
from typing import TextIO

from labworks.quaternary import Four

_QUIT = "q"


class Operator(Enum):
    """Operations the calculator understands, keyed by their symbol."""

    ADD = "+"
    SUBTRACT = "-"
    GREATER_THAN = ">"
    LOWER_THAN = "<"
    GREATER_THAN_EQ = ">="
    LOWER_THAN_EQ = "<="
    EQUAL = "="


def start_info() -> str:
    """Return the prompt shown before each calculation."""
    symbols = ", ".join(op.value for op in Operator)
    return f'Enter <number> <number> <operator> ( {symbols} ) or "q", for quit'


def _as_operator(operator: Operator | str) -> Operator:
    try:
        return Operator(operator)
    except ValueError:
        raise ValueError("Incorrect operator") from None


def evaluate(operator: Operator | str, left: Four, right: Four) -> str:
    """Apply ``operator`` to the two numbers and return the printed result."""
    op = _as_operator(operator)
    if op is Operator.ADD:
        return str(left + right)
    if op is Operator.SUBTRACT:
        return str(left - right)
    comparisons = {
        Operator.GREATER_THAN: lambda: left > right,
        Operator.LOWER_THAN: lambda: left < right,
        Operator.GREATER_THAN_EQ: lambda: left >= right,
        Operator.LOWER_THAN_EQ: lambda: left <= right,
        Operator.EQUAL: lambda: left == right,
    }
    return "true" if comparisons[op]() else "false"


def _tokens(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def run(stdin: TextIO, stdout: TextIO) -> None:
    """Read calculations from ``stdin`` until "q" or end of input."""
    tokens = _tokens(stdin)
    while True:
        stdout.write(start_info() + "\n")
        stdout.flush()
        words = []
        for _ in range(3):
            word = next(tokens, None)
            if word is None or word == _QUIT:
                return
            words.append(word)
        first, second, symbol = words
        op = _as_operator(symbol)
        result = evaluate(op, Four(first), Four(second))
        stdout.write(f"Result: {result}\n\n")


def main(argv: Sequence[str] | None = None) -> int:
    """Run the calculator on standard input and output."""
    try:
        run(sys.stdin, sys.stdout)
    except ValueError as error:
        print(error, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())