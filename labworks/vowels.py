"""Counting lower-case English vowels in a line of text."""

from __future__ import annotations

import sys
from collections.abc import Sequence

_VOWELS = frozenset("aeiou")


def is_lower_case_vowel(letter: str) -> bool:
    """Return True if ``letter`` is one of the lower-case vowels a, e, i, o, u."""
    return letter in _VOWELS and len(letter) == 1


def count_vowels(text: str) -> int:
    """Return how many lower-case vowels ``text`` contains."""
    return sum(1 for letter in text if is_lower_case_vowel(letter))


def main(argv: Sequence[str] | None = None) -> int:
    """Read one line from standard input and print its vowel count."""
    print(
        "Введите строку, состоящую только из английских гласных букв и/или пробелов:"
    )
    line = sys.stdin.readline().rstrip("\r\n")
    print(f"Количество гласных в данной строке равно {count_vowels(line)}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())