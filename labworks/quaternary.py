"""Unsigned numbers written in base four."""

from __future__ import annotations

from collections.abc import Iterable
from itertools import zip_longest

_BASE = 4
_DIGITS = frozenset("0123")


class Four:
    """A non-negative base-four number kept as its digit string.

    Leading zeros given at construction are kept; comparisons treat a longer
    digit string as the larger number.
    """

    __slots__ = ("_digits",)

    def __init__(self, digits: str | Iterable[str] = "0") -> None:
        text = digits if isinstance(digits, str) else "".join(digits)
        for character in text:
            if character not in _DIGITS:
                raise ValueError(f"Incorrect character: {character}")
        self._digits = text

    @classmethod
    def repeated(cls, count: int, character: str) -> Four:
        """Build a number made of ``count`` copies of ``character``."""
        if len(character) != 1 or character not in _DIGITS:
            raise ValueError(f"Incorrect character: {character}")
        return cls(character * count)

    def __add__(self, other: Four) -> Four:
        if not isinstance(other, Four):
            return NotImplemented
        carry = 0
        result = []
        for mine, theirs in zip_longest(
            reversed(self._digits), reversed(other._digits), fillvalue="0"
        ):
            total = int(mine) + int(theirs) + carry
            result.append(str(total % _BASE))
            carry = total // _BASE
        if carry:
            result.append(str(carry))
        return Four("".join(reversed(result)))

    def __sub__(self, other: Four) -> Four:
        if not isinstance(other, Four):
            return NotImplemented
        if self < other:
            raise ValueError(
                "The first number must be greater than or equal to the second"
            )
        borrow = 0
        result = []
        for mine, theirs in zip_longest(
            reversed(self._digits), reversed(other._digits), fillvalue="0"
        ):
            difference = int(mine) - int(theirs) - borrow
            if difference < 0:
                difference += _BASE
                borrow = 1
            else:
                borrow = 0
            result.append(str(difference))
        text = "".join(reversed(result))
        return Four(text.lstrip("0") or text[-1:])

    def _key(self) -> tuple[int, str]:
        return len(self._digits), self._digits

    def __lt__(self, other: Four) -> bool:
        if not isinstance(other, Four):
            return NotImplemented
        return self._key() < other._key()

    def __gt__(self, other: Four) -> bool:
        if not isinstance(other, Four):
            return NotImplemented
        return self._key() > other._key()

    def __le__(self, other: Four) -> bool:
        if not isinstance(other, Four):
            return NotImplemented
        return not self > other

    def __ge__(self, other: Four) -> bool:
        if not isinstance(other, Four):
            return NotImplemented
        return not self < other

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Four):
            return NotImplemented
        return self._digits == other._digits

    def __hash__(self) -> int:
        return hash(self._digits)

    def __str__(self) -> str:
        return self._digits

    def __repr__(self) -> str:
        return f"Four({self._digits!r})"