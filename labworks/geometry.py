"""Plane points and the small geometric helpers used by the figures."""

from __future__ import annotations

import math
from collections.abc import Iterable
from dataclasses import dataclass
from typing import SupportsFloat

EPSILON = 1e-3


def _divide(numerator: float, denominator: float) -> float:
    """Floating-point division that yields inf or nan instead of raising."""
    if denominator == 0:
        if numerator == 0 or math.isnan(numerator):
            return math.nan
        sign = math.copysign(1.0, numerator) * math.copysign(1.0, denominator)
        return math.copysign(math.inf, sign)
    return numerator / denominator


def nearly_equal(a: float, b: float) -> bool:
    """Return True if ``a`` and ``b`` differ by less than ``EPSILON``."""
    return abs(a - b) < EPSILON


@dataclass(eq=False)
class Point:
    """A point in the plane; equality tolerates a difference below ``EPSILON``."""

    x: float = 0.0
    y: float = 0.0

    def __post_init__(self) -> None:
        self.x = float(self.x)
        self.y = float(self.y)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        return nearly_equal(self.x, other.x) and nearly_equal(self.y, other.y)

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return f"{self.x:g} {self.y:g}"


def calc_length(a: Point, b: Point) -> float:
    """Return the distance between ``a`` and ``b``."""
    return math.hypot(a.x - b.x, a.y - b.y)


def get_cosine(b: Point, a: Point, c: Point) -> float:
    """Return the cosine of the angle at ``a`` between rays to ``b`` and ``c``."""
    len_a = calc_length(b, c)
    len_b = calc_length(b, a)
    len_c = calc_length(a, c)
    return _divide(len_b * len_b + len_c * len_c - len_a * len_a, 2 * len_b * len_c)


def slope_y(a: Point, b: Point) -> float:
    """Return k of the line y = kx + c through ``a`` and ``b``."""
    return _divide(a.y - b.y, a.x - b.x)


def intercept_y(a: Point, b: Point) -> float:
    """Return c of the line y = kx + c through ``a`` and ``b``."""
    return a.y - slope_y(a, b) * a.x


def slope_x(a: Point, b: Point) -> float:
    """Return k of the line x = ky + c through ``a`` and ``b``."""
    return _divide(a.x - b.x, a.y - b.y)


def intercept_x(a: Point, b: Point) -> float:
    """Return c of the line x = ky + c through ``a`` and ``b``."""
    return a.x - slope_x(a, b) * a.y


def total_area(figures: Iterable[SupportsFloat]) -> float:
    """Return the summed area of ``figures``."""
    return sum((float(figure) for figure in figures), 0.0)