"""Pentagons, rhombuses and trapezoids given by their vertices."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from collections.abc import Iterable
from typing import ClassVar

from labworks.geometry import Point, calc_length


class Figure(ABC):
    """A polygon described by an ordered sequence of vertices."""

    vertex_count: ClassVar[int]

    def __init__(self, vertices: Iterable[Point]) -> None:
        self.vertices: tuple[Point, ...] = tuple(vertices)

    @abstractmethod
    def geometric_center(self) -> Point:
        """Return the figure's geometric center."""

    @abstractmethod
    def area(self) -> float:
        """Return the figure's area."""

    def __float__(self) -> float:
        return self.area()

    def __str__(self) -> str:
        points = "".join(f"({vertex}) " for vertex in self.vertices[: self.vertex_count])
        return f"{type(self).__name__}: {points}"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self.vertices)!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Figure):
            return NotImplemented
        return type(self) is type(other) and self.vertices == other.vertices

    __hash__ = None  # type: ignore[assignment]


class Pentagon(Figure):
    """A regular pentagon."""

    vertex_count: ClassVar[int] = 5

    def geometric_center(self) -> Point:
        corners = self.vertices[: self.vertex_count]
        return Point(
            sum(p.x for p in corners) / self.vertex_count,
            sum(p.y for p in corners) / self.vertex_count,
        )

    def area(self) -> float:
        side = calc_length(self.vertices[0], self.vertices[1])
        return 5 * side**2 / (4 * math.tan(math.pi / 5))


class Rhombus(Figure):
    """A rhombus; its area is half the product of the diagonals."""

    vertex_count: ClassVar[int] = 4

    def geometric_center(self) -> Point:
        corners = self.vertices[: self.vertex_count]
        xs = [p.x for p in corners]
        ys = [p.y for p in corners]
        return Point((max(xs) + min(xs)) / 2, (max(ys) + min(ys)) / 2)

    def area(self) -> float:
        first = calc_length(self.vertices[0], self.vertices[2])
        second = calc_length(self.vertices[1], self.vertices[3])
        return first * second / 2


class Trapezoid(Figure):
    """A trapezoid whose first and last pairs of vertices are the bases."""

    vertex_count: ClassVar[int] = 4

    def __init__(self, vertices: Iterable[Point]) -> None:
        super().__init__(vertices)
        first, second, third, fourth = self.vertices[:4]
        if first.x == second.x:
            self._height = abs(first.x - fourth.x)
        else:
            self._height = abs(first.y - fourth.y)
        self._smaller_base = calc_length(first, second)
        self._bigger_base = calc_length(third, fourth)

    def geometric_center(self) -> Point:
        first, second = self.vertices[0], self.vertices[1]
        small, big = self._smaller_base, self._bigger_base
        offset = (self._height / 3.0) * (2 * big + small) / (big + small)
        return Point((first.x + second.x) / 2, (first.y + second.y) / 2 + offset)

    def area(self) -> float:
        return (self._smaller_base + self._bigger_base) * self._height / 2