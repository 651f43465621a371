"""Validation of vertex lists and creation of the matching figures."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable, Iterator, Sequence
from itertools import pairwise

from labworks.figures import Figure, Pentagon, Rhombus, Trapezoid
from labworks.geometry import (
    Point,
    calc_length,
    get_cosine,
    intercept_x,
    intercept_y,
    nearly_equal,
    slope_x,
    slope_y,
)

Side = tuple[Point, Point]


def _sides(points: Sequence[Point]) -> Iterator[Side]:
    """Yield the polygon's sides in order, the last one closing the loop."""
    return zip(points, [*points[1:], *points[:1]])


def _corners(points: Sequence[Point]) -> Iterator[tuple[Point, Point, Point]]:
    """Yield (previous, vertex, next) for every vertex of the polygon."""
    return zip([*points[-1:], *points[:-1]], points, [*points[1:], *points[:1]])


def _check_vertex_count(points: Sequence[Point], count: int) -> None:
    if len(points) != count:
        raise ValueError("Invalid number of points")


def _check_equal_sides(points: Sequence[Point], message: str) -> None:
    lengths = [calc_length(a, b) for a, b in _sides(points)]
    for previous, current in pairwise(lengths):
        if not nearly_equal(previous, current) or nearly_equal(current, 0):
            raise ValueError(message)


def _check_equal_angles(points: Sequence[Point], message: str) -> None:
    cosines = [get_cosine(before, vertex, after) for before, vertex, after in _corners(points)]
    for previous, current in pairwise(cosines):
        if not nearly_equal(previous, current):
            raise ValueError(message)


def _opposite_sides(points: Sequence[Point]) -> list[tuple[Side, Side]]:
    """Return the two pairs of opposite sides of a quadrilateral."""
    sides = list(_sides(points))
    return [(sides[0], sides[2]), (sides[1], sides[3])]


def _compare_lines(first: Side, second: Side) -> tuple[bool, bool]:
    """Return whether two sides have equal slopes and whether they lie on one line."""
    start, end = first
    if start.x == end.x:
        slope, intercept = slope_x, intercept_x
    else:
        slope, intercept = slope_y, intercept_y
    same_slope = nearly_equal(slope(*first), slope(*second))
    same_intercept = nearly_equal(intercept(*first), intercept(*second))
    return same_slope, same_intercept


class FigureValidator(ABC):
    """Checks that a list of points describes a particular kind of figure."""

    @abstractmethod
    def validate(self, points: Sequence[Point]) -> None:
        """Raise ValueError if ``points`` do not form a valid figure."""


class PentagonValidator(FigureValidator):
    """Accepts five points forming a regular pentagon."""

    def validate(self, points: Sequence[Point]) -> None:
        points = list(points)
        _check_vertex_count(points, Pentagon.vertex_count)
        _check_equal_sides(points, "Invalid angels between sides")
        _check_equal_angles(points, "Invalid length of sides")


class RhombusValidator(FigureValidator):
    """Accepts four points forming a rhombus."""

    def validate(self, points: Sequence[Point]) -> None:
        points = list(points)
        _check_vertex_count(points, Rhombus.vertex_count)
        for first, second in _opposite_sides(points):
            parallel, same_line = _compare_lines(first, second)
            if not parallel or same_line:
                raise ValueError("The sides are not parallel")
        _check_equal_sides(points, "Invalid length of sides")


class TrapezoidValidator(FigureValidator):
    """Accepts four points whose first and third sides alone are parallel."""

    def validate(self, points: Sequence[Point]) -> None:
        points = list(points)
        _check_vertex_count(points, Trapezoid.vertex_count)
        (bases, legs) = _opposite_sides(points)
        parallel, same_line = _compare_lines(*bases)
        if not parallel or same_line:
            raise ValueError("The sides are not parallel")
        parallel, _ = _compare_lines(*legs)
        if parallel:
            raise ValueError("The sides are parallel")


class Factory(ABC):
    """Builds a figure from points after validating them."""

    @abstractmethod
    def create_figure(self, points: Iterable[Point]) -> Figure:
        """Return a new figure built from ``points``."""


class PentagonFactory(Factory):
    """Builds regular pentagons."""

    def create_figure(self, points: Iterable[Point]) -> Figure:
        points = list(points)
        PentagonValidator().validate(points)
        return Pentagon(points)


class RhombusFactory(Factory):
    """Builds rhombuses."""

    def create_figure(self, points: Iterable[Point]) -> Figure:
        points = list(points)
        RhombusValidator().validate(points)
        return Rhombus(points)


class TrapezoidFactory(Factory):
    """Builds trapezoids."""

    def create_figure(self, points: Iterable[Point]) -> Figure:
        points = list(points)
        TrapezoidValidator().validate(points)
        return Trapezoid(points)