"""Interactive menu for building figures and inspecting them."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from enum import Enum, auto
from typing import TextIO

from labworks.factories import (
    Factory,
    PentagonFactory,
    RhombusFactory,
    TrapezoidFactory,
)
from labworks.figures import Figure
from labworks.geometry import Point, total_area


class OperationType(Enum):
    """Actions selectable from the menus."""

    CREATE_PENTAGON = auto()
    CREATE_TRAPEZOID = auto()
    CREATE_RHOMBUS = auto()
    QUIT = auto()
    CALCULATE_TOTAL_SQUARE = auto()
    PRINT_INFO_ABOUT_FIGURES = auto()
    DELETE_FIGURE = auto()
    ADD_FIGURE = auto()


class MenuType(Enum):
    """Which menu a choice is read for."""

    GENERAL = auto()
    FIGURE_SELECTOR = auto()


_OPERATIONS = {
    "q": OperationType.QUIT,
    "t": OperationType.CREATE_TRAPEZOID,
    "p": OperationType.CREATE_PENTAGON,
    "r": OperationType.CREATE_RHOMBUS,
    "s": OperationType.CALCULATE_TOTAL_SQUARE,
    "i": OperationType.PRINT_INFO_ABOUT_FIGURES,
    "d": OperationType.DELETE_FIGURE,
    "a": OperationType.ADD_FIGURE,
}

_VALID_CHARACTERS = {
    MenuType.GENERAL: frozenset("asdiq"),
    MenuType.FIGURE_SELECTOR: frozenset("tpr"),
}

_FACTORIES: dict[OperationType, Factory] = {
    OperationType.CREATE_PENTAGON: PentagonFactory(),
    OperationType.CREATE_TRAPEZOID: TrapezoidFactory(),
    OperationType.CREATE_RHOMBUS: RhombusFactory(),
}

_MAIN_MENU = (
    ">>> Select action: \n"
    "> (A/a) - Add new figure into vector\n"
    "> (S/s) - Calculate total square\n"
    "> (D/d) - Delete figure by index\n"
    "> (I/i) - Print all info about figures (geometrical center, square, points)\n"
    "> (Q/q) - Quit\n"
)

_FIGURE_SELECTOR = (
    "\n>>> Select figure: \n"
    "> (T/t) - Create trapezoid\n"
    "> (P/p) - Create pentagon\n"
    "> (R/r) - Create rhombus\n"
)


def operation_for_char(character: str) -> OperationType:
    """Return the operation selected by a lower-case menu letter."""
    try:
        return _OPERATIONS[character]
    except KeyError:
        raise ValueError("Invalid operation type") from None


def read_operation(line: str, menu_type: MenuType) -> OperationType:
    """Parse one input line holding a single menu letter for ``menu_type``."""
    text = line.removesuffix("\n")
    if len(text) != 1 or text.lower() not in _VALID_CHARACTERS[menu_type]:
        raise ValueError("Invalid operation type")
    return operation_for_char(text.lower())


def parse_points(line: str) -> list[Point]:
    """Read coordinate pairs from ``line`` up to the first token that is not a number."""
    values: list[float] = []
    for token in line.split():
        try:
            values.append(float(token))
        except ValueError:
            break
    return [Point(x, y) for x, y in zip(values[::2], values[1::2])]


def _prompt(stdin: TextIO, stdout: TextIO, menu_type: MenuType) -> OperationType:
    stdout.write("\n> ")
    stdout.flush()
    return read_operation(stdin.readline(), menu_type)


def _add_figure(figures: list[Figure], stdin: TextIO, stdout: TextIO) -> None:
    stdout.write(_FIGURE_SELECTOR)
    operation = _prompt(stdin, stdout, MenuType.FIGURE_SELECTOR)
    stdout.write("\nInput points:\n> ")
    stdout.flush()
    points = parse_points(stdin.readline())
    factory = _FACTORIES.get(operation)
    if factory is None:
        raise ValueError("Invalid figure type")
    figures.append(factory.create_figure(points))


def _delete_figure(figures: list[Figure], stdin: TextIO, stdout: TextIO) -> None:
    stdout.write(">>> Input index: \n> ")
    stdout.flush()
    try:
        index = int(stdin.readline().strip())
    except ValueError:
        raise ValueError("Invalid index") from None
    if not 0 <= index < len(figures):
        raise IndexError("Index out of range")
    del figures[index]


def _print_info(figures: list[Figure], stdout: TextIO) -> None:
    for figure in figures:
        stdout.write(f"{figure}\n")
        stdout.write(f"Geometric center: {figure.geometric_center()}\n")
        stdout.write(f"Square: {float(figure):g}\n")


def menu(stdin: TextIO, stdout: TextIO) -> list[Figure]:
    """Run the menu until the user quits; return the figures left at that point."""
    figures: list[Figure] = []
    while True:
        stdout.write(_MAIN_MENU)
        operation = _prompt(stdin, stdout, MenuType.GENERAL)
        if operation is OperationType.CALCULATE_TOTAL_SQUARE:
            stdout.write(f"Total square: {total_area(figures):g}\n")
        elif operation is OperationType.PRINT_INFO_ABOUT_FIGURES:
            _print_info(figures, stdout)
        elif operation is OperationType.DELETE_FIGURE:
            _delete_figure(figures, stdin, stdout)
        elif operation is OperationType.ADD_FIGURE:
            _add_figure(figures, stdin, stdout)
        elif operation is OperationType.QUIT:
            return figures
        else:
            raise ValueError("Invalid menu type")


def main(argv: Sequence[str] | None = None) -> int:
    """Run the figure menu on standard input and output."""
    try:
        menu(sys.stdin, sys.stdout)
    except (ValueError, IndexError) as error:
        print(error, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())