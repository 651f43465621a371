import io
import sys

import pytest

from labworks.figures import Pentagon, Rhombus, Trapezoid
from labworks.geometry import Point, total_area
from labworks.menu import (
    MenuType,
    OperationType,
    main,
    menu,
    operation_for_char,
    parse_points,
    read_operation,
)

SQUARE_LINE = "0 0 0 1 1 1 1 0\n"
TRAPEZOID_LINE = "1 1 2 1 3 0 0 0\n"


def run_menu(text):
    out = io.StringIO()
    figures = menu(io.StringIO(text), out)
    return figures, out.getvalue()


@pytest.mark.parametrize(
    "character, operation",
    [
        ("q", OperationType.QUIT),
        ("t", OperationType.CREATE_TRAPEZOID),
        ("p", OperationType.CREATE_PENTAGON),
        ("r", OperationType.CREATE_RHOMBUS),
        ("s", OperationType.CALCULATE_TOTAL_SQUARE),
        ("i", OperationType.PRINT_INFO_ABOUT_FIGURES),
        ("d", OperationType.DELETE_FIGURE),
        ("a", OperationType.ADD_FIGURE),
    ],
)
def test_operation_for_char(character, operation):
    assert operation_for_char(character) is operation


def test_operation_for_unknown_char():
    with pytest.raises(ValueError):
        operation_for_char("z")


def test_read_operation_accepts_both_cases():
    assert read_operation("a\n", MenuType.GENERAL) is OperationType.ADD_FIGURE
    assert read_operation("A\n", MenuType.GENERAL) is OperationType.ADD_FIGURE
    assert read_operation("R\n", MenuType.FIGURE_SELECTOR) is OperationType.CREATE_RHOMBUS


@pytest.mark.parametrize(
    "line, menu_type",
    [
        ("t\n", MenuType.GENERAL),
        ("q\n", MenuType.FIGURE_SELECTOR),
        ("ab\n", MenuType.GENERAL),
        ("\n", MenuType.GENERAL),
        ("", MenuType.GENERAL),
    ],
)
def test_read_operation_rejects(line, menu_type):
    with pytest.raises(ValueError, match="Invalid operation type"):
        read_operation(line, menu_type)


def test_parse_points_pairs():
    assert parse_points("0 0 1 2\n") == [Point(0, 0), Point(1, 2)]


def test_parse_points_drops_incomplete_pair_and_stops_at_text():
    assert parse_points("1 2 3") == [Point(1, 2)]
    assert parse_points("1 2 x 3 4") == [Point(1, 2)]
    assert parse_points("") == []


def test_menu_quit_immediately():
    figures, output = run_menu("q\n")
    assert figures == []
    assert output.startswith(">>> Select action: ")


def test_menu_adds_figures():
    figures, output = run_menu(f"a\nr\n{SQUARE_LINE}a\nt\n{TRAPEZOID_LINE}q\n")
    assert [type(f) for f in figures] == [Rhombus, Trapezoid]
    assert "Input points:" in output
    assert ">>> Select figure: " in output


def test_menu_total_square():
    figures, output = run_menu(f"a\nr\n{SQUARE_LINE}s\nq\n")
    assert f"Total square: {total_area(figures):g}\n" in output


def test_menu_prints_info():
    figures, output = run_menu(f"a\nt\n{TRAPEZOID_LINE}i\nq\n")
    (trapezoid,) = figures
    assert f"{trapezoid}\n" in output
    assert f"Geometric center: {trapezoid.geometric_center()}\n" in output
    assert f"Square: {float(trapezoid):g}\n" in output


def test_menu_deletes_by_index():
    figures, _ = run_menu(f"a\nr\n{SQUARE_LINE}a\nt\n{TRAPEZOID_LINE}d\n0\nq\n")
    assert [type(f) for f in figures] == [Trapezoid]


def test_menu_delete_out_of_range():
    with pytest.raises(IndexError):
        run_menu("d\n0\nq\n")


def test_menu_delete_bad_index():
    with pytest.raises(ValueError):
        run_menu(f"a\nr\n{SQUARE_LINE}d\nfirst\nq\n")


def test_menu_rejects_invalid_figure():
    with pytest.raises(ValueError):
        run_menu("a\np\n0 0 1 0 0 0 1 2 3 4\nq\n")


def test_menu_rejects_invalid_choice():
    with pytest.raises(ValueError, match="Invalid operation type"):
        run_menu("x\n")


def test_menu_pentagon():
    line = "0 100 95.10565 30.9017 58.7788 -80.9017 -58.778 -80.9017 -95.10565 30.9017\n"
    figures, _ = run_menu(f"a\np\n{line}q\n")
    assert [type(f) for f in figures] == [Pentagon]


def test_main_exit_codes(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("q\n"))
    assert main() == 0
    monkeypatch.setattr(sys, "stdin", io.StringIO("x\n"))
    assert main() == 1
    assert "Invalid operation type" in capsys.readouterr().err