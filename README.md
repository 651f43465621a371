# labworks

This package bundles three small, self-contained tools:

- **Vowel counting** (`labworks.vowels`). It counts the lower-case English vowels `a`, `e`, `i`, `o` and `u` in a line of text.
- **Quaternary numbers** (`labworks.quaternary`, `labworks.quaternary_cli`). These are non-negative base-4 numbers with the digits `0`–`3`. They support addition, subtraction and comparison.
- **Plane figures** (`labworks.geometry`, `labworks.figures`, `labworks.factories`, `labworks.menu`). Pentagons, rhombi and trapezoids are built from validated vertices. Each figure reports its area and geometric centre.

## Installation

```
pip install .
```

To install with the test dependencies and run the tests:

```
pip install .[test]
pytest
```

## Command-line tools

### Counting vowels

```
labworks-vowels
```

The command prints a prompt, which is in Russian. It then reads one line from standard input and prints how many lower-case vowels that line contains.

### Quaternary calculator

```
labworks-quaternary
```

Each round reads three whitespace-separated words from standard input: two base-4 numbers and an operator. The operator is one of `+`, `-`, `>`, `<`, `>=`, `<=` or `=`. Arithmetic prints the resulting number. Comparisons print `true` or `false`.

```
12 3 +
Result: 21
```

The tool stops when it reads `q` in any position or reaches the end of input. It also stops with exit status 1, printing the message to standard error, in these cases:

- a digit is outside `0`–`3`;
- the operator is unknown;
- a subtraction has a first number smaller than the second.

### Figure menu

```
labworks-figures
```

This is an interactive menu. Each choice is a single letter on its own line, in either case:

| Key | Action |
|-----|--------|
| `a` | Add a figure. Choose `t` (trapezoid), `p` (pentagon) or `r` (rhombus). Then type the vertex coordinates `x y x y ...` on one line. |
| `s` | Print the total area of all figures. |
| `d` | Delete the figure at a 0-based index. |
| `i` | Print each figure's vertices, geometric centre and area. |
| `q` | Quit. |

Any invalid input ends the session with exit status 1 and prints the message to standard error. Invalid input covers:

- an unknown letter;
- vertices that do not form the chosen figure;
- an index that is not a number or is out of range.

Figures are kept only in memory for the duration of the session. Nothing is saved.

## Library use

```python
from labworks.vowels import count_vowels, is_lower_case_vowel
from labworks.quaternary import Four
from labworks.geometry import Point, total_area
from labworks.factories import RhombusFactory, TrapezoidFactory

count_vowels("hello world")          # 3
is_lower_case_vowel("A")             # False

Four("333333") + Four("1")           # Four('1000000')
Four("1000") - Four("1")             # Four('333')
Four("22") <= Four("22")             # True
Four.repeated(3, "2")                # Four('222')

rhombus = RhombusFactory().create_figure(
    [Point(0, 1), Point(1, 0), Point(0, -1), Point(-1, 0)]
)
rhombus.area()                       # 2.0
rhombus.geometric_center()           # Point(x=0.0, y=0.0)
str(rhombus)                         # 'Rhombus: (0 1) (1 0) (0 -1) (-1 0) '

trapezoid = TrapezoidFactory().create_figure(
    [Point(1, 1), Point(2, 1), Point(3, 0), Point(0, 0)]
)
total_area([rhombus, trapezoid])     # 4.0
```

Some points of behaviour to be aware of:

- `Four` rejects characters other than `0`–`3` with `ValueError`.
- `Four` keeps any leading zeros it is given. Its comparisons treat a longer digit string as the larger number.
- `Point` compares equal when both coordinates differ by less than `1e-3`.
- The factories raise `ValueError` when the vertices do not form the requested figure. This includes a wrong number of points, unequal sides or angles, and sides that are not parallel.
- `labworks.quaternary_cli.evaluate` and `labworks.menu.menu` can be driven programmatically with your own streams.