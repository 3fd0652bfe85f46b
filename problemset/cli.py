"""Command line entry: solve a problem from whitespace-separated input on stdin."""

import argparse
import sys
from collections.abc import Callable, Iterator

from problemset.counting import array_coloring
from problemset.sequences import drawing_task, shaass_and_oskols


def _ints(tokens: Iterator[str], count: int) -> list[int]:
    return [int(next(tokens)) for _ in range(count)]


def _solve_array_coloring(tokens: Iterator[str]) -> list[str]:
    cases = int(next(tokens))
    lines = []
    for _ in range(cases):
        size = int(next(tokens))
        lines.append("YES" if array_coloring(_ints(tokens, size)) else "NO")
    return lines


def _solve_drawing_task(tokens: Iterator[str]) -> list[str]:
    n, m, k = _ints(tokens, 3)
    strokes = []
    for _ in range(k):
        r1, c1, r2, c2 = _ints(tokens, 4)
        colour = next(tokens)
        if len(colour) != 1:
            raise ValueError(f"expected a single character, got {colour!r}")
        strokes.append((r1, c1, r2, c2, colour))
    return drawing_task(n, m, strokes)


def _solve_shaass_and_oskols(tokens: Iterator[str]) -> list[str]:
    n = int(next(tokens))
    wires = _ints(tokens, n)
    m = int(next(tokens))
    shots = [tuple(_ints(tokens, 2)) for _ in range(m)]
    return [str(birds) for birds in shaass_and_oskols(wires, shots)]


_SOLVERS: dict[str, Callable[[Iterator[str]], list[str]]] = {
    "array-coloring": _solve_array_coloring,
    "drawing-task": _solve_drawing_task,
    "shaass-and-oskols": _solve_shaass_and_oskols,
}


def main(argv: list[str] | None = None) -> int:
    """Read the chosen problem's input from stdin and print its answer."""
    parser = argparse.ArgumentParser(prog="problemset", description=__doc__)
    parser.add_argument("problem", choices=sorted(_SOLVERS))
    args = parser.parse_args(argv)
    tokens = iter(sys.stdin.read().split())
    try:
        lines = _SOLVERS[args.problem](tokens)
    except StopIteration:
        parser.error("input ended early")
    except ValueError as error:
        parser.error(str(error))
    for line in lines:
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())