"""Counting and arithmetic answers to short contest problems."""

from collections.abc import Iterable, Sequence

_MATRIX_SIZE = 5
_MATRIX_CENTRE = 2
_ELEPHANT_STRIDE = 5
_SCREEN_CELLS = 15
_BIG_ICON_CELLS = 4
_BIG_ICONS_PER_SCREEN = 2


def _ceil_div(numerator: int, denominator: int) -> int:
    return -(-numerator // denominator)


def array_coloring(values: Iterable[int]) -> bool:
    """Return True when the values split into two groups of equal-parity sums."""
    odd_count = sum(1 for value in values if value % 2)
    return odd_count % 2 == 0


def bear_years(a: int, b: int) -> int:
    """Years until Limak (tripling yearly) is heavier than Bob (doubling yearly)."""
    if a <= 0 and a <= b:
        raise ValueError("Limak's weight must be positive to ever exceed Bob's")
    years = 0
    while a <= b:
        a *= 3
        b *= 2
        years += 1
    return years


def beautiful_matrix_moves(matrix: Iterable[Iterable[int]]) -> int:
    """Adjacent row/column swaps needed to move every 1 to the centre of a 5x5 grid."""
    rows = [list(row) for row in matrix]
    if len(rows) != _MATRIX_SIZE or any(len(row) != _MATRIX_SIZE for row in rows):
        raise ValueError(f"matrix must be {_MATRIX_SIZE}x{_MATRIX_SIZE}")
    return sum(
        abs(i - _MATRIX_CENTRE) + abs(j - _MATRIX_CENTRE)
        for i, row in enumerate(rows)
        for j, cell in enumerate(row)
        if cell == 1
    )


def elephant_steps(x: int) -> int:
    """Fewest steps of length at most five needed to cover distance x."""
    if x <= 0:
        return 0
    return _ceil_div(x, _ELEPHANT_STRIDE)


def gaming_forces_spells(healths: Iterable[int]) -> int:
    """Fewest spells to kill all monsters, pairing off monsters with one health."""
    healths = list(healths)
    pairs = sum(1 for health in healths if health == 1) // 2
    return pairs + (len(healths) - 2 * pairs)


def next_round_count(scores: Sequence[int], k: int) -> int:
    """Contestants with a positive score at least the k-th place score."""
    scores = list(scores)
    if not 1 <= k <= len(scores):
        raise ValueError(f"k must be between 1 and {len(scores)}")
    threshold = scores[k - 1]
    return sum(1 for score in scores if score >= threshold and score > 0)


def team_problem_count(votes: Iterable[Iterable[int]]) -> int:
    """Problems that at least two of the three friends are sure about."""
    return sum(1 for vote in votes if sum(vote) >= 2)


def soldier_borrow(k: int, n: int, w: int) -> int:
    """Money to borrow to buy w bananas where the i-th costs i*k, having n."""
    total_cost = k * w * (w + 1) // 2
    return max(0, total_cost - n)


def wrong_subtraction(n: int, k: int) -> int:
    """Apply Tanya's faulty decrement k times to n."""
    for _ in range(k):
        n = n // 10 if n % 10 == 0 else n - 1
    return n


def split_multiset_operations(n: int, k: int) -> int:
    """Operations to split {n} into ones, each split yielding at most k parts."""
    if n <= 1:
        return 0
    if k < 2:
        raise ValueError("k must be at least 2 to make progress")
    return _ceil_div(n - 1, k - 1)


def phone_desktop_screens(x: int, y: int) -> int:
    """Fewest 5x3 screens holding x 1x1 icons and y 2x2 icons."""
    screens = _ceil_div(y, _BIG_ICONS_PER_SCREEN)
    free_cells = _SCREEN_CELLS * screens - _BIG_ICON_CELLS * y
    remaining = x - free_cells
    if remaining > 0:
        screens += _ceil_div(remaining, _SCREEN_CELLS)
    return screens