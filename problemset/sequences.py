"""Answers to contest problems about arrays, sequences and grids."""

from collections.abc import Iterable, Sequence

_EMPTY_CELL = "."
_MIN_GAP_BETWEEN_PREFIX_AND_SUFFIX = 2

Stroke = tuple[int, int, int, int, str]


def two_permutations(n: int, a: int, b: int) -> bool:
    """Whether two permutations of length n can share a prefix of length a and
    a suffix of length b and still be different."""
    if n == a and n == b:
        return True
    if a > n or b > n:
        return False
    suffix_start = n - b + 1
    return suffix_start > a and suffix_start - a > _MIN_GAP_BETWEEN_PREFIX_AND_SUFFIX


def longest_good_array(l: int, r: int) -> int:
    """Length of the longest increasing array within [l, r] whose gaps strictly grow."""
    if l > r:
        raise ValueError("l must not exceed r")
    if l == r:
        return 1
    length = 2
    last = l + 1
    gap = 1
    while last + gap + 1 <= r:
        gap += 1
        last += gap
        length += 1
    return length


def puzzles_min_difference(n: int, pieces: Iterable[int]) -> int:
    """Smallest spread between the largest and smallest of n chosen pieces."""
    ordered = sorted(pieces)
    if n < 1:
        raise ValueError("n must be positive")
    if n > len(ordered):
        raise ValueError(f"cannot choose {n} pieces out of {len(ordered)}")
    return min(high - low for low, high in zip(ordered, ordered[n - 1:]))


def twins_min_coins(coins: Iterable[int]) -> int:
    """Fewest coins whose sum is strictly greater than the sum of the rest."""
    ordered = sorted(coins, reverse=True)
    total = sum(ordered)
    taken = 0
    for count, coin in enumerate(ordered, start=1):
        taken += coin
        if taken > total - taken:
            return count
    raise ValueError("no selection of coins outweighs the rest")


def shaass_and_oskols(
    wires: Sequence[int], shots: Iterable[tuple[int, int]]
) -> list[int]:
    """Birds left on each wire after the shots, given as (wire, bird) pairs, 1-based."""
    birds = list(wires)
    count = len(birds)
    for wire, position in shots:
        if not 1 <= wire <= count:
            raise ValueError(f"wire {wire} is out of range 1..{count}")
        index = wire - 1
        if not 1 <= position <= birds[index]:
            raise ValueError(f"wire {wire} has no bird at position {position}")
        if index > 0:
            birds[index - 1] += position - 1
        if index < count - 1:
            birds[index + 1] += birds[index] - position
        birds[index] = 0
    return birds


def drawing_task(n: int, m: int, strokes: Iterable[Stroke]) -> list[str]:
    """Paint rectangles onto an n x m grid of '.'; corners are 1-based and inclusive."""
    if n < 0 or m < 0:
        raise ValueError("grid dimensions must not be negative")
    grid = [[_EMPTY_CELL] * m for _ in range(n)]
    for r1, c1, r2, c2, colour in strokes:
        top, bottom = sorted((r1, r2))
        left, right = sorted((c1, c2))
        if top < 1 or bottom > n or left < 1 or right > m:
            raise ValueError(f"stroke ({r1}, {c1})-({r2}, {c2}) leaves the grid")
        for row in grid[top - 1:bottom]:
            row[left - 1:right] = [colour] * (right - left + 1)
    return ["".join(row) for row in grid]