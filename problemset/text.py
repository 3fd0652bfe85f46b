"""String answers to short contest problems."""

from itertools import groupby

_FEMALE_VERDICT = "CHAT WITH HER!"
_MALE_VERDICT = "IGNORE HIM!"
_VOWELS = "aeiou"
_RUN_THAT_REFILLS = "..."
_ACTIONS_FOR_REFILLING_RUN = 2


def boy_or_girl(username: str) -> str:
    """Guess gender from the parity of distinct characters in a user name."""
    return _FEMALE_VERDICT if len(set(username)) % 2 == 0 else _MALE_VERDICT


def cover_in_water(row: str) -> int:
    """Fewest 'place water' actions to fill every '.' cell of the row."""
    if _RUN_THAT_REFILLS in row:
        return _ACTIONS_FOR_REFILLING_RUN
    return row.count(".")


def petya_compare(a: str, b: str) -> int:
    """Compare two equal-length strings ignoring case: -1, 0 or 1."""
    if len(a) != len(b):
        raise ValueError("strings must have the same length")
    a, b = a.lower(), b.lower()
    return (a > b) - (a < b)


def simple_palindrome(n: int) -> str:
    """A vowel string of length n with as few palindromic subsequences as possible."""
    if n < 0:
        raise ValueError("length must not be negative")
    full, rest = divmod(n, len(_VOWELS))
    return "".join(sorted(_VOWELS * full + _VOWELS[:rest]))


def stones_to_remove(stones: str) -> int:
    """Stones to take so that no two neighbouring stones share a colour."""
    return sum(1 for left, right in zip(stones, stones[1:]) if left == right)


def is_translation(s: str, t: str) -> bool:
    """Whether t is s written backwards."""
    return s[::-1] == t


def make_majority(sequence: str) -> bool:
    """Whether collapsing runs of zeros leaves more ones than zeros."""
    ones = zeros = 0
    for symbol, run in groupby(sequence, key=lambda ch: ch == "1"):
        if symbol:
            ones += sum(1 for _ in run)
        else:
            zeros += 1
    return ones > zeros


def wonderful_sticks(n: int, signs: str) -> list[int]:
    """A permutation of 1..n where sign i says whether element i+1 is a new low or high."""
    if n < 1:
        raise ValueError("n must be positive")
    if len(signs) != n - 1:
        raise ValueError(f"expected {n - 1} signs, got {len(signs)}")
    low, high = 1, n
    tail = []
    for sign in reversed(signs):
        if sign == "<":
            tail.append(low)
            low += 1
        else:
            tail.append(high)
            high -= 1
    return [low, *reversed(tail)]