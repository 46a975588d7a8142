"""Small arithmetic, string and grid problems."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from itertools import accumulate, combinations
from math import factorial

_BOARD_SIZE = 8


def min_max(numbers: Iterable[int]) -> tuple[int, int]:
    """Return the smallest and the largest of the numbers."""
    values = list(numbers)
    if not values:
        raise ValueError("min_max() needs at least one number")
    return min(values), max(values)


def binomial(n: int, k: int) -> int:
    """Return the binomial coefficient n choose k."""
    if n < 0 or k < 0 or k > n:
        raise ValueError(f"binomial coefficient undefined for n={n}, k={k}")
    return factorial(n) // (factorial(k) * factorial(n - k))


def digit_sum(digits: str) -> int:
    """Return the sum of the decimal digits in a string of digits."""
    if not all(ch in "0123456789" for ch in digits):
        raise ValueError(f"not a string of digits: {digits!r}")
    return sum(int(ch) for ch in digits)


def is_palindrome(text: str) -> bool:
    """Tell whether the text reads the same backwards."""
    return text == text[::-1]


def gcd(a: int, b: int) -> int:
    """Return the greatest common divisor of two non-negative numbers."""
    while b:
        a, b = b, a % b
    return a


def lcm(a: int, b: int) -> int:
    """Return the least common multiple of two non-negative numbers."""
    divisor = gcd(a, b)
    if divisor == 0:
        raise ValueError("least common multiple of 0 and 0 is undefined")
    return a * b // divisor


def blackjack(cards: Iterable[int], limit: int) -> int:
    """Return the largest sum of three cards not above the limit, or 0."""
    sums = (sum(triple) for triple in combinations(cards, 3))
    return max((total for total in sums if total <= limit), default=0)


def is_right_triangle(a: int, b: int, c: int) -> bool:
    """Tell whether the three side lengths form a right triangle."""
    short, middle, long_ = sorted((a, b, c))
    return short * short + middle * middle == long_ * long_


def tournament_round(n: int, a: int, b: int) -> int:
    """Return the round in which contestants a and b meet in a knockout."""
    rounds = 0
    while a != b:
        a = (a + 1) // 2
        b = (b + 1) // 2
        rounds += 1
    return rounds


def good_section_count(values: Iterable[int], n: int) -> int:
    """Count the intervals [A, B] containing n and no element of values."""
    members = set(values)
    if n in members:
        return 0
    small_max = max((v for v in members if v < n), default=0)
    large_min = min((v for v in members if v > n), default=1001)
    return (n - small_max) * (large_min - n) - 1


def zero_sum(numbers: Iterable[int]) -> int:
    """Sum the numbers, where each 0 cancels the latest number still kept."""
    kept: list[int] = []
    for number in numbers:
        if number:
            kept.append(number)
        elif kept:
            kept.pop()
        else:
            raise ValueError("a zero arrived with no number to cancel")
    return sum(kept)


def atm_total_wait(times: Iterable[int]) -> int:
    """Return the least total waiting time when serving in the best order."""
    return sum(accumulate(sorted(times)))


def fibonacci_call_counts(n: int) -> tuple[int, int]:
    """Return how often a naive fibonacci(n) reaches fibonacci(0) and fibonacci(1)."""
    if n < 0:
        raise ValueError("n must not be negative")
    zeros, ones = 1, 0
    for _ in range(n):
        zeros, ones = ones, zeros + ones
    return zeros, ones


def min_operations_to_one(n: int) -> int:
    """Return the fewest steps (divide by 3, divide by 2, subtract 1) to reach 1."""
    if n < 1:
        raise ValueError("n must be at least 1")
    steps = [0, 0]
    for i in range(2, n + 1):
        best = steps[i - 1] + 1
        if i % 2 == 0:
            best = min(best, steps[i // 2] + 1)
        if i % 3 == 0:
            best = min(best, steps[i // 3] + 1)
        steps.append(best)
    return steps[n]


def primes_between(m: int, n: int) -> list[int]:
    """Return the primes p with m <= p <= n, in increasing order."""
    if n < 2:
        return []
    composite = bytearray(n + 1)
    composite[0] = composite[1] = 1
    candidate = 2
    while candidate * candidate <= n:
        if not composite[candidate]:
            composite[candidate * candidate :: candidate] = bytes(
                len(range(candidate * candidate, n + 1, candidate))
            ).replace(b"\x00", b"\x01")
        candidate += 1
    return [p for p in range(max(m, 0), n + 1) if not composite[p]]


def largest_square_area(rows: Sequence[str]) -> int:
    """Return the area of the largest square whose four corners hold the same digit."""
    grid = list(rows)
    if not grid or not grid[0]:
        raise ValueError("the grid must not be empty")
    height, width = len(grid), len(grid[0])
    for side in range(min(height, width), 0, -1):
        far = side - 1
        for top in range(height - far):
            for left in range(width - far):
                corner = grid[top][left]
                if (
                    corner
                    == grid[top][left + far]
                    == grid[top + far][left]
                    == grid[top + far][left + far]
                ):
                    return side * side
    return 1


def _chess_pattern(first: str, second: str) -> list[str]:
    return [
        "".join(first if (i + j) % 2 == 0 else second for j in range(_BOARD_SIZE))
        for i in range(_BOARD_SIZE)
    ]


_WHITE_FIRST = _chess_pattern("W", "B")
_BLACK_FIRST = _chess_pattern("B", "W")


def _mismatches(board: Sequence[str], top: int, left: int, pattern: list[str]) -> int:
    return sum(
        cell != wanted
        for row, pattern_row in zip(board[top : top + _BOARD_SIZE], pattern)
        for cell, wanted in zip(row[left : left + _BOARD_SIZE], pattern_row)
    )


def min_repaint(board: Sequence[str]) -> int:
    """Return the fewest squares to repaint so some 8x8 window is a chessboard."""
    rows = list(board)
    if len(rows) < _BOARD_SIZE or min(map(len, rows)) < _BOARD_SIZE:
        raise ValueError("the board must be at least 8 by 8")
    width = min(map(len, rows))
    return min(
        min(
            _mismatches(rows, top, left, _WHITE_FIRST),
            _mismatches(rows, top, left, _BLACK_FIRST),
        )
        for top in range(len(rows) - _BOARD_SIZE + 1)
        for left in range(width - _BOARD_SIZE + 1)
    )