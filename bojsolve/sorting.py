"""Sorting and searching problems."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable


def max_meetings(meetings: Iterable[tuple[int, int]]) -> int:
    """Return the most non-overlapping (start, end) meetings one room can hold."""
    count = 0
    free_at: int | None = None
    for start, end in sorted(meetings, key=lambda m: (m[1], m[0])):
        if free_at is None or free_at <= start:
            count += 1
            free_at = end
    return count


def sort_by_age(members: Iterable[tuple[int, str]]) -> list[tuple[int, str]]:
    """Sort (age, name) pairs by age, keeping the joining order among equal ages."""
    return sorted(members, key=lambda member: member[0])


def count_cards(cards: Iterable[int], queries: Iterable[int]) -> list[int]:
    """Return how many cards carry each queried number."""
    counts = Counter(cards)
    return [counts[q] for q in queries]


def sort_words(words: Iterable[str]) -> list[str]:
    """Return the distinct words, shorter first and alphabetical within a length."""
    return sorted(set(words), key=lambda word: (len(word), word))


def unheard_and_unseen(unheard: Iterable[str], unseen: Iterable[str]) -> list[str]:
    """Return, sorted, the names that appear in both lists."""
    heard_of = set(unheard)
    return sorted(name for name in unseen if name in heard_of)


def contains_each(values: Iterable[int], queries: Iterable[int]) -> list[bool]:
    """Tell for each query whether it occurs among the values."""
    present = set(values)
    return [q in present for q in queries]


def sorted_numbers(numbers: Iterable[int]) -> list[int]:
    """Return the numbers in ascending order."""
    return sorted(numbers)