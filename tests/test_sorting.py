import pytest

from bojsolve.sorting import (
    contains_each,
    count_cards,
    max_meetings,
    sort_by_age,
    sort_words,
    sorted_numbers,
    unheard_and_unseen,
)


def test_max_meetings_example():
    meetings = [
        (1, 4), (3, 5), (0, 6), (5, 7), (3, 8), (5, 9),
        (6, 10), (8, 11), (8, 12), (2, 13), (12, 14),
    ]
    assert max_meetings(meetings) == 4


def test_max_meetings_disjoint_all_fit():
    meetings = [(4, 6), (0, 2), (2, 4)]
    assert max_meetings(meetings) == len(meetings)


def test_max_meetings_zero_length():
    meetings = [(2, 2), (2, 2), (1, 2)]
    assert max_meetings(meetings) == len(meetings)


def test_max_meetings_empty_and_nested():
    assert max_meetings([]) == 0
    assert max_meetings([(0, 10), (1, 9)]) == 1


def test_sort_by_age_is_stable():
    members = [(21, "Junkyu"), (21, "Dohyun"), (20, "Sunyoung")]
    assert sort_by_age(members) == [
        (20, "Sunyoung"),
        (21, "Junkyu"),
        (21, "Dohyun"),
    ]


def test_count_cards_example():
    cards = [6, 3, 2, 10, 10, 10, -10, -10, 7, 3]
    queries = [10, 9, -5, 2, 3, 4, 5, -10]
    assert count_cards(cards, queries) == [3, 0, 0, 1, 2, 0, 0, 2]


def test_count_cards_totals_match():
    cards = [1, 1, 2, 5, 5, 5]
    assert sum(count_cards(cards, set(cards))) == len(cards)


def test_sort_words_order_and_dedup():
    words = ["but", "i", "wont", "hesitate", "no", "more", "it", "cannot", "wait", "i"]
    result = sort_words(words)
    assert result == ["i", "it", "no", "but", "more", "wait", "wont", "cannot", "hesitate"]
    assert len(result) == len(set(words))


def test_unheard_and_unseen():
    unheard = ["ohhenrie", "charlie", "baesangwook"]
    unseen = ["obama", "baesangwook", "ohhenrie", "clinton"]
    assert unheard_and_unseen(unheard, unseen) == ["baesangwook", "ohhenrie"]
    assert unheard_and_unseen(unheard, []) == []


def test_contains_each():
    values = [4, 1, 5, 2, 3]
    queries = [1, 3, 7, 9, 5]
    assert contains_each(values, queries) == [True, True, False, False, True]


@pytest.mark.parametrize("numbers", [[5, 2, 3, 4, 1], [-1, 0, -1000, 1000], []])
def test_sorted_numbers(numbers):
    result = sorted_numbers(numbers)
    assert all(a <= b for a, b in zip(result, result[1:]))
    assert sorted(result) == sorted(numbers) and len(result) == len(numbers)