import itertools

import pytest

from pushswap.disorder import compute_disorder, count_disorder_pairs, stack_to_list
from pushswap.stack import Stack


def test_stack_to_list_keeps_order():
    assert stack_to_list(Stack([5, -1, 3])) == [5, -1, 3]


def test_stack_to_list_empty_and_none():
    assert stack_to_list(Stack()) == []
    assert stack_to_list(None) == []


def test_sorted_has_no_disorder():
    assert count_disorder_pairs([1, 2, 3, 4]) == 0.0


def test_reversed_is_full_disorder():
    assert count_disorder_pairs([4, 3, 2, 1]) == 1.0


@pytest.mark.parametrize("values", [[], [7]])
def test_short_sequences(values):
    assert count_disorder_pairs(values) == 0.0


def test_one_inversion_of_three_pairs():
    assert count_disorder_pairs([2, 1, 3]) == pytest.approx(1 / 3)


@pytest.mark.parametrize("perm", list(itertools.permutations([1, 2, 3, 4])))
def test_reverse_complements(perm):
    forward = count_disorder_pairs(list(perm))
    backward = count_disorder_pairs(list(reversed(perm)))
    assert forward + backward == pytest.approx(1.0)
    assert 0.0 <= forward <= 1.0


def test_compute_disorder_matches_pairs():
    stack = Stack([3, 1, 2, 5, 4])
    assert compute_disorder(stack) == count_disorder_pairs([3, 1, 2, 5, 4])


def test_compute_disorder_small_or_missing():
    assert compute_disorder(None) == 0.0
    assert compute_disorder(Stack([9])) == 0.0