from itertools import permutations

import pytest

from pushswap.small import (
    is_biggest,
    ordered_five,
    sort_five,
    sort_four,
    sort_three,
    sort_two,
)
from pushswap.stacks import Stacks


def _replay(values, operations):
    stacks = Stacks(values)
    for operation in operations:
        getattr(stacks, operation)()
    return stacks


@pytest.mark.parametrize("values", [[1, 2], [2, 1], [-5, 7], [7, -5]])
def test_sort_two_sorts(values):
    stacks = Stacks(values)
    sort_two(stacks)
    assert stacks.a_values() == sorted(values)


def test_sort_two_sorted_input_needs_no_operation():
    stacks = Stacks([1, 2])
    sort_two(stacks)
    assert stacks.operations == []


def test_sort_two_swaps():
    stacks = Stacks([2, 1])
    sort_two(stacks)
    assert stacks.operations == ["sa"]


@pytest.mark.parametrize("values", [list(p) for p in permutations([1, 2, 3])])
def test_sort_three_sorts_every_permutation(values):
    stacks = Stacks(values)
    sort_three(stacks)
    assert stacks.a_values() == [1, 2, 3]
    assert len(stacks.operations) <= 2
    assert _replay(values, stacks.operations).a_values() == [1, 2, 3]


def test_sort_three_reverse_order_operations():
    stacks = Stacks([3, 2, 1])
    sort_three(stacks)
    assert stacks.operations == ["ra", "sa"]


def test_sort_three_single_reverse_rotation():
    stacks = Stacks([2, 3, 1])
    sort_three(stacks)
    assert stacks.operations == ["rra"]


def test_is_biggest():
    stacks = Stacks([1, 5, 3])
    assert is_biggest(stacks, 6) is True
    assert is_biggest(stacks, 5) is False
    assert is_biggest(stacks, 0) is False


def test_is_biggest_looks_only_at_top_three():
    stacks = Stacks([1, 2, 3, 100])
    assert is_biggest(stacks, 4) is True


def test_ordered_five_classes():
    assert ordered_five(Stacks([1, 2, 3, 4, 5])) == 1
    assert ordered_five(Stacks([2, 1, 3, 4, 5])) == 2
    assert ordered_five(Stacks([5, 4, 3, 2, 1])) == 0
    assert ordered_five(Stacks([1, 2, 3, 5, 4])) == 0


@pytest.mark.parametrize("values", [list(p) for p in permutations([10, 20, 30, 40])])
def test_sort_four_sorts_every_permutation(values):
    stacks = Stacks(values)
    sort_four(stacks)
    assert stacks.a_values() == [10, 20, 30, 40]
    assert stacks.b_values() == []
    assert _replay(values, stacks.operations).a_values() == [10, 20, 30, 40]


@pytest.mark.parametrize("values", [list(p) for p in permutations([-2, 0, 3, 8, 11])])
def test_sort_five_sorts_every_permutation(values):
    stacks = Stacks(values)
    sort_five(stacks)
    assert stacks.a_values() == [-2, 0, 3, 8, 11]
    assert stacks.b_values() == []
    assert _replay(values, stacks.operations).a_values() == [-2, 0, 3, 8, 11]


def test_sort_five_sorted_input_needs_no_operation():
    stacks = Stacks([1, 2, 3, 4, 5])
    sort_five(stacks)
    assert stacks.operations == []


def test_sort_five_top_pair_swapped_needs_one_swap():
    stacks = Stacks([2, 1, 3, 4, 5])
    sort_five(stacks)
    assert len(stacks.operations) == 1
    assert stacks.a_values() == [1, 2, 3, 4, 5]


def test_sort_five_keeps_elements():
    values = [4, 5, 1, 2, 3]
    stacks = Stacks(values)
    sort_five(stacks)
    assert sorted(stacks.a_values()) == sorted(values)
    assert stacks.operations.count("pb") == stacks.operations.count("pa")