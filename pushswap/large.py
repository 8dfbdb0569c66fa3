"""Strategies for six or more numbers: chunked ranking and plain insertion."""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Iterable, Sequence

from pushswap.stacks import Element, Stacks


def _indices(stack: Iterable[Element]) -> list[int]:
    return [element.index for element in stack]


def is_ordered(values: Iterable[int]) -> bool:
    """Whether the values never decrease from first to last."""
    items = list(values)
    return all(low <= high for low, high in zip(items, items[1:]))


def assign_indices(stacks: Stacks) -> None:
    """Give every element of ``a`` its rank: 1 for the smallest number."""
    ranking = sorted(stacks.a_values())
    for element in stacks.a:
        element.index = bisect_left(ranking, element.content) + 1


def lowest_stack(indices: Sequence[int], lower: int) -> int:
    """Length of the shortest prefix whose ranks are exactly the next ones after ``lower``.

    A prefix of length ``k`` qualifies when all its ranks lie in
    ``lower + 1 .. lower + k``. When no prefix does, the full length is returned.
    """
    for size in range(1, len(indices) + 1):
        if all(lower < index <= lower + size for index in indices[:size]):
            return size
    return len(indices)


def _window(indices: Sequence[int], n: int) -> Sequence[int]:
    return indices if n == 0 else indices[:n]


def highest_index(indices: Sequence[int], n: int) -> int:
    """Largest rank among the first ``n`` (all when ``n`` is 0); never below 0."""
    return max([0, *_window(indices, n)])


def lowest_index(indices: Sequence[int], n: int) -> int:
    """Smallest rank among the first ``n`` (all when ``n`` is 0).

    The result never exceeds the length of the whole sequence.
    """
    return min([len(indices), *_window(indices, n)])


def index_average(indices: Sequence[int], n: int, pass_to_a: bool) -> int:
    """Average rank, truncated, over the first ``n`` ranks.

    With ``pass_to_a`` the whole sequence is averaged and the result is
    rounded up instead. Raises ValueError when nothing is averaged.
    """
    taken = list(indices) if pass_to_a else list(indices[:n])
    if not taken:
        raise ValueError("no ranks to average")
    total = sum(taken)
    quotient, remainder = divmod(abs(total), len(taken))
    average = quotient if total >= 0 else -quotient
    if pass_to_a and remainder:
        average += 1
    return average


def check_index(stacks: Stacks, n: int) -> int:
    """Rotate to the bottom of ``a`` the elements that continue its sorted tail.

    The top element moves down when its rank follows the bottom rank or is
    1; when the second one follows instead, the two are swapped first.
    At most ``n`` elements move, without limit when ``n`` is 0. Returns
    how many moved.
    """
    passed = 0
    while n == 0 or passed < n:
        if not stacks.a:
            break
        last = stacks.last_index_a()
        top = stacks.a[0].index
        if top - 1 == last or top == 1:
            stacks.ra()
        elif len(stacks.a) > 1 and stacks.a[1].index - 1 == last:
            stacks.sa()
            stacks.ra()
        else:
            break
        passed += 1
    return passed


def back_to_start(stacks: Stacks, passed_values: int) -> None:
    """Undo ``passed_values`` upward rotations of ``a`` by the shorter way."""
    size = len(stacks.a)
    if passed_values < size:
        for _ in range(passed_values):
            stacks.rra()
    else:
        for _ in range(size - passed_values):
            stacks.ra()


def send_to_a(stacks: Stacks, passed_values: int) -> int:
    """Bring ``b`` back onto ``a``, upper half of the ranks first.

    The lower half is handled recursively, so the smallest ranks end on
    top of ``a``, where those continuing the sorted tail are rotated into
    it. Returns the updated count of elements placed in the tail.
    Raises ValueError when ``b`` is empty.
    """
    middle = index_average(_indices(stacks.b), 0, True)
    pushed = 0
    for _ in range(len(stacks.b)):
        if stacks.b[0].index >= middle:
            stacks.pa()
            pushed += 1
        else:
            stacks.rb()
    if stacks.b:
        passed_values = send_to_a(stacks, passed_values)
    return passed_values + check_index(stacks, pushed)


def send_to_b(stacks: Stacks, passed_values: int) -> None:
    """Repeatedly split off the next block of ranks until ``a`` is sorted."""
    while not is_ordered(stacks.a_values()):
        indices = _indices(stacks.a)
        lower = stacks.last_index_a() if passed_values else 0
        chunk = lowest_stack(indices, lower)
        middle = index_average(indices, chunk, False)
        rotated = 0
        for _ in range(chunk):
            if stacks.a[0].index <= middle:
                stacks.pb()
            else:
                stacks.ra()
                rotated += 1
        back_to_start(stacks, rotated)
        if stacks.b:
            passed_values = send_to_a(stacks, passed_values)


def sort_large(stacks: Stacks) -> None:
    """Sort ``a`` by ranking its numbers and moving them through ``b`` in blocks."""
    if is_ordered(stacks.a_values()):
        return
    assign_indices(stacks)
    passed_values = check_index(stacks, len(stacks.a))
    send_to_b(stacks, passed_values)


def _insert_into_b(stacks: Stacks) -> None:
    rotations = 0
    while stacks.a[0].content < stacks.b[0].content:
        stacks.rb()
        rotations += 1
    stacks.pb()
    if rotations > len(stacks.b) // 2:
        while len(stacks.b) > rotations:
            stacks.rb()
            rotations += 1
    else:
        for _ in range(rotations):
            stacks.rrb()


def sort_insertion(stacks: Stacks) -> None:
    """Sort ``a`` by inserting every number into ``b`` kept in descending order."""
    if is_ordered(stacks.a_values()):
        return
    stacks.pb()
    stacks.pb()
    if stacks.b[0].content < stacks.b[1].content:
        stacks.sb()
    for _ in range(len(stacks.a)):
        top = stacks.a[0].content
        if top > stacks.b[0].content:
            stacks.pb()
        elif top < min(stacks.b_values()):
            stacks.pb()
            stacks.rb()
        else:
            _insert_into_b(stacks)
    while stacks.b:
        stacks.pa()