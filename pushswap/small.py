"""Fixed strategies for stacks of two to five numbers."""

from __future__ import annotations

from pushswap.stacks import Stacks


def sort_two(stacks: Stacks) -> None:
    """Sort the two numbers on ``a``."""
    if stacks.a[0].content > stacks.a[1].content:
        stacks.sa()


def sort_three(stacks: Stacks) -> None:
    """Sort the three numbers on ``a``."""
    first, second, third = (element.content for element in list(stacks.a)[:3])
    if second > first > third:
        stacks.rra()
    elif first > third > second:
        stacks.ra()
    elif first > second > third:
        stacks.ra()
        stacks.sa()
    elif third > first > second:
        stacks.sa()
    elif second > third > first:
        stacks.rra()
        stacks.sa()


def is_biggest(stacks: Stacks, value: int) -> bool:
    """Whether ``value`` exceeds each of the top three numbers of ``a``."""
    return all(value > element.content for element in list(stacks.a)[:3])


def ordered_five(stacks: Stacks) -> int:
    """Classify five numbers on ``a``.

    Returns 1 when they are already sorted, 2 when only the top two are
    out of order, and 0 otherwise.
    """
    values = stacks.a_values()[:5]
    rest_sorted = all(low < high for low, high in zip(values[2:], values[3:]))
    if values[0] < values[1] < values[2] and rest_sorted:
        return 1
    if values[1] < values[0] < values[2] and rest_sorted:
        return 2
    return 0


def sort_four(stacks: Stacks) -> None:
    """Sort four numbers: set one aside, sort three, then slot it back in."""
    stacks.pb()
    sort_three(stacks)
    rotations = 0
    pushed = stacks.b[0].content
    if not is_biggest(stacks, pushed):
        while pushed > stacks.a[0].content:
            rotations += 1
            stacks.ra()
    stacks.pa()
    for _ in range(rotations):
        stacks.rra()
    if stacks.a[0].content > stacks.a[1].content:
        stacks.ra()


def sort_five(stacks: Stacks) -> None:
    """Sort five numbers: set two aside, sort three, then merge them back."""
    order = ordered_five(stacks)
    if order == 1:
        return
    if order == 2:
        stacks.sa()
        return
    stacks.pb()
    stacks.pb()
    sort_three(stacks)
    if stacks.b[0].content < stacks.b[1].content:
        stacks.sb()
    if is_biggest(stacks, stacks.b[0].content):
        stacks.pa()
        stacks.ra()
    else:
        stacks.sb()
    rotations = 0
    while stacks.b:
        if stacks.b[0].content < stacks.a[0].content:
            stacks.pa()
        stacks.ra()
        rotations += 1
    while rotations < 5:
        stacks.ra()
        rotations += 1