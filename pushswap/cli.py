"""Command-line entry point: print the operations that sort the given numbers."""

from __future__ import annotations

import sys
from collections.abc import Callable, Iterable, Sequence

from pushswap.large import sort_large
from pushswap.parsing import InputError, parse_arguments
from pushswap.small import sort_five, sort_four, sort_three, sort_two
from pushswap.stacks import Stacks

_SMALL_STRATEGIES: dict[int, Callable[[Stacks], None]] = {
    2: sort_two,
    3: sort_three,
    4: sort_four,
    5: sort_five,
}


def push_swap(stacks: Stacks) -> None:
    """Sort ``a`` with the strategy suited to its size."""
    size = len(stacks.a)
    if size > 5:
        sort_large(stacks)
    elif size in _SMALL_STRATEGIES:
        _SMALL_STRATEGIES[size](stacks)


def solve(values: Iterable[int]) -> list[str]:
    """Operations that sort ``values``, in the order they are performed."""
    stacks = Stacks(values)
    push_swap(stacks)
    return list(stacks.operations)


def main(argv: Sequence[str] | None = None) -> int:
    """Print one operation per line; print ``Error`` and return 1 on bad input."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        values = parse_arguments(args)
    except InputError:
        print("Error")
        return 1
    for operation in solve(values):
        print(operation)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())