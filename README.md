# pushswap

Sort a list of distinct integers using only the operations of the push_swap
puzzle. The integers go onto stack `a`, with the first one on top, and stack
`b` begins empty. The program prints the moves its strategies perform to put
`a` in ascending order, smallest on top.

The operations are:

| move  | effect                                             |
|-------|----------------------------------------------------|
| `sa`  | swap the top two elements of `a`                   |
| `sb`  | swap the top two elements of `b`                   |
| `ss`  | `sa` and `sb` at once                              |
| `pa`  | move the top of `b` onto `a`                       |
| `pb`  | move the top of `a` onto `b`                       |
| `ra`  | rotate `a` up, so the first element becomes last   |
| `rb`  | rotate `b` up                                      |
| `rr`  | `ra` and `rb` at once                              |
| `rra` | rotate `a` down, so the last element becomes first |
| `rrb` | rotate `b` down                                    |
| `rrr` | `rra` and `rrb` at once                            |

`sa` and `sb` do nothing, and are not recorded, when the stack holds fewer
than two elements.

## Installation

```
pip install .
```

## Command line

Pass the numbers as separate arguments, or as a single argument separated by
spaces:

```
push_swap 3 1 2
push_swap "5 4 3 2 1"
```

Each move is printed on its own line and the exit status is 0. When the input
is rejected, the program prints `Error` and exits with status 1. Input is
rejected when:

- there are no arguments;
- an argument is not a whole number, that is, an optional leading `-` followed
  by digits (a lone `-` is rejected);
- the same argument text appears more than once (the comparison is on the text,
  so `01` and `1` count as different);
- a number lies outside the 32-bit signed range.

A single argument is split on spaces only when it contains nothing but digits,
spaces and minus signs and has a space after its first character.

The strategy depends on how many numbers there are:

- one number: no moves;
- two, three or five: fixed move sequences, with no moves when the input is
  already sorted;
- four: one number is set aside on `b`, the other three are sorted and it is
  slotted back, so even sorted input produces moves;
- six or more: the numbers are ranked and moved through `b` in blocks of
  consecutive ranks; sorted input produces no moves.

## Library

```python
from pushswap.cli import solve
from pushswap.stacks import Stacks

moves = solve([3, 1, 2])        # list of move names, in order

stacks = Stacks([2, 1, 3])
stacks.sa()
stacks.a_values()               # [1, 2, 3]
stacks.operations               # ["sa"]
```

- `pushswap.stacks` has `Stacks`, which holds both stacks (`a` and `b`, deques
  of `Element`), provides one method per move, and records each move in
  `operations`. `a_values()` and `b_values()` list the numbers from top to
  bottom.
- `pushswap.parsing.parse_arguments` checks command-line style strings and
  returns the integers; it raises `pushswap.parsing.InputError` (a
  `ValueError`) when the input is invalid. The separate checks
  `check_input`, `check_spaces` and `additional_rules`, and the helpers `atoi`
  and `split_words`, are available too.
- `pushswap.small` has `sort_two`, `sort_three`, `sort_four` and `sort_five`.
- `pushswap.large` has `sort_large`, the block strategy used for six or more
  numbers, and `sort_insertion`, a simpler strategy that inserts every number
  into `b` kept in descending order and then pushes them all back. The command
  does not use `sort_insertion`.
- `pushswap.cli` has `push_swap(stacks)`, which picks the strategy by size,
  `solve(values)` and `main(argv=None)`, the command's entry point.

## What it does not do

There is no checker: the package produces moves but has no command that reads
a list of moves and verifies that they sort the input.

## Tests

```
pip install .[test]
pytest
```