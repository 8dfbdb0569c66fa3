"""Validation and parsing of the command-line numbers."""

from __future__ import annotations

from collections.abc import Sequence

_DIGITS = frozenset("0123456789")
_WHITESPACE = frozenset(" \t\n\v\f\r")
_INT_MIN_TEXT = "-2147483648"
_INT_MAX_TEXT = "2147483647"


class InputError(ValueError):
    """Raised when the arguments do not describe a valid list of numbers."""


def atoi(text: str) -> int:
    """Read an optionally signed integer after leading whitespace.

    Reading stops at the first character that is not a digit; a string
    with no digits reads as 0.
    """
    position = 0
    while position < len(text) and text[position] in _WHITESPACE:
        position += 1
    sign = 1
    if position < len(text) and text[position] in "+-":
        if text[position] == "-":
            sign = -1
        position += 1
    value = 0
    while position < len(text) and text[position] in _DIGITS:
        value = value * 10 + int(text[position])
        position += 1
    return sign * value


def split_words(text: str, sep: str) -> list[str]:
    """Split ``text`` on ``sep``, dropping the empty pieces."""
    if sep == "":
        return [text] if text else []
    return [word for word in text.split(sep) if word]


def check_input(args: Sequence[str]) -> bool:
    """Whether every argument is digits with at most a leading minus sign.

    A lone minus sign is rejected, and so is an empty list of arguments.
    """
    if not args:
        return False
    for arg in args:
        for position, char in enumerate(arg):
            if char in _DIGITS:
                continue
            if char != "-" or position != 0:
                return False
            if len(arg) < 2:
                return False
    return True


def check_spaces(args: Sequence[str]) -> bool:
    """Whether the first argument is a space-separated list of numbers.

    It may hold only digits, spaces and minus signs, and must have a
    space somewhere after its first character.
    """
    if not args:
        return False
    text = args[0]
    if any(char not in _DIGITS and char not in " -" for char in text):
        return False
    return " " in text[1:]


def _in_int_range(arg: str) -> bool:
    if arg.startswith("-"):
        limit = _INT_MIN_TEXT
    else:
        limit = _INT_MAX_TEXT
    if len(arg) > len(limit):
        return False
    return not (len(arg) == len(limit) and arg > limit)


def additional_rules(args: Sequence[str]) -> bool:
    """Whether no argument repeats another and all fit in a 32-bit int.

    Repetition is judged on the text, so ``"01"`` and ``"1"`` differ.
    """
    if len(set(args)) != len(args):
        return False
    return all(_in_int_range(arg) for arg in args)


def parse_arguments(args: Sequence[str]) -> list[int]:
    """Turn the command-line arguments into the numbers for stack ``a``.

    A single argument holding spaces is split into several numbers.
    Raises InputError when the arguments are not acceptable.
    """
    words = list(args)
    if len(words) == 1 and check_spaces(words):
        words = split_words(words[0], " ")
    if not check_input(words) or not additional_rules(words):
        raise InputError("invalid arguments")
    return [atoi(word) for word in words]