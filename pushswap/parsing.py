"""Validation of the command-line numbers."""

from __future__ import annotations

import re
import string
from typing import Iterable, List

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

_LEADING_INTEGER = re.compile(r"[+-]?\d+")


class InputError(ValueError):
    """The numbers given are malformed, out of range or repeated."""


def _check_characters(text: str) -> None:
    for char, following in zip(text, text[1:] + " "):
        if char in string.digits or char == " ":
            continue
        if char in "+-" and following in string.digits:
            continue
        raise InputError(f"invalid character {char!r} in input")


def _leading_integer(word: str) -> int:
    match = _LEADING_INTEGER.match(word)
    if match is None:
        raise InputError(f"not a number: {word!r}")
    return int(match.group())


def parse_arguments(args: Iterable[str]) -> List[int]:
    """Turn the arguments into a list of distinct 32-bit integers.

    Arguments may each hold several numbers separated by spaces.
    Raises InputError when the input is empty, holds anything other than
    digits, signs and spaces, repeats a number or leaves the int range.
    """
    text = " ".join(args)
    _check_characters(text)
    words = [word for word in text.split(" ") if word]
    numbers = [_leading_integer(word) for word in words]
    if len(set(numbers)) != len(numbers):
        raise InputError("duplicate numbers in input")
    if not numbers:
        raise InputError("no numbers given")
    for number in numbers:
        if not INT_MIN <= number <= INT_MAX:
            raise InputError(f"number out of range: {number}")
    return numbers