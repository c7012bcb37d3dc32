"""Extract single decimal digits from text.

Every digit character is handled on its own, so ``"123ab456"`` yields
``[1, 2, 3, 4, 5, 6]``. See :mod:`textscan.scanning.integers` for grouping
consecutive digits into numbers.
"""
from __future__ import annotations

from typing import Iterator, List, Optional

from ._text import TextLike, as_text, is_decimal_digit

__all__ = [
    "digit_at_character_position",
    "digit_at_logical_index",
    "extract_all_digits",
    "first_digit",
    "iter_digits",
    "last_digit",
    "max_digit",
    "min_digit",
]


def iter_digits(text: TextLike) -> Iterator[int]:
    """Yield the value of each decimal digit in ``text`` in encounter order."""

    for char in as_text(text):
        if is_decimal_digit(char):
            yield ord(char) - ord("0")


def extract_all_digits(text: TextLike) -> List[int]:
    """Return every digit in ``text``; an empty list when there is none."""

    return list(iter_digits(text))


def digit_at_logical_index(text: TextLike, n: int) -> Optional[int]:
    """Return the ``n``-th digit found in ``text`` (0-based), counting digits only."""

    if n < 0:
        return None
    for index, digit in enumerate(iter_digits(text)):
        if index == n:
            return digit
    return None


def digit_at_character_position(text: TextLike, pos: int) -> Optional[int]:
    """Return the digit at character offset ``pos``.

    Unlike :func:`digit_at_logical_index` this is positional: ``None`` is
    returned when the character at ``pos`` is not a digit or ``pos`` is out of
    range.
    """

    value = as_text(text)
    if pos < 0 or pos >= len(value):
        return None
    char = value[pos]
    if not is_decimal_digit(char):
        return None
    return ord(char) - ord("0")


def max_digit(text: TextLike) -> Optional[int]:
    return max(iter_digits(text), default=None)


def min_digit(text: TextLike) -> Optional[int]:
    return min(iter_digits(text), default=None)


def first_digit(text: TextLike) -> Optional[int]:
    return next(iter_digits(text), None)


def last_digit(text: TextLike) -> Optional[int]:
    digits = extract_all_digits(text)
    return digits[-1] if digits else None
