"""Tokenise runs of consecutive digits into 32-bit signed integers.

Consecutive digits are parsed into a single integer, so ``"123ab456"`` yields
``[123, 456]``. A run that does not fit into a signed 32-bit integer raises
:class:`IntegerOverflowError` and aborts the whole call; every function in this
module, including :func:`integer_at_position`, applies the same policy.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterator, List, Optional

from ._text import TextLike, as_text, is_decimal_digit

__all__ = [
    "INT32_MAX",
    "INT32_MIN",
    "DigitRun",
    "IntegerOverflowError",
    "extract_all_integers",
    "first_integer",
    "integer_at_position",
    "iter_integer_runs",
    "iter_integers",
    "last_integer",
    "max_integer",
    "min_integer",
    "nth_integer",
]

LOGGER = logging.getLogger(__name__)

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1


class IntegerOverflowError(ValueError):
    """Raised when a digit run cannot be represented as a 32-bit signed integer."""

    def __init__(self, run: str, start: int):
        self.run = run
        self.start = start
        super().__init__(f"Digit run {run!r} at position {start} does not fit into a 32-bit signed integer")


@dataclass(frozen=True)
class DigitRun:
    """Maximal run of digits and its parsed value."""

    value: int
    raw: str
    start: int
    end: int


def _parse_run(raw: str, start: int) -> int:
    value = int(raw)
    if value > INT32_MAX:
        LOGGER.debug("integers.overflow", extra={"run": raw, "start": start})
        raise IntegerOverflowError(raw, start)
    return value


def iter_integer_runs(text: TextLike) -> Iterator[DigitRun]:
    """Yield every maximal digit run in ``text`` with its offsets."""

    value = as_text(text)
    start: Optional[int] = None
    for index, char in enumerate(value):
        if is_decimal_digit(char):
            if start is None:
                start = index
        elif start is not None:
            raw = value[start:index]
            yield DigitRun(value=_parse_run(raw, start), raw=raw, start=start, end=index)
            start = None

    # A run can reach the end of the input.
    if start is not None:
        raw = value[start:]
        yield DigitRun(value=_parse_run(raw, start), raw=raw, start=start, end=len(value))


def iter_integers(text: TextLike) -> Iterator[int]:
    for run in iter_integer_runs(text):
        yield run.value


def extract_all_integers(text: TextLike) -> List[int]:
    """Return the integers formed by each digit run of ``text``, in order."""

    return list(iter_integers(text))


def nth_integer(text: TextLike, n: int) -> Optional[int]:
    """Return the ``n``-th integer (0-based) or ``None`` when out of range.

    The whole text is tokenised first, so an overflowing run anywhere in
    ``text`` raises even when ``n`` addresses an earlier integer.
    """

    integers = extract_all_integers(text)
    if 0 <= n < len(integers):
        return integers[n]
    return None


def integer_at_position(text: TextLike, pos: int) -> Optional[int]:
    """Return the integer whose digit run covers character offset ``pos``.

    ``None`` is returned when ``pos`` is outside ``text`` or the character at
    ``pos`` is not a digit.
    """

    value = as_text(text)
    if pos < 0 or pos >= len(value) or not is_decimal_digit(value[pos]):
        return None

    start = pos
    while start > 0 and is_decimal_digit(value[start - 1]):
        start -= 1

    end = pos + 1
    while end < len(value) and is_decimal_digit(value[end]):
        end += 1

    return _parse_run(value[start:end], start)


def max_integer(text: TextLike) -> Optional[int]:
    return max(extract_all_integers(text), default=None)


def min_integer(text: TextLike) -> Optional[int]:
    return min(extract_all_integers(text), default=None)


def first_integer(text: TextLike) -> Optional[int]:
    return nth_integer(text, 0)


def last_integer(text: TextLike) -> Optional[int]:
    integers = extract_all_integers(text)
    return integers[-1] if integers else None
