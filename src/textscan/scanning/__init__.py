"""Scanning primitives for digits, integers and literal substrings."""

from .digits import (
    digit_at_character_position,
    digit_at_logical_index,
    extract_all_digits,
    first_digit,
    iter_digits,
    last_digit,
    max_digit,
    min_digit,
)
from .integers import (
    INT32_MAX,
    INT32_MIN,
    DigitRun,
    IntegerOverflowError,
    extract_all_integers,
    first_integer,
    integer_at_position,
    iter_integer_runs,
    iter_integers,
    last_integer,
    max_integer,
    min_integer,
    nth_integer,
)
from .substrings import SubstringMatch, find_matches, find_positions, iter_positions

__all__ = [
    "INT32_MAX",
    "INT32_MIN",
    "DigitRun",
    "IntegerOverflowError",
    "SubstringMatch",
    "digit_at_character_position",
    "digit_at_logical_index",
    "extract_all_digits",
    "extract_all_integers",
    "find_matches",
    "find_positions",
    "first_digit",
    "first_integer",
    "integer_at_position",
    "iter_digits",
    "iter_integer_runs",
    "iter_integers",
    "iter_positions",
    "last_digit",
    "last_integer",
    "max_digit",
    "max_integer",
    "min_digit",
    "min_integer",
    "nth_integer",
]
