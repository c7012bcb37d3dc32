"""Locate every occurrence of literal patterns inside a text."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, List, Sequence

from ._text import TextLike, as_text

__all__ = ["SubstringMatch", "find_matches", "find_positions", "iter_positions"]


@dataclass(frozen=True)
class SubstringMatch:
    """Occurrence of ``pattern`` starting at character offset ``position``."""

    position: int
    pattern: str


def _check_patterns(patterns: Iterable[str]) -> Sequence[str]:
    if isinstance(patterns, str):
        raise TypeError("patterns must be a collection of strings, not a single string")
    checked = list(patterns)
    for pattern in checked:
        if not isinstance(pattern, str):
            raise TypeError(f"Pattern {pattern!r} is not a string")
    return checked


def _iter_positions(value: str, pattern: str) -> Iterator[int]:
    if not pattern:
        return
    cursor = 0
    while True:
        found = value.find(pattern, cursor)
        if found == -1:
            return
        yield found
        # Resume one past the match start so overlapping occurrences are kept.
        cursor = found + 1


def iter_positions(text: TextLike, pattern: str) -> Iterator[int]:
    """Yield every start offset of ``pattern`` in ``text``, overlaps included."""

    return _iter_positions(as_text(text), pattern)


def find_positions(text: TextLike, patterns: Iterable[str]) -> List[List[int]]:
    """Return the start offsets of each pattern, one list per input pattern.

    Output order follows ``patterns``; duplicated patterns get duplicated
    lists. Matching is exact and case-sensitive, and an empty pattern never
    matches.

    >>> find_positions("aaa", ["aa", "b"])
    [[0, 1], []]
    """

    value = as_text(text)
    return [list(_iter_positions(value, pattern)) for pattern in _check_patterns(patterns)]


def find_matches(text: TextLike, patterns: Iterable[str]) -> List[SubstringMatch]:
    """Return flat match records grouped by pattern, then by ascending position."""

    value = as_text(text)
    return [
        SubstringMatch(position=position, pattern=pattern)
        for pattern in _check_patterns(patterns)
        for position in _iter_positions(value, pattern)
    ]
