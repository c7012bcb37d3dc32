"""Input normalisation shared by the scanners."""
from __future__ import annotations

from typing import Sequence, Union

__all__ = ["TextLike", "as_text", "is_decimal_digit"]

TextLike = Union[str, Sequence[str]]


def as_text(text: TextLike) -> str:
    """Return ``text`` as a ``str``, joining character sequences.

    Sequences must contain one-character strings only, so that an index into
    the sequence and an index into the joined string address the same
    character.
    """

    if isinstance(text, str):
        return text
    if isinstance(text, (bytes, bytearray)):
        raise TypeError("textscan operates on characters, not bytes; decode the input first")
    try:
        chars = list(text)
    except TypeError as exc:
        raise TypeError(f"Expected str or a sequence of characters, got {type(text).__name__}") from exc
    for index, char in enumerate(chars):
        if not isinstance(char, str) or len(char) != 1:
            raise TypeError(f"Element {index} is not a single character: {char!r}")
    return "".join(chars)


def is_decimal_digit(char: str) -> bool:
    # ASCII only: str.isdigit() would also accept superscripts and other scripts.
    return "0" <= char <= "9"
