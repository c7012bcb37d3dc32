import pytest

from textscan.scanning.substrings import SubstringMatch, find_matches, find_positions, iter_positions


@pytest.mark.parametrize(
    "text, patterns, expected",
    [
        ("aaa", ["aa"], [[0, 1]]),
        ("aaaa", ["aa"], [[0, 1, 2]]),
        ("abcabc", ["abc", "bc", "x"], [[0, 3], [1, 4], []]),
        ("Abc abc", ["abc"], [[4]]),
        ("abc", ["abcd"], [[]]),
        ("abc", [""], [[]]),
        ("", ["a", ""], [[], []]),
        ("abab", ["ab", "ab"], [[0, 2], [0, 2]]),
        ("héllo héllo", ["llo"], [[2, 8]]),
        ("abc", [], []),
    ],
)
def test_find_positions(text: str, patterns: list[str], expected: list[list[int]]) -> None:
    assert find_positions(text, patterns) == expected


def test_positions_are_exact_and_complete() -> None:
    text = "abababa, babab"
    pattern = "aba"
    positions = find_positions(text, [pattern])[0]
    assert positions
    for position in positions:
        assert text[position:position + len(pattern)] == pattern
    for left, right in zip(positions, positions[1:]):
        for between in range(left + 1, right):
            assert not text.startswith(pattern, between)


def test_patterns_accept_any_iterable() -> None:
    assert find_positions("xyxy", (p for p in ["y"])) == [[1, 3]]


def test_character_sequence_input() -> None:
    assert find_positions(list("banana"), ["ana"]) == [[1, 3]]


def test_find_matches_groups_by_pattern_then_position() -> None:
    matches = find_matches("banana", ["na", "an"])
    assert matches == [
        SubstringMatch(position=2, pattern="na"),
        SubstringMatch(position=4, pattern="na"),
        SubstringMatch(position=1, pattern="an"),
        SubstringMatch(position=3, pattern="an"),
    ]


def test_iter_positions_yields_overlaps() -> None:
    assert list(iter_positions("ooo", "oo")) == [0, 1]
    assert list(iter_positions("ooo", "")) == []


def test_single_string_patterns_rejected() -> None:
    with pytest.raises(TypeError):
        find_positions("abc", "ab")
    with pytest.raises(TypeError):
        find_matches("abc", ["a", 1])
