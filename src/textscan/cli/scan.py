"""CLI commands exposing the scanning primitives."""
from __future__ import annotations

import json
import logging
from enum import Enum
from typing import Any, Callable, Dict, List, Optional

import typer

from ..config import get_settings
from ..scanning import digits as digit_ops
from ..scanning import integers as integer_ops
from ..scanning.integers import IntegerOverflowError
from ..scanning.substrings import find_matches, find_positions
from ..utils.logging import configure_json_logger, flush_handlers, log_event

__all__ = ["digits_command", "find_command", "ints_command"]


class Reduction(str, Enum):
    max = "max"
    min = "min"
    first = "first"
    last = "last"


_DIGIT_REDUCTIONS: Dict[Reduction, Callable[[str], Optional[int]]] = {
    Reduction.max: digit_ops.max_digit,
    Reduction.min: digit_ops.min_digit,
    Reduction.first: digit_ops.first_digit,
    Reduction.last: digit_ops.last_digit,
}

_INTEGER_REDUCTIONS: Dict[Reduction, Callable[[str], Optional[int]]] = {
    Reduction.max: integer_ops.max_integer,
    Reduction.min: integer_ops.min_integer,
    Reduction.first: integer_ops.first_integer,
    Reduction.last: integer_ops.last_integer,
}

_INDEX_HELP = "Return only the N-th value found (0-based)."
_POSITION_HELP = "Return only the value at this character offset."
_REDUCE_HELP = "Collapse the values with a reduction."


def _check_selectors(index: Optional[int], position: Optional[int], reduce: Optional[Reduction]) -> None:
    selectors = (("--index", index), ("--position", position), ("--reduce", reduce))
    chosen = [name for name, value in selectors if value is not None]
    if len(chosen) > 1:
        raise typer.BadParameter(f"Options {', '.join(chosen)} are mutually exclusive")


def _run(command: str, text: str, build: Callable[[], Dict[str, Any]]) -> None:
    settings = get_settings()
    logger = configure_json_logger(settings.log_path, level=settings.log_level)
    trace_id = log_event(logger, "scan.start", command=command, length=len(text))
    try:
        payload = build()
    except IntegerOverflowError as exc:
        log_event(
            logger,
            "scan.failed",
            trace_id=trace_id,
            level=logging.ERROR,
            command=command,
            run=exc.run,
            start=exc.start,
        )
        flush_handlers(logger)
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=1) from exc

    log_event(logger, "scan.completed", trace_id=trace_id, command=command)
    flush_handlers(logger)
    typer.echo(json.dumps(payload, indent=settings.output_indent or None, ensure_ascii=False))


def digits_command(
    text: str = typer.Argument(..., help="Text to scan."),
    index: Optional[int] = typer.Option(None, "--index", help=_INDEX_HELP),
    position: Optional[int] = typer.Option(None, "--position", help=_POSITION_HELP),
    reduce: Optional[Reduction] = typer.Option(None, "--reduce", help=_REDUCE_HELP),
) -> None:
    """Print the single digits found in TEXT."""

    _check_selectors(index, position, reduce)

    def build() -> Dict[str, Any]:
        if index is not None:
            return {"index": index, "value": digit_ops.digit_at_logical_index(text, index)}
        if position is not None:
            return {"position": position, "value": digit_ops.digit_at_character_position(text, position)}
        if reduce is not None:
            return {"reduce": reduce.value, "value": _DIGIT_REDUCTIONS[reduce](text)}
        return {"digits": digit_ops.extract_all_digits(text)}

    _run("digits", text, build)


def ints_command(
    text: str = typer.Argument(..., help="Text to scan."),
    index: Optional[int] = typer.Option(None, "--index", help=_INDEX_HELP),
    position: Optional[int] = typer.Option(None, "--position", help=_POSITION_HELP),
    reduce: Optional[Reduction] = typer.Option(None, "--reduce", help=_REDUCE_HELP),
) -> None:
    """Print the integers formed by consecutive digits in TEXT."""

    _check_selectors(index, position, reduce)

    def build() -> Dict[str, Any]:
        if index is not None:
            return {"index": index, "value": integer_ops.nth_integer(text, index)}
        if position is not None:
            return {"position": position, "value": integer_ops.integer_at_position(text, position)}
        if reduce is not None:
            return {"reduce": reduce.value, "value": _INTEGER_REDUCTIONS[reduce](text)}
        return {"integers": integer_ops.extract_all_integers(text)}

    _run("ints", text, build)


def find_command(
    text: str = typer.Argument(..., help="Text to search."),
    patterns: List[str] = typer.Argument(..., help="Literal patterns to locate."),
    flat: bool = typer.Option(False, "--flat", help="Emit one record per match instead of grouping by pattern."),
) -> None:
    """Print every (overlapping) start offset of each PATTERN in TEXT."""

    def build() -> Dict[str, Any]:
        if flat:
            return {
                "matches": [
                    {"position": match.position, "pattern": match.pattern} for match in find_matches(text, patterns)
                ]
            }
        return {
            "patterns": [
                {"pattern": pattern, "positions": positions}
                for pattern, positions in zip(patterns, find_positions(text, patterns))
            ]
        }

    _run("find", text, build)
