"""Centralized runtime settings for textscan.

This module exposes :func:`get_settings` returning the logging and output
options used by the command line front-end. Values can be customized via
environment variables or by pointing ``TEXTSCAN_CONFIG_FILE`` to a TOML/YAML
document with ``[logging]`` and ``[output]`` sections.
"""
from __future__ import annotations

import logging
import os
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml

__all__ = ["ScanSettings", "get_settings", "reset_settings"]

_CONFIG_CACHE: Optional["ScanSettings"] = None
_CONFIG_SOURCE: Optional[Path] = None

_DEFAULT_LOG_LEVEL = logging.INFO
_DEFAULT_INDENT = 2


@dataclass(frozen=True)
class ScanSettings:
    """Resolved runtime options."""

    log_path: Optional[Path]
    log_level: int
    output_indent: int

    def as_dict(self) -> Dict[str, Any]:
        """Expose the settings as JSON-friendly values."""

        return {
            "log_path": str(self.log_path) if self.log_path is not None else None,
            "log_level": logging.getLevelName(self.log_level),
            "output_indent": self.output_indent,
        }


def _normalize_path(value: Optional[str | Path], *, base: Optional[Path]) -> Optional[Path]:
    if value is None or value == "":
        return None
    candidate = Path(value).expanduser()
    if not candidate.is_absolute() and base is not None:
        candidate = base / candidate
    return candidate.resolve()


def _parse_level(value: Any) -> int:
    if isinstance(value, int):
        return value
    text = str(value).strip()
    if text.isdigit():
        return int(text)
    level = logging.getLevelName(text.upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {value!r}")
    return level


def _parse_indent(value: Any) -> int:
    try:
        indent = int(value)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"Invalid output indent: {value!r}") from exc
    if indent < 0:
        raise ValueError(f"Output indent must be non-negative, got {indent}")
    return indent


def _load_config_file(path: Path) -> Mapping[str, Any]:
    if not path.exists():
        raise FileNotFoundError(f"Config file '{path}' does not exist")
    suffix = path.suffix.lower()
    if suffix == ".toml":
        with path.open("rb") as handle:
            return tomllib.load(handle)
    if suffix in {".yaml", ".yml"}:
        with path.open("r", encoding="utf-8") as handle:
            loaded = yaml.safe_load(handle)
            return loaded or {}
    raise ValueError(f"Unsupported config file format: '{suffix}'")


def _coalesce_mapping(source: Mapping[str, Any] | None) -> Mapping[str, Any]:
    if not isinstance(source, Mapping):
        return {}
    return source


def _first_set(*values: Any) -> Any:
    for value in values:
        if value is not None and value != "":
            return value
    return None


def _build_settings(config_file: Optional[Path]) -> ScanSettings:
    config_data: Mapping[str, Any] = {}
    config_dir: Optional[Path] = None
    if config_file is not None:
        config_file = _normalize_path(config_file, base=Path.cwd())
        if config_file is not None:
            config_data = _load_config_file(config_file)
            config_dir = config_file.parent

    logging_section = _coalesce_mapping(config_data.get("logging"))
    output_section = _coalesce_mapping(config_data.get("output"))

    env = os.environ

    env_log_path = env.get("TEXTSCAN_LOG_PATH")
    if env_log_path:
        log_path = _normalize_path(env_log_path, base=Path.cwd())
    else:
        log_path = _normalize_path(logging_section.get("path"), base=config_dir)

    raw_level = _first_set(env.get("TEXTSCAN_LOG_LEVEL"), logging_section.get("level"))
    log_level = _parse_level(raw_level) if raw_level is not None else _DEFAULT_LOG_LEVEL

    raw_indent = _first_set(env.get("TEXTSCAN_OUTPUT_INDENT"), output_section.get("indent"))
    output_indent = _parse_indent(raw_indent) if raw_indent is not None else _DEFAULT_INDENT

    return ScanSettings(log_path=log_path, log_level=log_level, output_indent=output_indent)


def get_settings(*, refresh: bool = False, config_file: str | Path | None = None) -> ScanSettings:
    """Return the cached :class:`ScanSettings` configuration.

    Parameters
    ----------
    refresh:
        When ``True`` the cached configuration is discarded and recomputed.
    config_file:
        Optional explicit path to the configuration document. When provided the
        returned instance is not cached globally, allowing callers (e.g. tests)
        to override settings temporarily.
    """

    global _CONFIG_CACHE, _CONFIG_SOURCE

    explicit_path = Path(config_file).expanduser() if config_file is not None else None

    if explicit_path is not None:
        return _build_settings(explicit_path)

    env_path = os.getenv("TEXTSCAN_CONFIG_FILE")
    source_path = Path(env_path).expanduser() if env_path else None

    if refresh or _CONFIG_CACHE is None or _CONFIG_SOURCE != source_path:
        _CONFIG_CACHE = _build_settings(source_path)
        _CONFIG_SOURCE = source_path

    return _CONFIG_CACHE


def reset_settings() -> None:
    """Clear the cached configuration (mainly useful for tests)."""

    global _CONFIG_CACHE, _CONFIG_SOURCE
    _CONFIG_CACHE = None
    _CONFIG_SOURCE = None
