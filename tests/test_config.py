import logging
from pathlib import Path

import pytest

from textscan.config import ScanSettings, get_settings, reset_settings


def test_defaults() -> None:
    settings = get_settings()
    assert settings == ScanSettings(log_path=None, log_level=logging.INFO, output_indent=2)
    assert settings.as_dict() == {"log_path": None, "log_level": "INFO", "output_indent": 2}


def test_settings_are_cached_until_refresh(monkeypatch) -> None:
    first = get_settings()
    monkeypatch.setenv("TEXTSCAN_OUTPUT_INDENT", "4")
    assert get_settings() is first
    assert get_settings(refresh=True).output_indent == 4


def test_environment_overrides(monkeypatch, tmp_path: Path) -> None:
    monkeypatch.setenv("TEXTSCAN_LOG_PATH", str(tmp_path / "scan.jsonl"))
    monkeypatch.setenv("TEXTSCAN_LOG_LEVEL", "debug")
    monkeypatch.setenv("TEXTSCAN_OUTPUT_INDENT", "0")
    settings = get_settings(refresh=True)
    assert settings.log_path == (tmp_path / "scan.jsonl").resolve()
    assert settings.log_level == logging.DEBUG
    assert settings.output_indent == 0


def test_toml_file_relative_paths(tmp_path: Path) -> None:
    config = tmp_path / "textscan.toml"
    config.write_text(
        '[logging]\npath = "logs/events.jsonl"\nlevel = "WARNING"\n\n[output]\nindent = 1\n',
        encoding="utf-8",
    )
    settings = get_settings(config_file=config)
    assert settings.log_path == (tmp_path / "logs" / "events.jsonl").resolve()
    assert settings.log_level == logging.WARNING
    assert settings.output_indent == 1


def test_yaml_file_from_environment(monkeypatch, tmp_path: Path) -> None:
    config = tmp_path / "textscan.yaml"
    config.write_text("logging:\n  level: ERROR\noutput:\n  indent: 3\n", encoding="utf-8")
    monkeypatch.setenv("TEXTSCAN_CONFIG_FILE", str(config))
    reset_settings()
    settings = get_settings()
    assert settings.log_level == logging.ERROR
    assert settings.output_indent == 3
    assert settings.log_path is None


def test_environment_wins_over_file(monkeypatch, tmp_path: Path) -> None:
    config = tmp_path / "textscan.yml"
    config.write_text("output:\n  indent: 3\n", encoding="utf-8")
    monkeypatch.setenv("TEXTSCAN_OUTPUT_INDENT", "5")
    assert get_settings(config_file=config).output_indent == 5


def test_empty_yaml_uses_defaults(tmp_path: Path) -> None:
    config = tmp_path / "empty.yaml"
    config.write_text("", encoding="utf-8")
    assert get_settings(config_file=config).output_indent == 2


@pytest.mark.parametrize(
    "name, content, error",
    [
        ("textscan.ini", "[logging]\n", ValueError),
        ("bad-level.toml", '[logging]\nlevel = "LOUD"\n', ValueError),
        ("bad-indent.toml", "[output]\nindent = -1\n", ValueError),
    ],
)
def test_invalid_files(tmp_path: Path, name: str, content: str, error) -> None:
    config = tmp_path / name
    config.write_text(content, encoding="utf-8")
    with pytest.raises(error):
        get_settings(config_file=config)


def test_missing_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        get_settings(config_file=tmp_path / "missing.toml")
