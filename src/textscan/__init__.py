"""textscan – deterministic scanning primitives for digits, integers and substrings."""

from ._version import __version__

__all__ = [
    "__version__",
    "cli",
    "config",
    "scanning",
    "utils",
]
