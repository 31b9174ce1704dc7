"""Verbose, warning, error and log lines written to stdout.

Every function is a no-op unless ``settings.verbose`` is set.
"""

from __future__ import annotations

from zinc.config import Settings

_RESET = "\033[0m"
_PURPLE = "\033[35m"
_YELLOW = "\033[33m"
_RED = "\033[31m"
_GREEN = "\033[32m"


def _emit(tag: str, color: str, message: str, settings: Settings) -> None:
    if not settings.verbose:
        return
    if settings.no_color:
        print(f"{tag} {message}")
    else:
        print(f"{color}{tag}{_RESET} {message}")


def verbose(message: str, settings: Settings) -> None:
    """Print a ``[VERBOSE]`` line."""
    _emit("[VERBOSE]", _PURPLE, message, settings)


def warn(message: str, settings: Settings) -> None:
    """Print a ``[WARNING]`` line."""
    _emit("[WARNING]", _YELLOW, message, settings)


def err(message: str, settings: Settings) -> None:
    """Print an ``[ERROR]`` line."""
    _emit("[ERROR]", _RED, message, settings)


def log(message: str, settings: Settings) -> None:
    """Print a ``[LOG]`` line."""
    _emit("[LOG]", _GREEN, message, settings)
