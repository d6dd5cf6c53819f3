"""Process-wide CLI state shared between the typer callback and commands."""

from __future__ import annotations

from pathlib import Path


class _Context:
    """Holds options given once on the command line and read by later stages."""

    def __init__(self) -> None:
        self.config_path: Path | None = None
        self.verbosity: int = 0


_context = _Context()


def get_config_path() -> Path | None:
    """Config file path passed via ``--config``, if any."""
    return _context.config_path


def set_config_path(path: Path | None) -> None:
    _context.config_path = path


def get_verbosity() -> int:
    return _context.verbosity


def set_verbosity(verbosity: int) -> None:
    _context.verbosity = verbosity


def reset_context() -> None:
    """Forget all CLI state. Tests call this between invocations."""
    _context.config_path = None
    _context.verbosity = 0
