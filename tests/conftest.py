"""Pytest configuration and fixtures for taskpick tests."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from pathlib import Path
from typing import Any

import pytest
import yaml

from taskpick.context import reset_context
from taskpick.logger import reset_logger


@pytest.fixture(autouse=True)
def clean_global_state() -> Iterator[None]:
    """Reset the logger and CLI context after each test for isolation."""
    yield
    reset_logger()
    reset_context()


@pytest.fixture
def write_yaml(tmp_path: Path) -> Callable[..., Path]:
    """Factory that dumps data to a YAML file under tmp_path."""

    def _write(data: Any, name: str = "tasks.yaml") -> Path:
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(yaml.safe_dump(data), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def example_task_file(write_yaml: Callable[..., Path]) -> Path:
    """Three-task file used across CLI tests (a chain 1 -> 2 -> 3)."""
    return write_yaml(
        {
            "max_time": 5,
            "tasks": [
                {"name": "Design", "duration": 2, "priority": 3},
                {"name": "Build", "duration": 3, "priority": 4, "dependencies": [1]},
                {"name": "Ship", "duration": 4, "priority": 5, "dependencies": [1, 2]},
            ],
        }
    )
