"""YAML parser for taskpick task files."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError as PydanticValidationError

from .exceptions import ParseError, ValidationError
from .models import Task, TaskSet
from .schemas import TaskFileSchema


class TaskFileParser:
    """Parser for task YAML files.

    Only handles YAML parsing and task creation. Use load_task_set() from
    taskpick.loader for config discovery and budget checks.
    """

    def parse_file(self, file_path: Path | str) -> TaskSet:
        """Parse a YAML file into a TaskSet."""
        path = Path(file_path)
        if not path.exists():
            raise ParseError(f"File not found: {file_path}")

        try:
            with path.open(encoding="utf-8") as f:
                data: Any = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ParseError(f"Failed to parse YAML: {e}") from e

        if not isinstance(data, dict):
            raise ParseError("YAML must contain a dictionary at the root level")

        return self.parse_data(data)  # type: ignore[arg-type]

    def parse_data(self, data: dict[str, Any]) -> TaskSet:
        """Turn already-loaded YAML data into a TaskSet."""
        try:
            schema = TaskFileSchema(**data)
        except PydanticValidationError as e:
            raise ValidationError(f"Invalid YAML structure: {e}") from e

        tasks = [
            Task(
                id=index,
                duration=entry.duration,
                priority=entry.priority,
                dependencies=frozenset(entry.dependencies),
                name=entry.name,
            )
            for index, entry in enumerate(schema.tasks, 1)
        ]
        return TaskSet(tasks=tasks, max_time=schema.max_time)
