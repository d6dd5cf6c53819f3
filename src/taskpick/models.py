"""Data models for taskpick."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field


def _freeze_ids(ids: Iterable[int]) -> frozenset[int]:
    return frozenset(int(task_id) for task_id in ids)


@dataclass(frozen=True)
class Task:
    """A unit of work competing for the time budget.

    Tasks are immutable once built. ``dependencies`` may name IDs that are not
    part of the task set; those are treated as already satisfied by ordering.
    """

    id: int
    duration: int
    priority: int
    dependencies: frozenset[int] = field(default_factory=frozenset)
    name: str | None = None

    def __post_init__(self) -> None:
        # Accept any iterable of IDs from callers but always store a frozenset
        if not isinstance(self.dependencies, frozenset):
            object.__setattr__(self, "dependencies", _freeze_ids(self.dependencies))

    @property
    def ratio(self) -> float:
        """Priority per unit of duration.

        Zero-duration tasks cost nothing, so they rank above every task
        that does cost time.
        """
        if self.duration == 0:
            return math.inf
        return self.priority / self.duration

    @property
    def label(self) -> str:
        return self.name or f"Task {self.id}"

    @property
    def sorted_dependencies(self) -> list[int]:
        return sorted(self.dependencies)


def number_tasks(
    rows: Iterable[tuple[int, int] | tuple[int, int, Iterable[int]]],
) -> list[Task]:
    """Build tasks from ``(duration, priority[, dependencies])`` rows.

    IDs are assigned 1-based in row order, the same way the input
    collectors (YAML files and interactive prompts) number tasks.
    """
    tasks: list[Task] = []
    for index, row in enumerate(rows, 1):
        duration, priority, *rest = row
        dependencies = rest[0] if rest else ()
        tasks.append(
            Task(
                id=index,
                duration=duration,
                priority=priority,
                dependencies=frozenset(dependencies),
            )
        )
    return tasks


@dataclass
class TaskSet:
    """An ordered batch of tasks plus the budget given alongside them."""

    tasks: list[Task]
    max_time: int | None = None

    def get_all_ids(self) -> set[int]:
        return {task.id for task in self.tasks}

    def get_unknown_dependencies(self) -> dict[int, list[int]]:
        """Map task ID to the dependency IDs that name no task in this set."""
        known = self.get_all_ids()
        unknown: dict[int, list[int]] = {}
        for task in self.tasks:
            missing = [dep_id for dep_id in task.sorted_dependencies if dep_id not in known]
            if missing:
                unknown[task.id] = missing
        return unknown

    def __len__(self) -> int:
        return len(self.tasks)


def sum_durations(tasks: Sequence[Task]) -> int:
    return sum(task.duration for task in tasks)


def sum_priorities(tasks: Sequence[Task]) -> int:
    return sum(task.priority for task in tasks)
