"""Protocol definitions for the scheduling system."""

from collections.abc import Sequence
from typing import Protocol

from taskpick.models import Task


class SelectionAlgorithm(Protocol):
    """Chooses a subset of tasks that fits a time budget."""

    def __call__(self, tasks: Sequence[Task], max_time: int) -> tuple[int, list[Task]]:
        """Select tasks.

        Args:
            tasks: Task set in input order
            max_time: Non-negative time budget

        Returns:
            Total priority of the selection and the selected tasks
        """
        ...


class OrderingAlgorithm(Protocol):
    """Produces an execution order that respects dependencies."""

    def __call__(self, tasks: Sequence[Task]) -> list[int]:
        """Order tasks.

        Args:
            tasks: Task set in input order

        Returns:
            Every task ID exactly once, dependencies first

        Raises:
            CircularDependencyError: If no valid order exists
        """
        ...
