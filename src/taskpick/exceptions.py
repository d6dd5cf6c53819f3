"""Custom exceptions for taskpick."""

from __future__ import annotations

from collections.abc import Iterable


class TaskpickError(Exception):
    """Base exception for all taskpick errors."""

    pass


class ValidationError(TaskpickError):
    """Raised when validation fails."""

    pass


class CircularDependencyError(ValidationError):
    """Raised when the dependency graph has no valid execution order.

    Attributes:
        blocked_ids: Task IDs that could never become ready, sorted ascending
    """

    def __init__(self, blocked_ids: Iterable[int]):
        self.blocked_ids = sorted(blocked_ids)
        ids = ", ".join(str(task_id) for task_id in self.blocked_ids)
        super().__init__(f"Cycle detected: no valid task order (blocked tasks: {ids})")


class InvalidBudgetError(ValidationError):
    """Raised when a time budget is negative or exceeds the configured limit."""

    pass


class ParseError(TaskpickError):
    """Raised when YAML parsing fails."""

    pass
