"""Core dataclasses for the scheduling system."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from taskpick.exceptions import InvalidBudgetError
from taskpick.models import Task, sum_durations

from .config import AlgorithmType


def _default_str_list() -> list[str]:
    return []


def _default_selections() -> list[SelectionResult]:
    return []


def require_budget(max_time: int) -> None:
    """Reject budgets the selectors cannot work with.

    Raises:
        InvalidBudgetError: If max_time is negative
    """
    if max_time < 0:
        raise InvalidBudgetError(f"Time budget must be non-negative, got {max_time}")


@dataclass
class SelectionResult:
    """Tasks chosen by a selector under a time budget."""

    algorithm: AlgorithmType
    total_priority: int
    selected: list[Task]
    max_time: int

    @property
    def time_used(self) -> int:
        return sum_durations(self.selected)

    @property
    def efficiency(self) -> float:
        """Priority achieved per time unit used (0.0 when nothing costs time)."""
        used = self.time_used
        return self.total_priority / used if used > 0 else 0.0

    @property
    def selected_ids(self) -> list[int]:
        return [task.id for task in self.selected]

    def unselected(self, tasks: Sequence[Task]) -> list[Task]:
        """Tasks left out of the selection, in input order."""
        chosen = set(self.selected_ids)
        return [task for task in tasks if task.id not in chosen]


@dataclass
class ComparisonResult:
    """Outcome of running several algorithms over one task set."""

    max_time: int
    order: list[int] | None = None
    selections: list[SelectionResult] = field(default_factory=_default_selections)
    warnings: list[str] = field(default_factory=_default_str_list)

    def get_selection(self, algorithm: AlgorithmType) -> SelectionResult | None:
        for selection in self.selections:
            if selection.algorithm == algorithm:
                return selection
        return None

    def priority_gap(self) -> int | None:
        """How much priority the greedy heuristic leaves behind versus the optimum.

        Returns None unless both selectors ran.
        """
        exact = self.get_selection(AlgorithmType.EXACT)
        greedy = self.get_selection(AlgorithmType.GREEDY)
        if exact is None or greedy is None:
            return None
        return exact.total_priority - greedy.total_priority
