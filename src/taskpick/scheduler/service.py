"""High-level scheduling service."""

from __future__ import annotations

from collections.abc import Sequence

from taskpick.exceptions import CircularDependencyError, InvalidBudgetError
from taskpick.logger import get_logger
from taskpick.models import Task

from .algorithms import get_orderer, get_selector
from .config import AlgorithmType, SchedulingConfig
from .core import ComparisonResult, SelectionResult, require_budget

logger = get_logger()


class SchedulingService:
    """Runs the scheduling algorithms over one task set.

    The service owns no algorithmic state. It checks the budget against the
    configured ceiling and puts results in display order. For the exact
    selector that means input order, not the reverse order the backward walk
    produces.
    """

    def __init__(self, tasks: Sequence[Task], config: SchedulingConfig | None = None):
        """Initialize scheduling service.

        Args:
            tasks: Task set in input order; never modified
            config: Optional scheduling configuration
        """
        self.tasks = list(tasks)
        self.config = config or SchedulingConfig()

    def check_budget(self, max_time: int) -> None:
        """Validate a budget before any table is built.

        Raises:
            InvalidBudgetError: If max_time is negative or above max_time_limit
        """
        require_budget(max_time)
        if max_time > self.config.max_time_limit:
            raise InvalidBudgetError(
                f"Time budget {max_time} exceeds the configured limit "
                f"of {self.config.max_time_limit}"
            )

    def select(self, algorithm: AlgorithmType, max_time: int) -> SelectionResult:
        """Run one selection algorithm and wrap its result."""
        self.check_budget(max_time)
        selector = get_selector(algorithm)
        total_priority, selected = selector(self.tasks, max_time)

        if algorithm == AlgorithmType.EXACT:
            selected.reverse()

        return SelectionResult(
            algorithm=algorithm,
            total_priority=total_priority,
            selected=selected,
            max_time=max_time,
        )

    def run_exact(self, max_time: int) -> SelectionResult:
        return self.select(AlgorithmType.EXACT, max_time)

    def run_greedy(self, max_time: int) -> SelectionResult:
        return self.select(AlgorithmType.GREEDY, max_time)

    def run_order(self) -> list[int]:
        """Return a dependency-respecting execution order.

        Raises:
            CircularDependencyError: If no valid order exists
        """
        return get_orderer(AlgorithmType.TOPOLOGICAL)(self.tasks)

    def compare(self, max_time: int) -> ComparisonResult:
        """Run every configured algorithm against the same tasks and budget.

        A dependency cycle does not abort the run. It is recorded as a
        warning and the selectors still run.

        Raises:
            InvalidBudgetError: If the budget is rejected; checked up front so
                nothing runs with a bad budget
        """
        self.check_budget(max_time)
        result = ComparisonResult(max_time=max_time)

        for algorithm in self.config.algorithms:
            if algorithm == AlgorithmType.TOPOLOGICAL:
                try:
                    result.order = self.run_order()
                except CircularDependencyError as e:
                    logger.changes(f"Ordering skipped: {e}")
                    result.warnings.append(str(e))
            else:
                result.selections.append(self.select(algorithm, max_time))

        return result
