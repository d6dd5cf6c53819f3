"""Ratio-greedy task selection."""

from __future__ import annotations

from collections.abc import Sequence

from taskpick.logger import get_logger
from taskpick.models import Task

from ..core import require_budget

logger = get_logger()


def rank_by_ratio(tasks: Sequence[Task]) -> list[Task]:
    """Sort tasks by descending priority/duration ratio.

    Zero-duration tasks have an infinite ratio and come first. The sort is
    stable, so equal ratios keep their input order.
    """
    return sorted(tasks, key=lambda task: -task.ratio)


def heuristic_schedule(tasks: Sequence[Task], max_time: int) -> tuple[int, list[Task]]:
    """Select tasks greedily by ratio until the budget runs out.

    Every task that still fits is taken, so a large task skipped early does
    not stop smaller ones later in the ranking. Dependencies are ignored.

    Args:
        tasks: Task set in input order
        max_time: Time budget, must be >= 0

    Returns:
        Tuple of (total priority, selected tasks in descending-ratio order)

    Raises:
        InvalidBudgetError: If max_time is negative
    """
    require_budget(max_time)

    used_time = 0
    total_priority = 0
    selected: list[Task] = []
    for task in rank_by_ratio(tasks):
        if used_time + task.duration <= max_time:
            selected.append(task)
            used_time += task.duration
            total_priority += task.priority
            logger.checks(f"  Task {task.id} taken (ratio={task.ratio:.2f}, used={used_time})")
        else:
            logger.checks(f"  Task {task.id} does not fit (duration={task.duration})")

    logger.changes(
        f"Greedy selection: {[task.id for task in selected]} (priority={total_priority})"
    )
    return total_priority, selected
