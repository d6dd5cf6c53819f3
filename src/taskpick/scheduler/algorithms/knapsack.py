"""Exact task selection via the 0/1 knapsack dynamic program."""

from __future__ import annotations

from collections.abc import Sequence

from taskpick.logger import debug_enabled, get_logger
from taskpick.models import Task

from ..core import require_budget

logger = get_logger()


def _build_table(tasks: Sequence[Task], max_time: int) -> list[list[int]]:
    """Fill the (n+1) x (max_time+1) table of best priorities.

    ``table[i][t]`` is the best total priority reachable using only the
    first ``i`` tasks within a budget of ``t``.
    """
    table = [[0] * (max_time + 1) for _ in range(len(tasks) + 1)]

    for i, task in enumerate(tasks, 1):
        previous = table[i - 1]
        row = table[i]
        for t in range(max_time + 1):
            if task.duration > t:
                row[t] = previous[t]
            else:
                row[t] = max(previous[t], task.priority + previous[t - task.duration])

        if debug_enabled():
            logger.debug(f"    Row {i} (task {task.id}): {row}")

    return table


def _trace_selection(tasks: Sequence[Task], table: list[list[int]], max_time: int) -> list[Task]:
    """Walk the table back from (n, max_time) to recover the chosen tasks.

    A task is taken exactly when its row differs from the row above at the
    current budget. The walk runs from the last task to the first, so the
    result comes out in reverse input order.
    """
    selected: list[Task] = []
    t = max_time
    for i in range(len(tasks), 0, -1):
        task = tasks[i - 1]
        if table[i][t] != table[i - 1][t]:
            selected.append(task)
            t -= task.duration
            logger.checks(f"  Task {task.id} taken (duration={task.duration}, budget left={t})")
        else:
            logger.checks(f"  Task {task.id} skipped at budget {t}")
    return selected


def exact_schedule(tasks: Sequence[Task], max_time: int) -> tuple[int, list[Task]]:
    """Select the subset of tasks with the highest total priority within a budget.

    Runs in O(n * max_time) time and memory. Callers are responsible for
    keeping ``max_time`` to a size the table can be allocated for.

    Ties between equally good subsets are settled by the backward walk over
    the table, so identical input always yields the identical selection.

    Args:
        tasks: Task set in input order
        max_time: Time budget, must be >= 0

    Returns:
        Tuple of (optimal total priority, selected tasks in reverse input order)

    Raises:
        InvalidBudgetError: If max_time is negative
    """
    require_budget(max_time)
    logger.debug(f"Exact: {len(tasks)} tasks, budget {max_time}")

    table = _build_table(tasks, max_time)
    selected = _trace_selection(tasks, table, max_time)
    best = table[len(tasks)][max_time]

    logger.changes(
        f"Exact selection: {[task.id for task in reversed(selected)]} (priority={best})"
    )
    return best, selected
