"""Dependency ordering via Kahn's algorithm."""

from __future__ import annotations

import heapq
from collections import defaultdict
from collections.abc import Sequence

from taskpick.exceptions import CircularDependencyError
from taskpick.logger import get_logger
from taskpick.models import Task

logger = get_logger()


def _build_graph(tasks: Sequence[Task]) -> tuple[dict[int, list[int]], dict[int, int]]:
    """Build the dependent lists and the in-degree of every task.

    Every declared dependency counts toward the in-degree, including IDs that
    name no task. Those are released by _release_unknown() before ordering.
    """
    dependents: dict[int, list[int]] = defaultdict(list)
    in_degree: dict[int, int] = {task.id: 0 for task in tasks}

    for task in tasks:
        for dep_id in task.sorted_dependencies:
            dependents[dep_id].append(task.id)
            in_degree[task.id] += 1

    return dependents, in_degree


def _release_unknown(
    task_ids: set[int], dependents: dict[int, list[int]], in_degree: dict[int, int]
) -> None:
    """Treat dependency IDs that name no task as already completed.

    They are released up front so they never compete with real tasks in the
    ready queue and a task waiting on one is placed by its own ID.
    """
    for dep_id in sorted(set(dependents) - task_ids):
        logger.checks(f"  Dependency {dep_id} is not a task; treating it as satisfied")
        for dependent in dependents[dep_id]:
            in_degree[dependent] -= 1


def linearize(tasks: Sequence[Task]) -> list[int]:
    """Order task IDs so that every dependency comes before its dependents.

    Whenever several tasks are ready at once the smallest ID goes first, so
    the output is fully determined by the input. Dependencies on IDs outside
    the task set are considered satisfied.

    Args:
        tasks: Task set; order does not affect the result

    Returns:
        Every task ID exactly once. Empty only for an empty task set.

    Raises:
        CircularDependencyError: If a cycle (including a task depending on
            itself) leaves some tasks permanently blocked
    """
    task_ids = {task.id for task in tasks}
    dependents, in_degree = _build_graph(tasks)
    _release_unknown(task_ids, dependents, in_degree)

    ready = [task_id for task_id, degree in in_degree.items() if degree == 0]
    heapq.heapify(ready)
    logger.debug(f"Topological: initial ready queue {sorted(ready)}")

    order: list[int] = []
    while ready:
        current = heapq.heappop(ready)
        order.append(current)
        logger.checks(f"  Placed task {current}")

        for dependent in dependents.get(current, []):
            in_degree[dependent] -= 1
            if in_degree[dependent] == 0:
                heapq.heappush(ready, dependent)

    if len(order) < len(task_ids):
        blocked = [task_id for task_id in task_ids if in_degree[task_id] > 0]
        logger.changes(f"Cycle detected, blocked tasks: {sorted(blocked)}")
        raise CircularDependencyError(blocked)

    logger.changes(f"Execution order: {order}")
    return order
