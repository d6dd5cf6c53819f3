"""Plain-text rendering of tasks and scheduling results."""

from __future__ import annotations

from collections.abc import Sequence

from .config import DisplayConfig
from .exceptions import CircularDependencyError
from .models import Task
from .scheduler import AlgorithmType, ComparisonResult, SelectionResult

DASHBOARD_WIDTH = 65

RESULT_TITLES = {
    AlgorithmType.EXACT: "0/1 Knapsack Result (Optimal)",
    AlgorithmType.GREEDY: "Greedy Result (Heuristic)",
    AlgorithmType.TOPOLOGICAL: "Topological Sort (Dependency Order)",
}

MENU_OPTIONS = [
    ("1. 0/1 Knapsack DP", "-> Maximize priority within time limit"),
    ("2. Greedy", "-> By priority/time ratio"),
    ("3. Topological Sort", "-> Order tasks by dependencies"),
    ("4. Run All", "-> Compare all algorithms"),
    ("5. Exit", "-> Close the program"),
]


def rule(char: str, width: int) -> str:
    return char * width


def format_task_table(tasks: Sequence[Task], width: int = 50) -> str:
    """Render tasks as a fixed-width table.

    A Name column is added only when at least one task is named; unnamed
    tasks in such a table show their default label.
    """
    named = any(task.name for task in tasks)
    name_width = max([len("Name")] + [len(task.label) for task in tasks]) + 2

    header = f"{'Task ID':<10}"
    if named:
        header += f"{'Name':<{name_width}}"
    lines = [header + f"{'Duration':<12}{'Priority':<10}Dependencies"]
    lines.append(rule("-", width))
    for task in tasks:
        deps = " ".join(str(dep_id) for dep_id in task.sorted_dependencies)
        row = f"{task.id:<10}"
        if named:
            row += f"{task.label:<{name_width}}"
        lines.append(f"{row}{task.duration:<12}{task.priority:<10}{deps}".rstrip())
    return "\n".join(lines)


def format_selection(
    result: SelectionResult,
    tasks: Sequence[Task],
    display: DisplayConfig | None = None,
) -> str:
    """Render a selection with its totals and, optionally, the tasks it left out."""
    display = display or DisplayConfig()
    width = display.line_width

    lines = [rule("=", width), RESULT_TITLES[result.algorithm], rule("=", width)]
    lines.append(format_task_table(result.selected, width))
    lines.append("")
    lines.append(f"Total Priority Achieved: {result.total_priority}")
    lines.append(f"Time Used: {result.time_used} / {result.max_time} units")
    lines.append(f"Efficiency (Priority per Time Unit): {result.efficiency:.2f}")

    if display.show_unselected:
        lines.append("")
        lines.append("Unselected Tasks (Missed Opportunities):")
        lines.append(rule("-", width))
        unselected = result.unselected(tasks)
        if not unselected:
            lines.append("(none)")
        for task in unselected:
            lines.append(
                f"Task ID: {task.id}, Duration: {task.duration}, Priority: {task.priority}"
            )

    return "\n".join(lines)


def format_order(order: Sequence[int]) -> str:
    return "Valid Execution Order: " + " ".join(str(task_id) for task_id in order)


def format_cycle(error: CircularDependencyError) -> str:
    blocked = " ".join(str(task_id) for task_id in error.blocked_ids)
    return f"!!! Cycle detected: No valid task order !!!\nBlocked tasks: {blocked}"


def format_order_report(
    order: Sequence[int] | None,
    error: CircularDependencyError | None = None,
    display: DisplayConfig | None = None,
) -> str:
    """Render the ordering section, either the order itself or the cycle message."""
    width = (display or DisplayConfig()).line_width
    lines = [rule("=", width), RESULT_TITLES[AlgorithmType.TOPOLOGICAL], rule("=", width)]
    if error is not None:
        lines.append(format_cycle(error))
    elif order is not None:
        lines.append(format_order(order))
    return "\n".join(lines)


def format_comparison(
    comparison: ComparisonResult,
    tasks: Sequence[Task],
    display: DisplayConfig | None = None,
) -> str:
    """Render a compare-all run section by section."""
    display = display or DisplayConfig()
    sections: list[str] = []

    if comparison.order is not None:
        sections.append(format_order_report(comparison.order, display=display))

    for selection in comparison.selections:
        sections.append(format_selection(selection, tasks, display))

    gap = comparison.priority_gap()
    if gap is not None:
        sections.append(f"Priority left by greedy versus optimal: {gap}")

    sections.extend(f"Warning: {warning}" for warning in comparison.warnings)
    return "\n\n".join(sections)


def format_dashboard() -> str:
    """Render the interactive menu."""
    lines = [rule("=", DASHBOARD_WIDTH)]
    lines.append(f"{'TASK SCHEDULING ALGORITHMS':>45}")
    lines.append(rule("=", DASHBOARD_WIDTH))
    lines.append(f"{'Option':<25}Description")
    lines.append(rule("-", DASHBOARD_WIDTH))
    lines.extend(f"{option:<25}{description}" for option, description in MENU_OPTIONS)
    lines.append(rule("=", DASHBOARD_WIDTH))
    return "\n".join(lines)
