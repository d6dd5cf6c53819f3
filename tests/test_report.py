"""Tests for text report rendering."""

from taskpick.config import DisplayConfig
from taskpick.exceptions import CircularDependencyError
from taskpick.models import Task, number_tasks
from taskpick.report import (
    format_comparison,
    format_dashboard,
    format_order_report,
    format_selection,
    format_task_table,
)
from taskpick.scheduler import SchedulingService


class TestTaskTable:
    """Test format_task_table."""

    def test_columns(self) -> None:
        tasks = number_tasks([(2, 3, []), (3, 4, [2, 1])])

        lines = format_task_table(tasks).splitlines()

        assert lines[0] == "Task ID   Duration    Priority  Dependencies"
        assert lines[1] == "-" * 50
        assert lines[2] == "1         2           3"
        assert lines[3] == "2         3           4         1 2"

    def test_custom_width(self) -> None:
        assert format_task_table([], width=20).splitlines()[1] == "-" * 20

    def test_name_column_when_any_task_is_named(self) -> None:
        """Named tasks add a Name column; unnamed ones fall back to their label."""
        tasks = [
            Task(id=1, duration=2, priority=3, name="Design"),
            Task(id=2, duration=3, priority=4, dependencies=frozenset({1})),
        ]

        lines = format_task_table(tasks).splitlines()

        assert lines[0] == "Task ID   Name    Duration    Priority  Dependencies"
        assert lines[2] == "1         Design  2           3"
        assert lines[3] == "2         Task 2  3           4         1"

    def test_no_name_column_without_names(self) -> None:
        assert "Name" not in format_task_table(number_tasks([(1, 1)]))


class TestSelectionReport:
    """Test format_selection."""

    def test_exact_report(self) -> None:
        tasks = number_tasks([(2, 3), (3, 4), (4, 5)])
        result = SchedulingService(tasks).run_exact(5)

        report = format_selection(result, tasks)

        assert "0/1 Knapsack Result (Optimal)" in report
        assert "Total Priority Achieved: 7" in report
        assert "Time Used: 5 / 5 units" in report
        assert "Efficiency (Priority per Time Unit): 1.40" in report
        assert "Unselected Tasks (Missed Opportunities):" in report
        assert "Task ID: 3, Duration: 4, Priority: 5" in report

    def test_greedy_report_without_unselected(self) -> None:
        tasks = number_tasks([(2, 3), (3, 4), (4, 5)])
        result = SchedulingService(tasks).run_greedy(5)

        report = format_selection(result, tasks, DisplayConfig(show_unselected=False))

        assert "Greedy Result (Heuristic)" in report
        assert "Missed Opportunities" not in report

    def test_everything_selected(self) -> None:
        tasks = number_tasks([(1, 1)])
        result = SchedulingService(tasks).run_exact(5)

        assert "(none)" in format_selection(result, tasks)

    def test_nothing_selected(self) -> None:
        tasks = number_tasks([(3, 1)])
        result = SchedulingService(tasks).run_exact(0)

        report = format_selection(result, tasks)

        assert "Time Used: 0 / 0 units" in report
        assert "Efficiency (Priority per Time Unit): 0.00" in report


class TestOrderReport:
    """Test the ordering section."""

    def test_order(self) -> None:
        report = format_order_report([1, 3, 2])

        assert "Topological Sort (Dependency Order)" in report
        assert "Valid Execution Order: 1 3 2" in report

    def test_cycle(self) -> None:
        report = format_order_report(None, CircularDependencyError([2, 1]))

        assert "!!! Cycle detected: No valid task order !!!" in report
        assert "Blocked tasks: 1 2" in report
        assert "Valid Execution Order" not in report


class TestComparisonReport:
    """Test format_comparison."""

    def test_sections(self) -> None:
        tasks = number_tasks([(1, 2, []), (4, 7, [1])])
        comparison = SchedulingService(tasks).compare(4)

        report = format_comparison(comparison, tasks)

        assert report.index("Valid Execution Order: 1 2") < report.index("0/1 Knapsack")
        assert report.index("0/1 Knapsack") < report.index("Greedy Result")
        assert "Priority left by greedy versus optimal: 5" in report

    def test_cycle_warning(self) -> None:
        tasks = number_tasks([(1, 1, [2]), (1, 1, [1])])
        comparison = SchedulingService(tasks).compare(2)

        report = format_comparison(comparison, tasks)

        assert "Warning: Cycle detected" in report
        assert "Valid Execution Order" not in report


def test_dashboard_lists_options() -> None:
    dashboard = format_dashboard()

    assert "TASK SCHEDULING ALGORITHMS" in dashboard
    assert "1. 0/1 Knapsack DP" in dashboard
    assert "4. Run All" in dashboard
    assert "5. Exit" in dashboard
