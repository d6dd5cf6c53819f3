"""Tests for the ratio-greedy selector."""

import random

import pytest

from taskpick.exceptions import InvalidBudgetError
from taskpick.models import number_tasks, sum_durations, sum_priorities
from taskpick.scheduler import heuristic_schedule
from taskpick.scheduler.algorithms import rank_by_ratio


class TestRankByRatio:
    """Test the ratio ordering."""

    def test_descending_ratio(self) -> None:
        tasks = number_tasks([(4, 4), (1, 3), (2, 4)])

        assert [task.id for task in rank_by_ratio(tasks)] == [2, 3, 1]

    def test_zero_duration_first_in_input_order(self) -> None:
        """Zero-duration tasks lead the ranking and keep their relative order."""
        tasks = number_tasks([(2, 4), (0, 1), (0, 0), (1, 100)])

        assert [task.id for task in rank_by_ratio(tasks)] == [2, 3, 4, 1]

    def test_equal_ratios_keep_input_order(self) -> None:
        tasks = number_tasks([(2, 2), (1, 1), (3, 3)])

        assert [task.id for task in rank_by_ratio(tasks)] == [1, 2, 3]


class TestHeuristicSchedule:
    """Test heuristic_schedule."""

    def test_worked_example(self) -> None:
        """Ratios 1.5, 1.33 and 1.25 with budget 5 pick tasks 1 and 2."""
        tasks = number_tasks([(2, 3), (3, 4), (4, 5)])

        total, selected = heuristic_schedule(tasks, 5)

        assert total == 7
        assert [task.id for task in selected] == [1, 2]

    def test_result_in_ratio_order(self) -> None:
        tasks = number_tasks([(4, 4), (1, 3), (2, 4)])

        total, selected = heuristic_schedule(tasks, 10)

        assert total == 11
        assert [task.id for task in selected] == [2, 3, 1]

    def test_keeps_scanning_after_a_task_does_not_fit(self) -> None:
        """A skipped task does not end the scan; smaller tasks after it still fit."""
        tasks = number_tasks([(1, 10), (5, 10), (2, 3)])

        total, selected = heuristic_schedule(tasks, 4)

        assert total == 13
        assert [task.id for task in selected] == [1, 3]

    def test_zero_budget_takes_free_tasks(self) -> None:
        tasks = number_tasks([(1, 9), (0, 2)])

        total, selected = heuristic_schedule(tasks, 0)

        assert total == 2
        assert [task.id for task in selected] == [2]

    def test_ignores_dependencies(self) -> None:
        """A task whose dependency is not selected can still be chosen."""
        tasks = number_tasks([(5, 1, []), (1, 5, [1])])

        total, selected = heuristic_schedule(tasks, 1)

        assert total == 5
        assert [task.id for task in selected] == [2]

    def test_empty_task_set(self) -> None:
        assert heuristic_schedule([], 3) == (0, [])

    def test_negative_budget_rejected(self) -> None:
        with pytest.raises(InvalidBudgetError):
            heuristic_schedule(number_tasks([(1, 1)]), -5)

    def test_feasible_and_repeatable(self) -> None:
        """Selections never exceed the budget and repeat exactly."""
        rng = random.Random(11)
        for _ in range(50):
            rows = [(rng.randint(0, 8), rng.randint(0, 9)) for _ in range(rng.randint(0, 9))]
            tasks = number_tasks(rows)
            max_time = rng.randint(0, 20)

            total, selected = heuristic_schedule(tasks, max_time)

            assert sum_durations(selected) <= max_time
            assert sum_priorities(selected) == total
            assert heuristic_schedule(tasks, max_time) == (total, selected)
