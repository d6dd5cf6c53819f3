"""Tests for algorithm log output at different verbosity levels."""

import logging
from io import StringIO

from taskpick.logger import (
    CHANGES_LEVEL,
    CHECKS_LEVEL,
    debug_enabled,
    get_logger,
    reset_logger,
    setup_logger,
)
from taskpick.models import number_tasks
from taskpick.scheduler import exact_schedule, heuristic_schedule, linearize


def _run_all(verbosity: int) -> str:
    tasks = number_tasks([(2, 3, []), (3, 4, [1]), (4, 5, [1, 2, 7])])
    stream = StringIO()
    setup_logger(verbosity, stream=stream)
    try:
        exact_schedule(tasks, 5)
        heuristic_schedule(tasks, 5)
        linearize(tasks)
        return stream.getvalue()
    finally:
        reset_logger()


def test_verbosity_0_silent() -> None:
    assert _run_all(0) == ""


def test_verbosity_1_shows_results() -> None:
    output = _run_all(1)

    assert "Exact selection: [1, 2] (priority=7)" in output
    assert "Greedy selection: [1, 2] (priority=7)" in output
    assert "Execution order: [1, 2, 3]" in output
    assert "taken" not in output


def test_verbosity_2_shows_each_task() -> None:
    output = _run_all(2)

    assert "Task 2 taken (duration=3, budget left=2)" in output
    assert "Task 3 skipped at budget 5" in output
    assert "Task 3 does not fit (duration=4)" in output
    assert "Dependency 7 is not a task" in output
    assert "Row 1" not in output


def test_verbosity_3_shows_table() -> None:
    output = _run_all(3)

    assert "Exact: 3 tasks, budget 5" in output
    assert "Row 1 (task 1): [0, 0, 3, 3, 3, 3]" in output
    assert "initial ready queue [1]\n" in output


def test_level_thresholds() -> None:
    setup_logger(2, stream=StringIO())
    try:
        logger = get_logger()
        assert logger.isEnabledFor(CHANGES_LEVEL)
        assert logger.isEnabledFor(CHECKS_LEVEL)
        assert not debug_enabled()
    finally:
        reset_logger()

    assert not get_logger().isEnabledFor(CHANGES_LEVEL)


def test_unknown_verbosity_falls_back_to_errors_only() -> None:
    setup_logger(7, stream=StringIO())
    try:
        assert get_logger().level == logging.ERROR
    finally:
        reset_logger()
