"""Interactive menu for entering tasks and running the algorithms."""

from __future__ import annotations

from collections.abc import Callable

import typer

from .config import AppConfig
from .exceptions import CircularDependencyError, TaskpickError
from .models import Task, number_tasks
from .report import format_comparison, format_dashboard, format_order_report, format_selection
from .scheduler import SchedulingService

EXIT_CHOICE = 5
ANSI_CLEAR = "\033[2J\033[H"


def _clear_terminal() -> None:
    typer.echo(ANSI_CLEAR, nl=False)


def _wait_for_enter() -> None:
    """Hold the last result on screen until the user presses Enter."""
    typer.prompt("Press Enter to continue", default="", show_default=False)


class InteractiveMenu:
    """Menu loop that collects tasks via terminal prompts.

    Holds no scheduling state of its own. Each menu action collects a fresh
    task set and hands it to SchedulingService.
    """

    def __init__(self, config: AppConfig | None = None, *, clear_screen: bool = True):
        self.config = config or AppConfig()
        self.clear_screen = clear_screen
        self._actions: dict[int, Callable[[], None]] = {
            1: self.run_exact,
            2: self.run_greedy,
            3: self.run_order,
            4: self.run_all,
        }

    def run(self) -> None:
        """Show the dashboard until the user picks Exit."""
        while True:
            if self.clear_screen:
                _clear_terminal()
            typer.echo(format_dashboard())
            choice = typer.prompt("Enter your choice", type=int)

            if choice == EXIT_CHOICE:
                typer.echo("Exiting program. Goodbye!")
                return

            action = self._actions.get(choice)
            if action is None:
                typer.echo("Invalid option. Please try again.")
            else:
                try:
                    action()
                except TaskpickError as e:
                    typer.echo(f"Error: {e}", err=True)
            _wait_for_enter()

    def run_exact(self) -> None:
        tasks = self.collect_tasks()
        max_time = self.prompt_count("Enter total available time")
        result = self._service(tasks).run_exact(max_time)
        typer.echo(format_selection(result, tasks, self.config.display))

    def run_greedy(self) -> None:
        tasks = self.collect_tasks()
        max_time = self.prompt_count("Enter total available time")
        result = self._service(tasks).run_greedy(max_time)
        typer.echo(format_selection(result, tasks, self.config.display))

    def run_order(self) -> None:
        tasks = self.collect_tasks(with_dependencies=True)
        try:
            order = self._service(tasks).run_order()
        except CircularDependencyError as e:
            typer.echo(format_order_report(None, e, self.config.display))
            return
        typer.echo(format_order_report(order, display=self.config.display))

    def run_all(self) -> None:
        tasks = self.collect_tasks(with_dependencies=True)
        max_time = self.prompt_count("Enter total available time")
        comparison = self._service(tasks).compare(max_time)
        typer.echo(format_comparison(comparison, tasks, self.config.display))

    def collect_tasks(self, *, with_dependencies: bool = False) -> list[Task]:
        """Prompt for a task count, then each task's fields.

        Tasks are numbered from 1 in the order they are entered.
        """
        count = self.prompt_count("Enter the number of tasks")
        rows: list[tuple[int, int, list[int]]] = []
        for index in range(1, count + 1):
            typer.echo(f"\nTask {index}:")
            duration = self.prompt_count("Duration")
            priority = self.prompt_count("Priority")
            dependencies: list[int] = []
            if with_dependencies:
                dependencies = self._prompt_dependencies()
            rows.append((duration, priority, dependencies))
        return number_tasks(rows)

    def prompt_count(self, text: str) -> int:
        """Prompt until the user enters a non-negative integer."""
        while True:
            value = typer.prompt(text, type=int)
            if value >= 0:
                return value
            typer.echo("  Please enter a number that is zero or greater.")

    def _prompt_dependencies(self) -> list[int]:
        dep_count = self.prompt_count("Enter number of dependencies")
        if dep_count == 0:
            return []
        while True:
            raw = typer.prompt("Enter dependency task IDs (space separated)")
            try:
                ids = [int(part) for part in raw.split()]
            except ValueError:
                typer.echo("  Task IDs must be whole numbers.")
                continue
            if len(ids) != dep_count or any(dep_id < 1 for dep_id in ids):
                typer.echo(f"  Please enter exactly {dep_count} positive task IDs.")
                continue
            return ids

    def _service(self, tasks: list[Task]) -> SchedulingService:
        return SchedulingService(tasks, self.config.scheduler)
