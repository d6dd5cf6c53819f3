"""Command-line interface for taskpick."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from . import context
from .config import AppConfig
from .exceptions import CircularDependencyError, TaskpickError
from .interactive import InteractiveMenu
from .loader import discover_config, load_task_set
from .logger import setup_logger
from .models import TaskSet
from .report import format_comparison, format_order_report, format_selection
from .scheduler import AlgorithmType, SchedulingService

app = typer.Typer(
    name="taskpick",
    help="Select and order tasks under a time budget",
    add_completion=False,
)

FileArgument = Annotated[Path, typer.Argument(help="Path to the task YAML file")]
MaxTimeOption = Annotated[
    int | None,
    typer.Option(
        "--max-time",
        "-t",
        help="Time budget (defaults to max_time in the task file)",
    ),
]


@app.callback()
def main_callback(
    verbose: Annotated[
        int,
        typer.Option(
            "--verbose",
            "-v",
            help="Verbosity level: 0=silent (default), 1=show results, 2=show each task, 3=debug",
            min=0,
            max=3,
        ),
    ] = 0,
    config: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            help="Path to config file (default: taskpick_config.yaml)",
        ),
    ] = None,
) -> None:
    """Global options for taskpick commands."""
    setup_logger(verbose)
    context.set_verbosity(verbose)
    context.set_config_path(config)


def _load(file: Path) -> tuple[TaskSet, AppConfig]:
    """Load config and tasks, turning library errors into a clean exit."""
    try:
        config = discover_config(file)
        return load_task_set(file, config=config), config
    except TaskpickError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1) from None


def _resolve_max_time(max_time: int | None, task_set: TaskSet) -> int:
    if max_time is not None:
        return max_time
    if task_set.max_time is not None:
        return task_set.max_time
    typer.echo(
        "Error: No time budget given. Use --max-time or set max_time in the file.", err=True
    )
    raise typer.Exit(1)


def _run_selection(algorithm: AlgorithmType, file: Path, max_time: int | None) -> None:
    task_set, config = _load(file)
    budget = _resolve_max_time(max_time, task_set)
    service = SchedulingService(task_set.tasks, config.scheduler)
    try:
        result = service.select(algorithm, budget)
    except TaskpickError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1) from None
    typer.echo(format_selection(result, task_set.tasks, config.display))


@app.command()
def exact(file: FileArgument, max_time: MaxTimeOption = None) -> None:
    """Pick the tasks with the highest total priority that fit the budget."""
    _run_selection(AlgorithmType.EXACT, file, max_time)


@app.command()
def greedy(file: FileArgument, max_time: MaxTimeOption = None) -> None:
    """Pick tasks by priority/duration ratio until the budget is used."""
    _run_selection(AlgorithmType.GREEDY, file, max_time)


@app.command()
def order(file: FileArgument) -> None:
    """Print an execution order that respects task dependencies."""
    task_set, config = _load(file)
    service = SchedulingService(task_set.tasks, config.scheduler)
    try:
        execution_order = service.run_order()
    except CircularDependencyError as e:
        typer.echo(format_order_report(None, e, config.display))
        raise typer.Exit(1) from None
    typer.echo(format_order_report(execution_order, display=config.display))


@app.command()
def compare(file: FileArgument, max_time: MaxTimeOption = None) -> None:
    """Run every configured algorithm on the same tasks and budget."""
    task_set, config = _load(file)
    budget = _resolve_max_time(max_time, task_set)
    service = SchedulingService(task_set.tasks, config.scheduler)
    try:
        comparison = service.compare(budget)
    except TaskpickError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1) from None
    typer.echo(format_comparison(comparison, task_set.tasks, config.display))


@app.command()
def menu(
    no_clear: Annotated[
        bool, typer.Option("--no-clear", help="Do not clear the screen between menus")
    ] = False,
) -> None:
    """Enter tasks interactively and run the algorithms from a menu."""
    try:
        config = discover_config()
    except TaskpickError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1) from None
    # Clearing would wipe log output printed at higher verbosity
    clear_screen = not no_clear and context.get_verbosity() == 0
    InteractiveMenu(config, clear_screen=clear_screen).run()
