"""Task file loading with config discovery."""

from __future__ import annotations

from pathlib import Path

from . import context
from .config import CONFIG_FILENAME, AppConfig, load_config
from .exceptions import InvalidBudgetError
from .logger import get_logger
from .models import TaskSet
from .parser import TaskFileParser

logger = get_logger()


def discover_config(
    task_file_path: Path | None = None,
    config_path: Path | None = None,
) -> AppConfig:
    """Find and load the configuration, falling back to defaults.

    Search order:
    1. Explicit config_path argument
    2. Global context (set via CLI --config)
    3. Task file directory / taskpick_config.yaml
    4. Current directory / taskpick_config.yaml
    """
    if config_path is not None:
        return load_config(config_path)

    ctx_config = context.get_config_path()
    if ctx_config is not None:
        return load_config(ctx_config)

    if task_file_path is not None:
        dir_config = Path(task_file_path).parent / CONFIG_FILENAME
        if dir_config.exists():
            return load_config(dir_config)

    cwd_config = Path(CONFIG_FILENAME)
    if cwd_config.exists():
        return load_config(cwd_config)

    return AppConfig()


def load_task_set(
    path: Path | str,
    config_path: Path | None = None,
    *,
    config: AppConfig | None = None,
) -> TaskSet:
    """Load a task file and check it against the configuration.

    This is the main entry point for reading tasks from disk. It handles:
    1. Config discovery (unless config is given)
    2. YAML parsing and schema validation
    3. Checking the file's default budget against max_time_limit
    4. Reporting dependency IDs that name no task (allowed, but worth knowing)

    Args:
        path: Path to the task YAML file
        config_path: Optional explicit path to config file
        config: Optional explicit config (overrides discovery)

    Returns:
        TaskSet with IDs assigned in file order
    """
    path = Path(path)
    if config is None:
        config = discover_config(path, config_path)

    task_set = TaskFileParser().parse_file(path)

    limit = config.scheduler.max_time_limit
    if task_set.max_time is not None and task_set.max_time > limit:
        raise InvalidBudgetError(
            f"max_time {task_set.max_time} in {path} exceeds the configured limit of {limit}"
        )

    for task_id, missing in task_set.get_unknown_dependencies().items():
        logger.checks(f"Task {task_id} depends on unknown IDs {missing}; treated as satisfied")

    logger.changes(f"Loaded {len(task_set)} tasks from {path}")
    return task_set
