"""Verbosity-driven logging for the scheduling algorithms.

The ``-v`` flag maps onto four thresholds:

- 0: errors only
- 1: ``changes`` - what an algorithm selected or ordered
- 2: ``checks`` - each task as it is considered
- 3: ``debug`` - DP rows and the ready queue
"""

from __future__ import annotations

import logging
import sys
from typing import Any, TextIO

CHANGES_LEVEL = 25
CHECKS_LEVEL = 15

logging.addLevelName(CHANGES_LEVEL, "CHANGES")
logging.addLevelName(CHECKS_LEVEL, "CHECKS")

_THRESHOLDS = (logging.ERROR, CHANGES_LEVEL, CHECKS_LEVEL, logging.DEBUG)


class TaskpickLogger(logging.Logger):
    """Logger with a method for each taskpick-specific level."""

    def changes(self, msg: str, *args: Any, **kwargs: Any) -> None:
        if self.isEnabledFor(CHANGES_LEVEL):
            self._log(CHANGES_LEVEL, msg, args, **kwargs)

    def checks(self, msg: str, *args: Any, **kwargs: Any) -> None:
        if self.isEnabledFor(CHECKS_LEVEL):
            self._log(CHECKS_LEVEL, msg, args, **kwargs)


def get_logger() -> TaskpickLogger:
    """Return the shared ``taskpick`` logger."""
    logging.setLoggerClass(TaskpickLogger)
    logger = logging.getLogger("taskpick")
    assert isinstance(logger, TaskpickLogger)
    return logger


def _threshold(verbosity: int) -> int:
    if 0 <= verbosity < len(_THRESHOLDS):
        return _THRESHOLDS[verbosity]
    return logging.ERROR


def setup_logger(verbosity: int, stream: TextIO | None = None) -> None:
    """Point the taskpick logger at ``stream`` (stderr by default).

    Calling it again replaces the previous handler, so the CLI callback and
    tests can reconfigure freely.
    """
    logger = get_logger()
    logger.handlers.clear()
    logger.setLevel(_threshold(verbosity))

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.propagate = False


def reset_logger() -> None:
    logger = get_logger()
    logger.handlers.clear()
    logger.setLevel(logging.ERROR)


def debug_enabled() -> bool:
    """True at verbosity 3; guards the per-row DP table dumps."""
    return get_logger().isEnabledFor(logging.DEBUG)
