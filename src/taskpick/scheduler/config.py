"""Configuration classes for the scheduling system."""

from enum import Enum

from pydantic import BaseModel, Field

# Upper bound on the budget accepted for the exact optimizer. Its table has
# (tasks + 1) * (max_time + 1) cells, so the budget is what drives memory.
DEFAULT_MAX_TIME_LIMIT = 100_000


class AlgorithmType(str, Enum):
    """Available scheduling algorithms."""

    EXACT = "exact"  # 0/1 knapsack dynamic program
    GREEDY = "greedy"  # Priority/duration ratio heuristic
    TOPOLOGICAL = "topological"  # Kahn's algorithm over dependencies


def _default_algorithms() -> list[AlgorithmType]:
    return [AlgorithmType.TOPOLOGICAL, AlgorithmType.EXACT, AlgorithmType.GREEDY]


class SchedulingConfig(BaseModel):
    """Configuration for budget limits and the compare run."""

    max_time_limit: int = Field(default=DEFAULT_MAX_TIME_LIMIT, ge=0)
    # Algorithms run by compare, in report order
    algorithms: list[AlgorithmType] = Field(default_factory=_default_algorithms)
