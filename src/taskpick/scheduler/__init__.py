"""Scheduler package - task selection and ordering under a time budget.

Three independent algorithms share one Task model:
- exact_schedule: 0/1 knapsack, optimal total priority within the budget
- heuristic_schedule: ratio-greedy baseline for comparison
- linearize: Kahn's topological sort with cycle detection

SchedulingService wraps them for callers that want budget limits,
display ordering and side-by-side comparison.
"""

# Algorithms
from .algorithms import exact_schedule, heuristic_schedule, linearize

# Configuration
from .config import AlgorithmType, SchedulingConfig

# Core dataclasses
from .core import ComparisonResult, SelectionResult

# Protocols
from .protocols import OrderingAlgorithm, SelectionAlgorithm

# High-level service
from .service import SchedulingService

__all__ = [
    # Core dataclasses
    "SelectionResult",
    "ComparisonResult",
    # Configuration
    "SchedulingConfig",
    "AlgorithmType",
    # Protocols
    "SelectionAlgorithm",
    "OrderingAlgorithm",
    # High-level service
    "SchedulingService",
    # Algorithms
    "exact_schedule",
    "heuristic_schedule",
    "linearize",
]
