"""Algorithm lookup and exports."""

from ..config import AlgorithmType
from ..protocols import OrderingAlgorithm, SelectionAlgorithm
from .greedy import heuristic_schedule, rank_by_ratio
from .knapsack import exact_schedule
from .topological import linearize

_SELECTORS: dict[AlgorithmType, SelectionAlgorithm] = {
    AlgorithmType.EXACT: exact_schedule,
    AlgorithmType.GREEDY: heuristic_schedule,
}


def get_selector(algorithm_type: AlgorithmType) -> SelectionAlgorithm:
    """Return the selection function for an algorithm type.

    Raises:
        ValueError: If the algorithm does not select tasks under a budget
    """
    selector = _SELECTORS.get(algorithm_type)
    if selector is None:
        msg = f"Algorithm {algorithm_type.value} does not select tasks"
        raise ValueError(msg)
    return selector


def get_orderer(algorithm_type: AlgorithmType) -> OrderingAlgorithm:
    """Return the ordering function for an algorithm type."""
    if algorithm_type != AlgorithmType.TOPOLOGICAL:
        msg = f"Algorithm {algorithm_type.value} does not order tasks"
        raise ValueError(msg)
    return linearize


__all__ = [
    "exact_schedule",
    "get_orderer",
    "get_selector",
    "heuristic_schedule",
    "linearize",
    "rank_by_ratio",
]
