"""Factory for ordering strategies based on user selection."""

from __future__ import annotations

from .balanced import BalancedOrdering
from .base import OrderingStrategy
from .nearest_neighbor import NearestNeighborOrdering
from .sorting import ChronologicalOrdering, PriorityOrdering
from .two_opt import TwoOptOrdering
from ...models.domain import OptimizationStrategy


def get_strategy(strategy: OptimizationStrategy | str) -> OrderingStrategy:
    try:
        key = OptimizationStrategy(strategy)
    except ValueError as exc:
        raise ValueError(f"Unknown optimization strategy '{strategy}'.") from exc

    match key:
        case OptimizationStrategy.MINIMIZE_TRAVEL:
            return NearestNeighborOrdering()
        case OptimizationStrategy.MINIMIZE_DISTANCE:
            return TwoOptOrdering()
        case OptimizationStrategy.PRIORITY_FIRST:
            return PriorityOrdering()
        case OptimizationStrategy.CHRONOLOGICAL:
            return ChronologicalOrdering()
        case _:
            return BalancedOrdering()
