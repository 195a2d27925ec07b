"""2-opt local search over an open path of activities."""

from __future__ import annotations

import logging
from typing import Optional, Sequence

from ...models.domain import Activity, Location, OptimizationConstraints
from ..routing.travel import distance
from .base import OrderingStrategy
from .nearest_neighbor import nearest_neighbor

logger = logging.getLogger(__name__)

# Meters; guards against accepting float noise as an improvement.
IMPROVEMENT_TOLERANCE_M = 1e-6


def _gain(path: list[Activity], i: int, j: int) -> float:
    """Length removed minus length added by reversing ``path[i+1 : j+1]``."""

    a, b, c = path[i].coordinates, path[i + 1].coordinates, path[j].coordinates
    removed = distance(a, b)
    added = distance(a, c)
    if j + 1 < len(path):
        d = path[j + 1].coordinates
        removed += distance(c, d)
        added += distance(b, d)
    return removed - added


def two_opt(route: Sequence[Activity]) -> list[Activity]:
    """Reverse sub-sequences while doing so strictly shortens the path.

    Pairs whose endpoint is locked are skipped, as is any reversal that would
    move a locked activity, so locked activities keep their index.
    """

    path = list(route)
    size = len(path)
    passes = 0
    improved = True
    while improved:
        improved = False
        passes += 1
        for i in range(size - 2):
            if path[i].is_locked:
                continue
            for j in range(i + 2, size):
                if any(activity.is_locked for activity in path[i + 1 : j + 1]):
                    continue
                if _gain(path, i, j) > IMPROVEMENT_TOLERANCE_M:
                    path[i + 1 : j + 1] = reversed(path[i + 1 : j + 1])
                    improved = True
    logger.debug(f"2-opt converged after {passes} passes over {size} activities")
    return path


class TwoOptOrdering(OrderingStrategy):
    """Minimise distance: nearest-neighbour start refined by 2-opt."""

    name = "minimize_distance"

    def order(
        self,
        flexible: Sequence[Activity],
        *,
        start_location: Optional[Location] = None,
        constraints: Optional[OptimizationConstraints] = None,
    ) -> list[Activity]:
        start = start_location.coordinates if start_location else None
        return two_opt(nearest_neighbor(flexible, start))
