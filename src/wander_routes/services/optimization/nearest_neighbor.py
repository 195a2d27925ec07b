"""Greedy nearest-neighbour construction."""

from __future__ import annotations

from typing import Optional, Sequence

from ...models.domain import Activity, Coordinates, Location, OptimizationConstraints
from ..routing.travel import distance
from .base import OrderingStrategy


def nearest_neighbor(activities: Sequence[Activity], start: Optional[Coordinates] = None) -> list[Activity]:
    """Repeatedly visit the closest unvisited activity.

    Without a start position the walk begins at the first activity's own
    location, so that activity is picked first.
    """

    if not activities:
        return []

    remaining = list(activities)
    current = start or remaining[0].coordinates
    ordered: list[Activity] = []
    while remaining:
        nearest_index = min(range(len(remaining)), key=lambda i: distance(current, remaining[i].coordinates))
        nearest = remaining.pop(nearest_index)
        ordered.append(nearest)
        current = nearest.coordinates
    return ordered


class NearestNeighborOrdering(OrderingStrategy):
    """Minimise travel time with a single greedy pass."""

    name = "minimize_travel"

    def order(
        self,
        flexible: Sequence[Activity],
        *,
        start_location: Optional[Location] = None,
        constraints: Optional[OptimizationConstraints] = None,
    ) -> list[Activity]:
        start = start_location.coordinates if start_location else None
        return nearest_neighbor(flexible, start)
