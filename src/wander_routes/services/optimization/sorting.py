"""Sort-based orderings that ignore geography."""

from __future__ import annotations

from typing import Optional, Sequence

from ...models.domain import Activity, Location, OptimizationConstraints
from .base import OrderingStrategy

DEFAULT_PREFERRED_START = "12:00"


def preferred_start(activity: Activity) -> str:
    window = activity.preferred_time_window
    return window.start if window and window.start else DEFAULT_PREFERRED_START


class PriorityOrdering(OrderingStrategy):
    name = "priority_first"

    def order(
        self,
        flexible: Sequence[Activity],
        *,
        start_location: Optional[Location] = None,
        constraints: Optional[OptimizationConstraints] = None,
    ) -> list[Activity]:
        return sorted(flexible, key=lambda activity: activity.priority, reverse=True)


class ChronologicalOrdering(OrderingStrategy):
    """Order by preferred start, compared as ``HH:MM`` strings."""

    name = "chronological"

    def order(
        self,
        flexible: Sequence[Activity],
        *,
        start_location: Optional[Location] = None,
        constraints: Optional[OptimizationConstraints] = None,
    ) -> list[Activity]:
        return sorted(flexible, key=preferred_start)
