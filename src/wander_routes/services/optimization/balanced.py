"""Balanced ordering: proximity, meal timing, then 2-opt."""

from __future__ import annotations

import logging
from typing import Optional, Sequence

from ...models.domain import Activity, Location, OptimizationConstraints, TimeWindow
from ..timeutils import parse_clock
from .base import OrderingStrategy
from .nearest_neighbor import nearest_neighbor
from .two_opt import two_opt

logger = logging.getLogger(__name__)

DINING_CATEGORY = "dining"
# Rough slot clock used to place meals: first slot at 09:00, one every 90 minutes.
ESTIMATED_DAY_START_MIN = 9 * 60
ESTIMATED_SLOT_MIN = 90


def adjust_for_meal_time(route: Sequence[Activity], category: str, window: TimeWindow) -> list[Activity]:
    """Move the first ``category`` activity to the slot nearest the window midpoint."""

    ordered = list(route)
    meal_index = next((i for i, activity in enumerate(ordered) if activity.category == category), None)
    if meal_index is None:
        return ordered

    midpoint = (parse_clock(window.start) + parse_clock(window.end)) / 2
    best_position = min(
        range(len(ordered)),
        key=lambda i: abs(ESTIMATED_DAY_START_MIN + i * ESTIMATED_SLOT_MIN - midpoint),
    )
    if best_position != meal_index:
        meal = ordered.pop(meal_index)
        ordered.insert(best_position, meal)
        logger.debug(f"Moved {meal.id} from slot {meal_index} to {best_position} for window {window.start}-{window.end}")
    return ordered


class BalancedOrdering(OrderingStrategy):
    name = "balanced"

    def order(
        self,
        flexible: Sequence[Activity],
        *,
        start_location: Optional[Location] = None,
        constraints: Optional[OptimizationConstraints] = None,
    ) -> list[Activity]:
        start = start_location.coordinates if start_location else None
        route = nearest_neighbor(flexible, start)
        if constraints is not None:
            for window in (constraints.lunch_window, constraints.dinner_window):
                if window is not None:
                    route = adjust_for_meal_time(route, DINING_CATEGORY, window)
        return two_opt(route)
