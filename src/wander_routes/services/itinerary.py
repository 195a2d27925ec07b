"""Caller-side owner of one day plan: activities, settings, review and apply."""

from __future__ import annotations

import logging
from dataclasses import replace
from datetime import date
from typing import Optional, Sequence

from ..config import settings
from ..models.domain import (
    Activity,
    Location,
    OptimizationConstraints,
    OptimizationStrategy,
    TimeWindow,
    TransportMode,
    TransportPreferences,
)
from .approval import ReviewSession
from .optimization.models import OptimizationResult
from .optimization.service import InsufficientActivitiesError, optimize_route
from .routing.builder import build_route
from .routing.models import Route
from .routing.travel import travel_time

logger = logging.getLogger(__name__)


def default_preferences() -> TransportPreferences:
    return TransportPreferences(
        preferred_modes=tuple(TransportMode(mode) for mode in settings.default_preferred_modes),
        max_walking_distance=settings.default_max_walking_distance_m,
        max_walking_duration=settings.default_max_walking_duration_min,
    )


def _window(bounds: Sequence[str]) -> Optional[TimeWindow]:
    return TimeWindow(start=bounds[0], end=bounds[1]) if len(bounds) == 2 else None


def default_constraints() -> OptimizationConstraints:
    return OptimizationConstraints(
        start_time=settings.default_day_start,
        end_time=settings.default_day_end,
        lunch_window=_window(settings.default_lunch_window),
        dinner_window=_window(settings.default_dinner_window),
    )


class ItinerarySession:
    """Single-owner state for planning and reviewing one day.

    Not safe for concurrent writers; keep one instance per review.
    """

    def __init__(
        self,
        day: date,
        activities: Sequence[Activity] = (),
        *,
        strategy: OptimizationStrategy | str | None = None,
        preferences: Optional[TransportPreferences] = None,
        constraints: Optional[OptimizationConstraints] = None,
        start_location: Optional[Location] = None,
        end_location: Optional[Location] = None,
    ) -> None:
        self.day = day
        self.strategy = OptimizationStrategy(strategy or settings.default_strategy)
        self.preferences = preferences or default_preferences()
        self.constraints = constraints or default_constraints()
        self.start_location = start_location
        self.end_location = end_location
        self.activities: list[Activity] = list(activities)
        self.result: Optional[OptimizationResult] = None
        self.review: Optional[ReviewSession] = None
        self.error: Optional[str] = None

    # Activity management

    def _invalidate(self) -> None:
        self.result = None
        self.review = None

    def _index_of(self, activity_id: str) -> int:
        for index, activity in enumerate(self.activities):
            if activity.id == activity_id:
                return index
        raise ValueError(f"Unknown activity '{activity_id}'.")

    def set_activities(self, activities: Sequence[Activity]) -> None:
        self.activities = list(activities)
        self._invalidate()

    def add_activity(self, activity: Activity) -> None:
        self.activities.append(activity)
        self._invalidate()

    def update_activity(self, activity: Activity) -> None:
        self.activities[self._index_of(activity.id)] = activity
        self._invalidate()

    def remove_activity(self, activity_id: str) -> None:
        del self.activities[self._index_of(activity_id)]
        self._invalidate()

    def reorder_activities(self, from_index: int, to_index: int) -> None:
        moved = self.activities.pop(from_index)
        self.activities.insert(to_index, moved)
        self._invalidate()

    def lock_activity(self, activity_id: str, locked: bool = True) -> None:
        index = self._index_of(activity_id)
        self.activities[index] = replace(self.activities[index], is_locked=locked)

    # Routing

    def preview(self) -> Route:
        return build_route(
            self.activities,
            self.day,
            self.constraints.start_time,
            self.preferences,
            self.start_location,
            self.end_location,
        )

    def optimize(self) -> Optional[OptimizationResult]:
        self.error = None
        self._invalidate()
        try:
            result = optimize_route(
                self.activities,
                self.day,
                self.strategy,
                self.preferences,
                self.constraints,
                self.start_location,
                self.end_location,
            )
        except InsufficientActivitiesError as exc:
            self.error = str(exc)
            return None
        self.result = result
        self.review = ReviewSession(result)
        return result

    def apply(self) -> Optional[Route]:
        """Adopt the reviewed changes; a new optimize call is needed afterwards."""

        if self.review is None:
            return None
        route = self.review.apply(self.activities)
        self.activities = route.activity_order
        self._invalidate()
        return route

    # Metrics

    @property
    def time_saved(self) -> int:
        return self.result.time_saved if self.result else 0

    @property
    def distance_saved(self) -> float:
        return self.result.distance_saved if self.result else 0.0

    @property
    def score_improvement(self) -> int:
        return self.result.score_improvement if self.result else 0

    def estimate_travel_time(self, origin: Activity, destination: Activity) -> int:
        modes = self.preferences.preferred_modes
        mode = modes[0] if modes else TransportMode.TRANSIT
        return travel_time(origin.coordinates, destination.coordinates, mode)

    def estimate_total_duration(self) -> int:
        total = sum(activity.duration for activity in self.activities)
        for origin, destination in zip(self.activities, self.activities[1:]):
            total += self.estimate_travel_time(origin, destination)
        return total

    def reset(self) -> None:
        self.activities = []
        self.error = None
        self._invalidate()
        logger.debug("Itinerary session reset")
