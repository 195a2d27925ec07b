"""Route optimization orchestration service."""

from __future__ import annotations

import logging
import uuid
from dataclasses import replace
from datetime import date, datetime, timezone
from typing import Optional, Sequence

from ...models.domain import (
    Activity,
    Location,
    OptimizationConstraints,
    OptimizationStrategy,
    TransportPreferences,
)
from ..routing.builder import build_route
from ..routing.models import Route, RouteStop
from .dispatcher import get_strategy
from .merge import merge_fixed
from .models import OptimizationResult, RouteChange
from .scoring import calculate_score, generate_warnings

logger = logging.getLogger(__name__)

MIN_ACTIVITIES = 2


class InsufficientActivitiesError(ValueError):
    """Raised when there are too few activities for reordering to mean anything."""


def _minutes_between(later: datetime, earlier: datetime) -> int:
    return round((later - earlier).total_seconds() / 60)


def _annotate_stops(optimized: Route, original: Route) -> Route:
    """Record each stop's original position and how its arrival moved."""

    original_positions = {stop.activity.id: stop.order for stop in original.stops}
    stops: list[RouteStop] = []
    for stop in optimized.stops:
        original_order = original_positions.get(stop.activity.id)
        reordered = original_order is not None and original_order != stop.order
        time_delta = None
        if reordered:
            original_stop = original.stop_for(stop.activity.id)
            time_delta = _minutes_between(stop.arrival_time, original_stop.arrival_time)
        stops.append(
            replace(stop, original_order=original_order, was_reordered=reordered, time_delta=time_delta)
        )
    return replace(optimized, stops=tuple(stops), is_optimized=True)


def change_reason(from_position: int, to_position: int) -> str:
    if to_position < from_position:
        return "Moved earlier to reduce travel time"
    return "Moved later to optimize route flow"


def change_impact(time_delta: Optional[int]) -> str:
    if not time_delta:
        return "No significant time change"
    if time_delta > 0:
        return f"Arrives {time_delta} minutes later"
    return f"Arrives {abs(time_delta)} minutes earlier"


def generate_changes(original: Route, optimized: Route) -> list[RouteChange]:
    """One reorder change per activity whose position differs between routes."""

    changes: list[RouteChange] = []
    for stop in optimized.stops:
        original_stop = original.stop_for(stop.activity.id)
        if original_stop is None or original_stop.order == stop.order:
            continue
        from_position = original_stop.order + 1
        to_position = stop.order + 1
        time_delta = stop.time_delta
        if time_delta is None:
            time_delta = _minutes_between(stop.arrival_time, original_stop.arrival_time)
        changes.append(
            RouteChange(
                id=f"change_{stop.activity.id}",
                activity_id=stop.activity.id,
                activity_name=stop.activity.name,
                from_position=from_position,
                to_position=to_position,
                original_time=original_stop.arrival_time,
                new_time=stop.arrival_time,
                time_delta=time_delta,
                reason=change_reason(from_position, to_position),
                impact=change_impact(time_delta),
            )
        )
    return changes


def reorder(
    activities: Sequence[Activity],
    strategy: OptimizationStrategy | str,
    constraints: OptimizationConstraints,
    start_location: Optional[Location] = None,
) -> list[Activity]:
    """Apply ``strategy`` to the flexible activities and merge the fixed ones back."""

    fixed = [activity for activity in activities if activity.is_fixed]
    flexible = [activity for activity in activities if not activity.is_fixed]
    ordering = get_strategy(strategy)
    ordered = ordering.order(flexible, start_location=start_location, constraints=constraints)
    logger.debug(f"{ordering.name}: ordered {len(flexible)} flexible activities, merging {len(fixed)} fixed")
    return merge_fixed(ordered, fixed)


def optimize_route(
    activities: Sequence[Activity],
    day: date | datetime | str,
    strategy: OptimizationStrategy | str,
    preferences: TransportPreferences,
    constraints: OptimizationConstraints,
    start_location: Optional[Location] = None,
    end_location: Optional[Location] = None,
) -> OptimizationResult:
    if len(activities) < MIN_ACTIVITIES:
        logger.warning(f"Optimization requested with {len(activities)} activities")
        raise InsufficientActivitiesError("Need at least 2 activities to optimize")

    try:
        strategy = OptimizationStrategy(strategy)
    except ValueError as exc:
        raise ValueError(f"Unknown optimization strategy '{strategy}'.") from exc
    original_route = build_route(
        activities, day, constraints.start_time, preferences, start_location, end_location
    )

    optimized_order = reorder(activities, strategy, constraints, start_location)
    optimized_route = _annotate_stops(
        build_route(optimized_order, day, constraints.start_time, preferences, start_location, end_location),
        original_route,
    )

    changes = generate_changes(original_route, optimized_route)
    time_saved = max(0, original_route.total_travel_time - optimized_route.total_travel_time)
    distance_saved = max(0.0, original_route.total_distance - optimized_route.total_distance)

    result = OptimizationResult(
        id=f"opt_{uuid.uuid4().hex[:12]}",
        original_route=original_route,
        optimized_route=optimized_route,
        strategy=strategy,
        time_saved=time_saved,
        distance_saved=distance_saved,
        changes=tuple(changes),
        score=calculate_score(optimized_route, constraints),
        original_score=calculate_score(original_route, constraints),
        warnings=tuple(generate_warnings(optimized_route, constraints)),
        preferences=preferences,
        constraints=constraints,
        calculated_at=datetime.now(timezone.utc),
    )
    logger.info(
        f"Optimized {len(activities)} activities with {strategy.value}: "
        f"{len(changes)} changes, {time_saved} min and {distance_saved:.0f} m saved, "
        f"score {result.original_score} -> {result.score}"
    )
    return result
