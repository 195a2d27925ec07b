"""Route quality score and informational warnings."""

from __future__ import annotations

import math

from ...config import settings
from ...models.domain import OptimizationConstraints
from ..routing.models import Route
from ..timeutils import minutes_of_day, parse_clock
from .models import RouteWarning, WarningSeverity

TRAVEL_RATIO_ALLOWANCE = 0.2
TRAVEL_PENALTY_WEIGHT = 100
WAIT_PENALTY_WEIGHT = 50


def _ratio(minutes: float, day_minutes: int) -> float:
    if day_minutes > 0:
        return minutes / day_minutes
    return math.inf if minutes > 0 else 0.0


def calculate_score(route: Route, constraints: OptimizationConstraints) -> int:
    """Score a route from 0 to 100 by its travel and wait share of the day."""

    day_minutes = parse_clock(constraints.end_time) - parse_clock(constraints.start_time)
    score = 100.0

    travel_ratio = _ratio(route.total_travel_time, day_minutes)
    if travel_ratio > TRAVEL_RATIO_ALLOWANCE:
        score -= (travel_ratio - TRAVEL_RATIO_ALLOWANCE) * TRAVEL_PENALTY_WEIGHT

    score -= _ratio(route.total_wait_time, day_minutes) * WAIT_PENALTY_WEIGHT

    if math.isinf(score):
        return 0
    return int(max(0, min(100, math.floor(score + 0.5))))


def generate_warnings(route: Route, constraints: OptimizationConstraints) -> list[RouteWarning]:
    warnings: list[RouteWarning] = []

    for segment in route.travel_segments:
        if segment.duration > settings.long_travel_warning_minutes:
            warnings.append(
                RouteWarning(
                    type="long_travel",
                    message=f"Long travel time ({segment.duration} min) between activities",
                    severity=WarningSeverity.MEDIUM,
                )
            )

    end_minutes = minutes_of_day(route.end_time)
    preferred_end = parse_clock(constraints.end_time)
    if end_minutes > preferred_end:
        warnings.append(
            RouteWarning(
                type="late_finish",
                message=f"Day ends {end_minutes - preferred_end} minutes later than preferred",
                severity=WarningSeverity.MEDIUM,
            )
        )

    for stop in route.stops:
        if stop.wait_time > settings.long_wait_warning_minutes:
            warnings.append(
                RouteWarning(
                    type="long_wait",
                    message=f"{stop.wait_time} minute wait at {stop.activity.name}",
                    severity=WarningSeverity.LOW,
                    activity_id=stop.activity.id,
                )
            )

    return warnings
