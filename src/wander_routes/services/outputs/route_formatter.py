"""Conversions between API schemas and routing domain objects."""

from __future__ import annotations

from typing import Optional, Sequence

from ...models.domain import (
    Activity,
    Coordinates,
    Location,
    OperatingHours,
    OptimizationConstraints,
    TimeWindow,
    TransportPreferences,
)
from ...schemas.routes import (
    ActivityModel,
    ConstraintsModel,
    CoordinatesModel,
    LocationModel,
    OptimizationResultModel,
    RouteChangeModel,
    RouteModel,
    RouteStopModel,
    RouteWarningModel,
    TimeWindowModel,
    TransportPreferencesModel,
    TravelSegmentModel,
)
from ..optimization.models import OptimizationResult, RouteChange
from ..routing.models import Route


def _window(model: Optional[TimeWindowModel]) -> Optional[TimeWindow]:
    return TimeWindow(start=model.start, end=model.end) if model else None


def location_from_model(model: Optional[LocationModel]) -> Optional[Location]:
    if model is None:
        return None
    return Location(
        coordinates=Coordinates(model.coordinates.latitude, model.coordinates.longitude),
        name=model.name,
        address=model.address,
        id=model.id,
        place_id=model.place_id,
    )


def location_to_model(location: Optional[Location]) -> Optional[LocationModel]:
    if location is None:
        return None
    return LocationModel(
        coordinates=CoordinatesModel(
            latitude=location.coordinates.latitude, longitude=location.coordinates.longitude
        ),
        name=location.name,
        address=location.address,
        id=location.id,
        place_id=location.place_id,
    )


def activity_from_model(model: ActivityModel) -> Activity:
    return Activity(
        id=model.id,
        name=model.name,
        category=model.category,
        location=location_from_model(model.location),
        duration=model.duration,
        priority=model.priority,
        flexibility=model.flexibility,
        is_locked=model.is_locked,
        preferred_time_window=_window(model.preferred_time_window),
        scheduled_time=model.scheduled_time,
        reservation_time=model.reservation_time,
        operating_hours=tuple(
            OperatingHours(
                day_of_week=hours.day_of_week,
                open=hours.open,
                close=hours.close,
                is_closed=hours.is_closed,
            )
            for hours in model.operating_hours
        ),
    )


def activities_from_models(models: Sequence[ActivityModel]) -> list[Activity]:
    return [activity_from_model(model) for model in models]


def preferences_from_model(model: TransportPreferencesModel) -> TransportPreferences:
    return TransportPreferences(
        preferred_modes=tuple(model.preferred_modes),
        max_walking_distance=model.max_walking_distance,
        max_walking_duration=model.max_walking_duration,
        avoid_highways=model.avoid_highways,
        avoid_tolls=model.avoid_tolls,
        wheelchair_accessible=model.wheelchair_accessible,
    )


def constraints_from_model(model: ConstraintsModel) -> OptimizationConstraints:
    return OptimizationConstraints(
        start_time=model.start_time,
        end_time=model.end_time,
        lunch_window=_window(model.lunch_window),
        dinner_window=_window(model.dinner_window),
    )


def change_from_model(model: RouteChangeModel) -> RouteChange:
    return RouteChange(
        id=model.id,
        activity_id=model.activity_id,
        activity_name=model.activity_name,
        from_position=model.from_position,
        to_position=model.to_position,
        original_time=model.original_time,
        new_time=model.new_time,
        reason=model.reason,
        impact=model.impact,
        time_delta=model.time_delta,
        change_type=model.change_type,
    )


def change_to_model(change: RouteChange) -> RouteChangeModel:
    return RouteChangeModel(
        id=change.id,
        activity_id=change.activity_id,
        activity_name=change.activity_name,
        change_type=change.change_type,
        from_position=change.from_position,
        to_position=change.to_position,
        original_time=change.original_time,
        new_time=change.new_time,
        time_delta=change.time_delta,
        reason=change.reason,
        impact=change.impact,
    )


def route_to_model(route: Route) -> RouteModel:
    return RouteModel(
        date=route.date,
        stops=[
            RouteStopModel(
                activity_id=stop.activity.id,
                activity_name=stop.activity.name,
                arrival_time=stop.arrival_time,
                departure_time=stop.departure_time,
                wait_time=stop.wait_time,
                order=stop.order,
                original_order=stop.original_order,
                was_reordered=stop.was_reordered,
                time_delta=stop.time_delta,
            )
            for stop in route.stops
        ],
        travel_segments=[
            TravelSegmentModel(
                id=segment.id,
                from_activity_id=segment.from_activity_id,
                to_activity_id=segment.to_activity_id,
                mode=segment.mode,
                distance=segment.distance,
                duration=segment.duration,
                departure_time=segment.departure_time,
                arrival_time=segment.arrival_time,
            )
            for segment in route.travel_segments
        ],
        total_duration=route.total_duration,
        total_travel_time=route.total_travel_time,
        total_distance=route.total_distance,
        total_wait_time=route.total_wait_time,
        activity_time=route.activity_time,
        start_time=route.start_time,
        end_time=route.end_time,
        start_location=location_to_model(route.start_location),
        end_location=location_to_model(route.end_location),
        is_optimized=route.is_optimized,
    )


def result_to_model(result: OptimizationResult) -> OptimizationResultModel:
    return OptimizationResultModel(
        id=result.id,
        strategy=result.strategy,
        time_saved=result.time_saved,
        distance_saved=result.distance_saved,
        change_count=result.change_count,
        score=result.score,
        original_score=result.original_score,
        score_improvement=result.score_improvement,
        changes=[change_to_model(change) for change in result.changes],
        warnings=[
            RouteWarningModel(
                type=warning.type,
                message=warning.message,
                severity=warning.severity.value,
                activity_id=warning.activity_id,
            )
            for warning in result.warnings
        ],
        original_route=route_to_model(result.original_route),
        optimized_route=route_to_model(result.optimized_route),
        calculated_at=result.calculated_at,
    )
