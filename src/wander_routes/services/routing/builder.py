"""Deterministic day simulator turning an activity order into a timed route."""

from __future__ import annotations

import math
from datetime import date, datetime, timedelta
from typing import Optional, Sequence

from ...models.domain import Activity, Location, OperatingHours, TransportPreferences
from ..timeutils import as_date, at_clock, weekday_sunday_first
from .models import Route, RouteStop, TravelSegment
from .travel import distance, select_mode, travel_time

START_SENTINEL = "start"
END_SENTINEL = "end"


def opening_time(hours: Sequence[OperatingHours], moment: datetime) -> Optional[datetime]:
    """Opening time on ``moment``'s weekday, or None when closed or unlisted."""

    weekday = weekday_sunday_first(moment)
    today = next((entry for entry in hours if entry.day_of_week == weekday), None)
    if today is None or today.is_closed:
        return None
    return at_clock(moment, today.open)


def _leg(
    segment_id: str,
    from_id: str,
    to_id: str,
    origin: Location,
    destination: Location,
    departure: datetime,
    preferences: TransportPreferences,
) -> TravelSegment:
    meters = distance(origin.coordinates, destination.coordinates)
    mode = select_mode(meters, preferences)
    minutes = travel_time(origin.coordinates, destination.coordinates, mode, departure)
    return TravelSegment(
        id=segment_id,
        from_activity_id=from_id,
        to_activity_id=to_id,
        mode=mode,
        distance=meters,
        duration=minutes,
        departure_time=departure,
        arrival_time=departure + timedelta(minutes=minutes),
    )


def build_route(
    activities: Sequence[Activity],
    day: date | datetime | str,
    start_time: str,
    preferences: TransportPreferences,
    start_location: Optional[Location] = None,
    end_location: Optional[Location] = None,
) -> Route:
    """Walk ``activities`` once in the given order and time-stamp every stop.

    Travel legs are only emitted when a previous location is known, so the
    first activity is reached from ``start_location`` if one is given and is
    otherwise the starting point itself. Arrivals before an activity's
    opening time on the same weekday wait until it opens; other days are not
    considered.
    """

    route_date = as_date(day)
    route_start = at_clock(route_date, start_time)

    stops: list[RouteStop] = []
    segments: list[TravelSegment] = []
    current_time = route_start
    total_travel_time = 0
    total_distance = 0.0
    total_wait_time = 0
    activity_time = 0
    previous_location = start_location

    for index, activity in enumerate(activities):
        if previous_location is not None:
            segment = _leg(
                f"travel_{index}",
                START_SENTINEL if index == 0 else activities[index - 1].id,
                activity.id,
                previous_location,
                activity.location,
                current_time,
                preferences,
            )
            segments.append(segment)
            current_time = segment.arrival_time
            total_travel_time += segment.duration
            total_distance += segment.distance

        wait_time = 0
        if activity.operating_hours:
            opens_at = opening_time(activity.operating_hours, current_time)
            if opens_at is not None and current_time < opens_at:
                wait_time = math.ceil((opens_at - current_time).total_seconds() / 60)
                current_time = opens_at

        departure = current_time + timedelta(minutes=activity.duration)
        stops.append(
            RouteStop(
                activity=activity,
                arrival_time=current_time,
                departure_time=departure,
                wait_time=wait_time,
                order=index,
            )
        )
        total_wait_time += wait_time
        activity_time += activity.duration
        current_time = departure
        previous_location = activity.location

    if end_location is not None and previous_location is not None:
        segment = _leg(
            "travel_end",
            activities[-1].id if activities else START_SENTINEL,
            END_SENTINEL,
            previous_location,
            end_location,
            current_time,
            preferences,
        )
        segments.append(segment)
        total_travel_time += segment.duration
        total_distance += segment.distance

    return Route(
        date=route_date,
        stops=tuple(stops),
        travel_segments=tuple(segments),
        total_duration=total_travel_time + total_wait_time + activity_time,
        total_travel_time=total_travel_time,
        total_distance=total_distance,
        total_wait_time=total_wait_time,
        activity_time=activity_time,
        start_time=route_start,
        end_time=current_time,
        start_location=start_location,
        end_location=end_location,
    )
