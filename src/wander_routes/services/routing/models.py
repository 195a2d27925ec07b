"""Routing domain models."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ...models.domain import Activity, Location, TransportMode


@dataclass(slots=True, frozen=True)
class RouteStop:
    activity: Activity
    arrival_time: datetime
    departure_time: datetime
    wait_time: int
    order: int
    original_order: Optional[int] = None
    was_reordered: bool = False
    time_delta: Optional[int] = None

    @property
    def id(self) -> str:
        return f"stop_{self.activity.id}"


@dataclass(slots=True, frozen=True)
class TravelSegment:
    id: str
    from_activity_id: str
    to_activity_id: str
    mode: TransportMode
    distance: float
    duration: int
    departure_time: datetime
    arrival_time: datetime


@dataclass(slots=True, frozen=True)
class Route:
    """Immutable, fully time-stamped snapshot of one ordering of a day."""

    date: date
    stops: tuple[RouteStop, ...]
    travel_segments: tuple[TravelSegment, ...]
    total_duration: int
    total_travel_time: int
    total_distance: float
    total_wait_time: int
    activity_time: int
    start_time: datetime
    end_time: datetime
    start_location: Optional[Location] = None
    end_location: Optional[Location] = None
    is_optimized: bool = False

    @property
    def activity_order(self) -> list[Activity]:
        return [stop.activity for stop in self.stops]

    def stop_for(self, activity_id: str) -> Optional[RouteStop]:
        for stop in self.stops:
            if stop.activity.id == activity_id:
                return stop
        return None
