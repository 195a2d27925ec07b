"""Domain models for planned activities and the settings that shape a day."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Optional


class TransportMode(str, Enum):
    WALKING = "walking"
    CYCLING = "cycling"
    DRIVING = "driving"
    TRANSIT = "transit"
    RIDESHARE = "rideshare"
    TAXI = "taxi"


class TimeFlexibility(str, Enum):
    FIXED = "fixed"
    PREFERRED = "preferred"
    FLEXIBLE = "flexible"
    ANYTIME = "anytime"


class OptimizationStrategy(str, Enum):
    MINIMIZE_TRAVEL = "minimize_travel"
    MINIMIZE_DISTANCE = "minimize_distance"
    PRIORITY_FIRST = "priority_first"
    CHRONOLOGICAL = "chronological"
    BALANCED = "balanced"


@dataclass(slots=True, frozen=True)
class Coordinates:
    latitude: float
    longitude: float


@dataclass(slots=True, frozen=True)
class Location:
    """A place on the map with an optional display name and address."""

    coordinates: Coordinates
    name: str = ""
    address: str = ""
    id: Optional[str] = None
    place_id: Optional[str] = None


@dataclass(slots=True, frozen=True)
class TimeWindow:
    start: str
    end: str


@dataclass(slots=True, frozen=True)
class OperatingHours:
    """Opening hours for one weekday; day_of_week 0 is Sunday."""

    day_of_week: int
    open: str
    close: str
    is_closed: bool = False


@dataclass(slots=True, frozen=True)
class Activity:
    """A planned stop supplied by the caller.

    The optimizer only ever reorders activities; it never creates, drops or
    edits them. ``is_locked`` and ``flexibility == FIXED`` both keep an
    activity out of the reordering heuristics.
    """

    id: str
    name: str
    category: str
    location: Location
    duration: int
    priority: int = 3
    flexibility: TimeFlexibility = TimeFlexibility.FLEXIBLE
    is_locked: bool = False
    preferred_time_window: Optional[TimeWindow] = None
    scheduled_time: Optional[datetime] = None
    reservation_time: Optional[datetime] = None
    operating_hours: tuple[OperatingHours, ...] = ()

    @property
    def coordinates(self) -> Coordinates:
        return self.location.coordinates

    @property
    def is_fixed(self) -> bool:
        return self.flexibility == TimeFlexibility.FIXED or self.is_locked


@dataclass(slots=True, frozen=True)
class TransportPreferences:
    """Allowed transport modes in precedence order plus walking limits.

    ``avoid_highways``, ``avoid_tolls`` and ``wheelchair_accessible`` are
    accepted for callers but not consumed by the estimator.
    """

    preferred_modes: tuple[TransportMode, ...] = (
        TransportMode.WALKING,
        TransportMode.TRANSIT,
        TransportMode.RIDESHARE,
    )
    max_walking_distance: float = 1500.0
    max_walking_duration: int = 20
    avoid_highways: bool = False
    avoid_tolls: bool = False
    wheelchair_accessible: bool = False

    def allows(self, mode: TransportMode) -> bool:
        return mode in self.preferred_modes


@dataclass(slots=True, frozen=True)
class OptimizationConstraints:
    start_time: str = "09:00"
    end_time: str = "21:00"
    lunch_window: Optional[TimeWindow] = None
    dinner_window: Optional[TimeWindow] = None
