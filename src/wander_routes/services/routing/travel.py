"""Distance, travel-time and transport-mode estimation between stops."""

from __future__ import annotations

import math
from datetime import datetime
from typing import Optional

from ...config import settings
from ...models.domain import Coordinates, TransportMode, TransportPreferences
from ..geospatial import haversine_km, haversine_m

# Average speeds in km/h
AVERAGE_SPEEDS_KMH: dict[TransportMode, float] = {
    TransportMode.WALKING: 5.0,
    TransportMode.CYCLING: 15.0,
    TransportMode.DRIVING: 30.0,
    TransportMode.TRANSIT: 25.0,
    TransportMode.RIDESHARE: 30.0,
    TransportMode.TAXI: 30.0,
}

ROAD_MODES = frozenset({TransportMode.DRIVING, TransportMode.RIDESHARE, TransportMode.TAXI})
# Scan order is the caller's preference list; this only restricts membership.
MOTORISED_FALLBACK_MODES = frozenset(
    {TransportMode.TRANSIT, TransportMode.RIDESHARE, TransportMode.DRIVING, TransportMode.TAXI}
)


def distance(origin: Coordinates, destination: Coordinates) -> float:
    """Great-circle distance in meters."""

    return haversine_m(origin.latitude, origin.longitude, destination.latitude, destination.longitude)


def _in_rush_hour(moment: datetime) -> bool:
    return any(start <= moment.hour <= end for start, end in settings.rush_hour_ranges())


def travel_time(
    origin: Coordinates,
    destination: Coordinates,
    mode: TransportMode,
    departure_time: Optional[datetime] = None,
) -> int:
    """Estimated door-to-door minutes using a static speed and rush-hour model."""

    distance_km = haversine_km(origin.latitude, origin.longitude, destination.latitude, destination.longitude)
    minutes = distance_km / AVERAGE_SPEEDS_KMH[mode] * 60

    if mode in ROAD_MODES and departure_time is not None and _in_rush_hour(departure_time):
        minutes *= settings.rush_hour_multiplier

    if mode == TransportMode.TRANSIT:
        minutes += settings.transit_buffer_minutes

    return math.ceil(minutes)


def select_mode(distance_m: float, preferences: TransportPreferences) -> TransportMode:
    """Pick a transport mode by ordered preference; not a cost optimizer."""

    if distance_m <= preferences.max_walking_distance and preferences.allows(TransportMode.WALKING):
        return TransportMode.WALKING
    if distance_m <= settings.cycling_max_distance_m and preferences.allows(TransportMode.CYCLING):
        return TransportMode.CYCLING
    for mode in preferences.preferred_modes:
        if mode in MOTORISED_FALLBACK_MODES:
            return mode
    return TransportMode.TRANSIT
