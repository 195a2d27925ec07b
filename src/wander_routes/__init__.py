"""Multi-stop itinerary route optimization."""

from .models.domain import (
    Activity,
    Coordinates,
    Location,
    OperatingHours,
    OptimizationConstraints,
    OptimizationStrategy,
    TimeFlexibility,
    TimeWindow,
    TransportMode,
    TransportPreferences,
)
from .services.approval import ApprovalStatus, ReviewSession, apply_approved_changes
from .services.itinerary import ItinerarySession
from .services.optimization.models import OptimizationResult, RouteChange, RouteWarning
from .services.optimization.service import InsufficientActivitiesError, optimize_route
from .services.routing.builder import build_route
from .services.routing.models import Route, RouteStop, TravelSegment

__all__ = [
    "Activity",
    "ApprovalStatus",
    "Coordinates",
    "InsufficientActivitiesError",
    "ItinerarySession",
    "Location",
    "OperatingHours",
    "OptimizationConstraints",
    "OptimizationResult",
    "OptimizationStrategy",
    "ReviewSession",
    "Route",
    "RouteChange",
    "RouteStop",
    "RouteWarning",
    "TimeFlexibility",
    "TimeWindow",
    "TransportMode",
    "TransportPreferences",
    "TravelSegment",
    "apply_approved_changes",
    "build_route",
    "optimize_route",
]
