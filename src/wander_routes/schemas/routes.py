"""Route building and optimization request/response schemas."""

from __future__ import annotations

from datetime import date, datetime
from typing import List, Literal, Optional

from pydantic import BaseModel, Field

from ..models.domain import OptimizationStrategy, TimeFlexibility, TransportMode

CLOCK_PATTERN = r"^\d{2}:\d{2}$"


class CoordinatesModel(BaseModel):
    latitude: float
    longitude: float


class LocationModel(BaseModel):
    coordinates: CoordinatesModel
    name: str = ""
    address: str = ""
    id: Optional[str] = None
    place_id: Optional[str] = None


class TimeWindowModel(BaseModel):
    start: str = Field(..., pattern=CLOCK_PATTERN)
    end: str = Field(..., pattern=CLOCK_PATTERN)


class OperatingHoursModel(BaseModel):
    day_of_week: int = Field(..., ge=0, le=6, description="0 = Sunday")
    open: str = Field(..., pattern=CLOCK_PATTERN)
    close: str = Field(..., pattern=CLOCK_PATTERN)
    is_closed: bool = False


class ActivityModel(BaseModel):
    id: str
    name: str
    category: str = "other"
    location: LocationModel
    duration: int = Field(..., gt=0, description="Minutes spent at the activity.")
    priority: int = 3
    flexibility: TimeFlexibility = TimeFlexibility.FLEXIBLE
    is_locked: bool = False
    preferred_time_window: Optional[TimeWindowModel] = None
    scheduled_time: Optional[datetime] = None
    reservation_time: Optional[datetime] = None
    operating_hours: List[OperatingHoursModel] = Field(default_factory=list)


class TransportPreferencesModel(BaseModel):
    preferred_modes: List[TransportMode]
    max_walking_distance: float = Field(1500.0, ge=0)
    max_walking_duration: int = Field(20, ge=0)
    avoid_highways: bool = False
    avoid_tolls: bool = False
    wheelchair_accessible: bool = False


class ConstraintsModel(BaseModel):
    start_time: str = Field("09:00", pattern=CLOCK_PATTERN)
    end_time: str = Field("21:00", pattern=CLOCK_PATTERN)
    lunch_window: Optional[TimeWindowModel] = None
    dinner_window: Optional[TimeWindowModel] = None


class BuildRouteRequest(BaseModel):
    activities: List[ActivityModel]
    date: date
    start_time: Optional[str] = Field(default=None, pattern=CLOCK_PATTERN)
    preferences: Optional[TransportPreferencesModel] = None
    start_location: Optional[LocationModel] = None
    end_location: Optional[LocationModel] = None


class OptimizeRequest(BaseModel):
    activities: List[ActivityModel]
    date: date
    strategy: Optional[OptimizationStrategy] = None
    preferences: Optional[TransportPreferencesModel] = None
    constraints: Optional[ConstraintsModel] = Field(
        default=None, description="Defaults to the configured day window and meal windows."
    )
    start_location: Optional[LocationModel] = None
    end_location: Optional[LocationModel] = None


class RouteStopModel(BaseModel):
    activity_id: str
    activity_name: str
    arrival_time: datetime
    departure_time: datetime
    wait_time: int
    order: int
    original_order: Optional[int] = None
    was_reordered: bool = False
    time_delta: Optional[int] = None


class TravelSegmentModel(BaseModel):
    id: str
    from_activity_id: str
    to_activity_id: str
    mode: TransportMode
    distance: float
    duration: int
    departure_time: datetime
    arrival_time: datetime


class RouteModel(BaseModel):
    date: date
    stops: List[RouteStopModel]
    travel_segments: List[TravelSegmentModel]
    total_duration: int
    total_travel_time: int
    total_distance: float
    total_wait_time: int
    activity_time: int
    start_time: datetime
    end_time: datetime
    start_location: Optional[LocationModel] = None
    end_location: Optional[LocationModel] = None
    is_optimized: bool = False


class RouteChangeModel(BaseModel):
    id: str
    activity_id: str
    activity_name: str
    change_type: Literal["reorder"] = "reorder"
    from_position: int = Field(..., ge=1)
    to_position: int = Field(..., ge=1)
    original_time: datetime
    new_time: datetime
    time_delta: Optional[int] = None
    reason: str
    impact: str


class RouteWarningModel(BaseModel):
    type: str
    message: str
    severity: Literal["low", "medium", "high"]
    activity_id: Optional[str] = None


class OptimizationResultModel(BaseModel):
    id: str
    strategy: OptimizationStrategy
    time_saved: int
    distance_saved: float
    change_count: int
    score: int
    original_score: int
    score_improvement: int
    changes: List[RouteChangeModel]
    warnings: List[RouteWarningModel]
    original_route: RouteModel
    optimized_route: RouteModel
    calculated_at: datetime


class ApplyChangesRequest(BaseModel):
    """Original activity order plus the reviewed change list from an optimize call."""

    activities: List[ActivityModel]
    date: date
    changes: List[RouteChangeModel]
    approved_change_ids: List[str] = Field(default_factory=list)
    start_time: Optional[str] = Field(default=None, pattern=CLOCK_PATTERN)
    preferences: Optional[TransportPreferencesModel] = None
    start_location: Optional[LocationModel] = None
    end_location: Optional[LocationModel] = None
    mode: Optional[Literal["permutation", "splice"]] = None
