"""Optimization result models."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Optional

from ...models.domain import OptimizationConstraints, OptimizationStrategy, TransportPreferences
from ..routing.models import Route


class WarningSeverity(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


@dataclass(slots=True, frozen=True)
class RouteWarning:
    type: str
    message: str
    severity: WarningSeverity
    activity_id: Optional[str] = None


@dataclass(slots=True, frozen=True)
class RouteChange:
    """One reported reorder; positions are 1-based."""

    id: str
    activity_id: str
    activity_name: str
    from_position: int
    to_position: int
    original_time: datetime
    new_time: datetime
    reason: str
    impact: str
    time_delta: Optional[int] = None
    change_type: str = "reorder"


@dataclass(slots=True, frozen=True)
class OptimizationResult:
    id: str
    original_route: Route
    optimized_route: Route
    strategy: OptimizationStrategy
    time_saved: int
    distance_saved: float
    changes: tuple[RouteChange, ...]
    score: int
    original_score: int
    warnings: tuple[RouteWarning, ...]
    preferences: TransportPreferences
    constraints: OptimizationConstraints
    calculated_at: datetime

    @property
    def change_count(self) -> int:
        return len(self.changes)

    @property
    def score_improvement(self) -> int:
        return self.score - self.original_score

    def change(self, change_id: str) -> Optional[RouteChange]:
        return next((change for change in self.changes if change.id == change_id), None)
