"""Route building, optimization and approval endpoints."""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException, status

from ...config import settings
from ...models.domain import OptimizationStrategy
from ...schemas.routes import (
    ApplyChangesRequest,
    BuildRouteRequest,
    OptimizationResultModel,
    OptimizeRequest,
    RouteModel,
)
from ...services.approval import reorder_partial
from ...services.itinerary import default_constraints, default_preferences
from ...services.optimization.service import optimize_route
from ...services.outputs.route_formatter import (
    activities_from_models,
    change_from_model,
    constraints_from_model,
    location_from_model,
    preferences_from_model,
    result_to_model,
    route_to_model,
)
from ...services.routing.builder import build_route

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/routes", tags=["routes"])


@router.post("/build", response_model=RouteModel, status_code=status.HTTP_200_OK)
def build(payload: BuildRouteRequest) -> RouteModel:
    """Time the activities in the order given, without reordering."""
    try:
        preferences = preferences_from_model(payload.preferences) if payload.preferences else default_preferences()
        route = build_route(
            activities_from_models(payload.activities),
            payload.date,
            payload.start_time or settings.default_day_start,
            preferences,
            location_from_model(payload.start_location),
            location_from_model(payload.end_location),
        )
        return route_to_model(route)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    except Exception as exc:
        logger.exception(f"Error building route: {exc}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to build route: {str(exc)}",
        ) from exc


@router.post("/optimize", response_model=OptimizationResultModel, status_code=status.HTTP_200_OK)
def optimize(payload: OptimizeRequest) -> OptimizationResultModel:
    try:
        result = optimize_route(
            activities_from_models(payload.activities),
            payload.date,
            payload.strategy or OptimizationStrategy(settings.default_strategy),
            preferences_from_model(payload.preferences) if payload.preferences else default_preferences(),
            constraints_from_model(payload.constraints) if payload.constraints else default_constraints(),
            location_from_model(payload.start_location),
            location_from_model(payload.end_location),
        )
        return result_to_model(result)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    except Exception as exc:
        logger.exception(f"Error optimizing route: {exc}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to optimize route: {str(exc)}",
        ) from exc


@router.post("/apply", response_model=RouteModel, status_code=status.HTTP_200_OK)
def apply_changes(payload: ApplyChangesRequest) -> RouteModel:
    """Rebuild the day from the original order and the approved changes.

    The service keeps no review state, so the caller sends back the change
    list it received from ``/optimize`` together with the approved ids.
    """
    try:
        activities = activities_from_models(payload.activities)
        known = {activity.id for activity in activities}
        changes = [change_from_model(change) for change in payload.changes]
        unknown = [change.activity_id for change in changes if change.activity_id not in known]
        if unknown:
            raise ValueError(f"Changes refer to unknown activities: {', '.join(unknown)}")

        approved = set(payload.approved_change_ids)
        # Pinning every change reproduces the optimized order exactly.
        mode = "permutation" if all(change.id in approved for change in changes) else payload.mode
        new_order = reorder_partial(activities, changes, approved, mode)

        preferences = preferences_from_model(payload.preferences) if payload.preferences else default_preferences()
        route = build_route(
            new_order,
            payload.date,
            payload.start_time or settings.default_day_start,
            preferences,
            location_from_model(payload.start_location),
            location_from_model(payload.end_location),
        )
        return route_to_model(route)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    except Exception as exc:
        logger.exception(f"Error applying route changes: {exc}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to apply route changes: {str(exc)}",
        ) from exc
