"""Health endpoints."""

from __future__ import annotations

from fastapi import APIRouter, status

from ...config import settings
from ...models.domain import OptimizationStrategy

router = APIRouter(tags=["health"])


@router.get("/health", status_code=status.HTTP_200_OK)
def health_root() -> dict:
    """Simple health check endpoint that doesn't require any dependencies."""
    return {"status": "ok"}


@router.get("/health/config", status_code=status.HTTP_200_OK)
def health_config() -> dict:
    """Report the defaults applied when requests omit preferences or constraints."""
    return {
        "default_strategy": settings.default_strategy,
        "strategies": [strategy.value for strategy in OptimizationStrategy],
        "day_window": [settings.default_day_start, settings.default_day_end],
        "preferred_modes": list(settings.default_preferred_modes),
        "approval_apply_mode": settings.approval_apply_mode,
    }
