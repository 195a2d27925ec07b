"""Reconcile approved route changes into a concrete activity order."""

from __future__ import annotations

import logging
from typing import Collection, Iterable, Literal, Optional, Sequence

from ...config import settings
from ...models.domain import Activity
from ..optimization.models import OptimizationResult, RouteChange
from ..routing.builder import build_route
from ..routing.models import Route

logger = logging.getLogger(__name__)

ApplyMode = Literal["permutation", "splice"]


def reorder_with_approved(
    original: Sequence[Activity],
    changes: Iterable[RouteChange],
    approved_ids: Collection[str],
) -> list[Activity]:
    """Pin approved activities at their target slots and keep the rest in order.

    Works on identities rather than indices, so the outcome does not depend
    on the order the changes are listed in. Every input activity appears
    exactly once in the output.
    """

    by_id = {activity.id: activity for activity in original}
    slots: list[Optional[Activity]] = [None] * len(original)
    pinned: set[str] = set()

    for change in changes:
        if change.id not in approved_ids or change.activity_id not in by_id:
            continue
        target = change.to_position - 1
        if not 0 <= target < len(slots) or slots[target] is not None:
            logger.warning(f"Ignoring change {change.id}: slot {change.to_position} is unavailable")
            continue
        slots[target] = by_id[change.activity_id]
        pinned.add(change.activity_id)

    rest = iter(activity for activity in original if activity.id not in pinned)
    return [slot if slot is not None else next(rest) for slot in slots]


def replay_reorders(original: Sequence[Activity], changes: Iterable[RouteChange]) -> list[Activity]:
    """Replay changes as literal remove/insert index splices, in the given order.

    Each splice shifts the indices that later changes refer to, so the same
    set of changes yields different orders depending on replay order.
    """

    order = list(original)
    for change in changes:
        if change.change_type != "reorder":
            continue
        item = order.pop(change.from_position - 1)
        order.insert(change.to_position - 1, item)
    return order


def reorder_partial(
    original: Sequence[Activity],
    changes: Sequence[RouteChange],
    approved_ids: Collection[str],
    mode: Optional[ApplyMode] = None,
) -> list[Activity]:
    """New order for a partial approval using ``mode`` (configured default)."""

    mode = mode or settings.approval_apply_mode
    if mode == "permutation":
        return reorder_with_approved(original, changes, approved_ids)
    if mode == "splice":
        approved = [change for change in changes if change.id in approved_ids]
        return replay_reorders(original, sorted(approved, key=lambda change: change.to_position))
    raise ValueError(f"Unknown apply mode '{mode}'.")


def apply_approved_changes(
    result: OptimizationResult,
    approved_ids: Collection[str],
    original_activities: Sequence[Activity],
    *,
    mode: Optional[ApplyMode] = None,
) -> Route:
    """Build the new baseline route from the approved subset of ``result``.

    Approving every change adopts the optimized order verbatim; anything less
    goes through ``reorder_partial``.
    """

    approved_count = sum(1 for change in result.changes if change.id in approved_ids)
    if approved_count == len(result.changes):
        # The result holds snapshots from optimize time; keep the caller's current objects.
        current = {activity.id: activity for activity in original_activities}
        new_order = [current.get(activity.id, activity) for activity in result.optimized_route.activity_order]
    else:
        new_order = reorder_partial(original_activities, result.changes, approved_ids, mode)

    logger.info(f"Applying {approved_count} of {len(result.changes)} changes from {result.id}")
    original = result.original_route
    return build_route(
        new_order,
        original.date,
        result.constraints.start_time,
        result.preferences,
        original.start_location,
        original.end_location,
    )
