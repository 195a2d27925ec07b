"""Re-insert fixed and locked activities into a reordered sequence."""

from __future__ import annotations

from datetime import datetime
from typing import Optional, Sequence

from ...models.domain import Activity
from ..timeutils import at_clock


def _target_time(activity: Activity) -> Optional[datetime]:
    return activity.reservation_time or activity.scheduled_time


def _own_time(activity: Activity, reference: datetime) -> Optional[datetime]:
    if activity.scheduled_time is not None:
        return _align(activity.scheduled_time, reference)
    window = activity.preferred_time_window
    if window is not None and window.start:
        return _align(at_clock(reference, window.start), reference)
    return None


def _align(moment: datetime, reference: datetime) -> datetime:
    """Put ``moment`` on the same naive/aware footing as ``reference``.

    Naive times are read as wall-clock times in the reference's zone.
    """

    if reference.tzinfo is None:
        return moment.replace(tzinfo=None)
    if moment.tzinfo is None:
        return moment.replace(tzinfo=reference.tzinfo)
    return moment


def merge_fixed(flexible: Sequence[Activity], fixed: Sequence[Activity]) -> list[Activity]:
    """Splice each fixed activity in by its reservation or scheduled time.

    This is a best-guess insertion, not a constraint solver: the fixed
    activity lands before the first activity timed strictly later than its
    target, activities without any time count as earlier, and nothing checks
    that the resulting schedule honours the reservation. Fixed activities
    without a target time are appended in their given order.
    """

    merged = list(flexible)
    for activity in fixed:
        target = _target_time(activity)
        if target is None:
            merged.append(activity)
            continue

        insert_at = 0
        for index, existing in enumerate(merged):
            existing_time = _own_time(existing, target)
            if existing_time is not None and existing_time > target:
                break
            insert_at = index + 1
        merged.insert(insert_at, activity)
    return merged
