from datetime import date, datetime

import pytest

from wander_routes.config import settings
from wander_routes.models.domain import (
    Activity,
    Coordinates,
    Location,
    OptimizationConstraints,
    OptimizationStrategy,
    TransportPreferences,
)
from wander_routes.services.approval import (
    ApprovalStatus,
    ReviewSession,
    apply_approved_changes,
    reorder_partial,
    reorder_with_approved,
    replay_reorders,
)
from wander_routes.services.optimization.models import RouteChange
from wander_routes.services.optimization.service import optimize_route

DAY = date(2024, 6, 3)
NINE = datetime(2024, 6, 3, 9, 0)


def _activity(activity_id: str, priority: int = 3) -> Activity:
    return Activity(
        id=activity_id,
        name=activity_id,
        category="sightseeing",
        location=Location(Coordinates(0.0, 0.0)),
        duration=60,
        priority=priority,
    )


def _change(activity_id: str, from_position: int, to_position: int) -> RouteChange:
    return RouteChange(
        id=f"change_{activity_id}",
        activity_id=activity_id,
        activity_name=activity_id,
        from_position=from_position,
        to_position=to_position,
        original_time=NINE,
        new_time=NINE,
        reason="",
        impact="",
    )


def _ids(activities) -> list[str]:
    return [activity.id for activity in activities]


def _five() -> list[Activity]:
    return [_activity(activity_id) for activity_id in "ABCDE"]


def _prioritized() -> list[Activity]:
    # priority_first turns a, b, c into b, c, a
    return [_activity("a", priority=1), _activity("b", priority=5), _activity("c", priority=3)]


def _result(activities):
    return optimize_route(
        activities,
        DAY,
        OptimizationStrategy.PRIORITY_FIRST,
        TransportPreferences(),
        OptimizationConstraints(),
    )


# Optimized order B, D, A, E, C for original A, B, C, D, E
FIVE_CHANGES = [
    _change("B", 2, 1),
    _change("D", 4, 2),
    _change("A", 1, 3),
    _change("E", 5, 4),
    _change("C", 3, 5),
]


def test_approved_changes_are_pinned_regardless_of_listing_order():
    approved = {"change_D", "change_E"}

    assert _ids(reorder_with_approved(_five(), FIVE_CHANGES, approved)) == list("ADBEC")
    assert _ids(reorder_with_approved(_five(), reversed(FIVE_CHANGES), approved)) == list("ADBEC")


def test_splice_replay_depends_on_order():
    d_change, e_change = FIVE_CHANGES[1], FIVE_CHANGES[3]

    assert _ids(replay_reorders(_five(), [d_change, e_change])) == list("ADBEC")
    assert _ids(replay_reorders(_five(), [e_change, d_change])) == list("AEBCD")


def test_splice_mode_replays_by_target_position():
    approved = {"change_E", "change_D"}

    assert _ids(reorder_partial(_five(), FIVE_CHANGES, approved, "splice")) == list("ADBEC")


def test_approving_everything_reproduces_optimized_order():
    approved = {change.id for change in FIVE_CHANGES}

    assert _ids(reorder_with_approved(_five(), FIVE_CHANGES, approved)) == list("BDAEC")


def test_nothing_approved_keeps_original_order():
    assert _ids(reorder_with_approved(_five(), FIVE_CHANGES, set())) == list("ABCDE")


def test_conflicting_targets_keep_every_activity():
    changes = [_change("C", 3, 1), _change("D", 4, 1)]
    order = reorder_with_approved(_five(), changes, {"change_C", "change_D"})

    assert _ids(order) == list("CABDE")


def test_unknown_apply_mode():
    with pytest.raises(ValueError, match="Unknown apply mode"):
        reorder_partial(_five(), FIVE_CHANGES, set(), "shuffle")


def test_review_toggles_are_exclusive():
    review = ReviewSession(_result(_prioritized()))
    assert review.status == ApprovalStatus.PENDING
    assert len(review.pending_changes) == 3

    review.approve("change_b")
    assert review.status_of("change_b") == ApprovalStatus.APPROVED
    assert review.status == ApprovalStatus.PARTIALLY_APPROVED

    review.reject("change_b")
    assert review.status_of("change_b") == ApprovalStatus.REJECTED
    assert "change_b" not in review.approved

    review.reset("change_b")
    assert review.status_of("change_b") == ApprovalStatus.PENDING
    assert review.status == ApprovalStatus.PENDING


def test_review_bulk_status():
    review = ReviewSession(_result(_prioritized()))

    review.approve_all()
    assert review.status == ApprovalStatus.APPROVED
    assert review.pending_changes == []

    review.reject_all()
    assert review.status == ApprovalStatus.REJECTED
    assert review.approved == set()


def test_review_without_changes_is_approved():
    review = ReviewSession(_result([_activity("x", priority=5), _activity("y", priority=1)]))

    assert review.result.changes == ()
    assert review.status == ApprovalStatus.APPROVED


def test_review_rejects_unknown_change():
    review = ReviewSession(_result(_prioritized()))

    with pytest.raises(ValueError, match="Unknown change"):
        review.approve("change_zzz")


def test_apply_everything_adopts_optimized_route():
    activities = _prioritized()
    result = _result(activities)
    review = ReviewSession(result)
    review.approve_all()

    route = review.apply(activities)
    assert _ids(route.activity_order) == ["b", "c", "a"]
    assert not route.is_optimized
    assert route.stops[0].arrival_time == NINE


def test_apply_partial_keeps_unapproved_order():
    activities = _prioritized()
    result = _result(activities)

    route = apply_approved_changes(result, {"change_b"}, activities)
    assert _ids(route.activity_order) == ["b", "a", "c"]


def test_apply_partial_in_splice_mode(monkeypatch):
    activities = _prioritized()
    result = _result(activities)
    monkeypatch.setattr(settings, "approval_apply_mode", "splice")

    route = apply_approved_changes(result, {"change_c"}, activities)
    # c moves from slot 3 to slot 2
    assert _ids(route.activity_order) == ["a", "c", "b"]


def test_apply_nothing_rebuilds_original():
    activities = _prioritized()
    result = _result(activities)

    route = apply_approved_changes(result, set(), activities)
    assert route == result.original_route
