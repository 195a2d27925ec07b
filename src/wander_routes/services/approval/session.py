"""Per-review approval state for the changes of one optimization result."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Sequence

from ...models.domain import Activity
from ..optimization.models import OptimizationResult, RouteChange
from ..routing.models import Route
from .apply import ApplyMode, apply_approved_changes


class ApprovalStatus(str, Enum):
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"
    PARTIALLY_APPROVED = "partially_approved"


@dataclass(slots=True)
class ReviewSession:
    """Approval toggles for one result, owned by a single reviewer.

    Approving and rejecting are mutually exclusive and reversible until the
    session is applied.
    """

    result: OptimizationResult
    approved: set[str] = field(default_factory=set)
    rejected: set[str] = field(default_factory=set)

    def _require(self, change_id: str) -> None:
        if self.result.change(change_id) is None:
            raise ValueError(f"Unknown change '{change_id}' for result {self.result.id}.")

    def approve(self, change_id: str) -> None:
        self._require(change_id)
        self.approved.add(change_id)
        self.rejected.discard(change_id)

    def reject(self, change_id: str) -> None:
        self._require(change_id)
        self.rejected.add(change_id)
        self.approved.discard(change_id)

    def reset(self, change_id: str) -> None:
        self._require(change_id)
        self.approved.discard(change_id)
        self.rejected.discard(change_id)

    def approve_all(self) -> None:
        self.approved = {change.id for change in self.result.changes}
        self.rejected = set()

    def reject_all(self) -> None:
        self.rejected = {change.id for change in self.result.changes}
        self.approved = set()

    def status_of(self, change_id: str) -> ApprovalStatus:
        self._require(change_id)
        if change_id in self.approved:
            return ApprovalStatus.APPROVED
        if change_id in self.rejected:
            return ApprovalStatus.REJECTED
        return ApprovalStatus.PENDING

    @property
    def status(self) -> ApprovalStatus:
        total = len(self.result.changes)
        if total == 0 or len(self.approved) == total:
            return ApprovalStatus.APPROVED
        if len(self.rejected) == total:
            return ApprovalStatus.REJECTED
        if self.approved or self.rejected:
            return ApprovalStatus.PARTIALLY_APPROVED
        return ApprovalStatus.PENDING

    @property
    def pending_changes(self) -> list[RouteChange]:
        return [
            change
            for change in self.result.changes
            if change.id not in self.approved and change.id not in self.rejected
        ]

    def apply(self, original_activities: Sequence[Activity], *, mode: Optional[ApplyMode] = None) -> Route:
        return apply_approved_changes(self.result, self.approved, original_activities, mode=mode)
