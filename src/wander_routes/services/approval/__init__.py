from .apply import apply_approved_changes, reorder_partial, reorder_with_approved, replay_reorders
from .session import ApprovalStatus, ReviewSession

__all__ = [
    "ApprovalStatus",
    "ReviewSession",
    "apply_approved_changes",
    "reorder_partial",
    "reorder_with_approved",
    "replay_reorders",
]
