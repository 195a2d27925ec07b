"""Base classes for ordering strategy implementations."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional, Sequence

from ...models.domain import Activity, Location, OptimizationConstraints


class OrderingStrategy(ABC):
    """Contract for reordering heuristics.

    Implementations receive only the flexible activities and return a
    permutation of them; fixed and locked activities are merged back in by
    the caller.
    """

    name: str

    @abstractmethod
    def order(
        self,
        flexible: Sequence[Activity],
        *,
        start_location: Optional[Location] = None,
        constraints: Optional[OptimizationConstraints] = None,
    ) -> list[Activity]:
        raise NotImplementedError
