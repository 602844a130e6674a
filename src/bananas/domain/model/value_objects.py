"""Value Objects returned by the inventory manager.

Value Objects are immutable and compared by value, not identity.
"""

from __future__ import annotations

from dataclasses import dataclass

from bananas.domain.model.item import Item


@dataclass(frozen=True)
class DistributionResult:
    """A banana handed to a user.

    ``item`` is the same object held by the inventory, not a copy.  Results
    compare by value but are not hashable, because ``Item`` is mutable.
    """

    user: str
    item: Item


@dataclass(frozen=True)
class InventoryStatistics:
    total: int
    average_freshness: float
