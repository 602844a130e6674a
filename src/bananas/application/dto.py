"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ItemDTO:
    id: int
    freshness: float


@dataclass(frozen=True)
class DistributionDTO:
    """Output: which user received which banana."""

    user: str
    item_id: int
    freshness: float


@dataclass(frozen=True)
class InventoryReportDTO:
    """Output: the state of the inventory after a report run."""

    items: list[ItemDTO]
    spoiled: list[ItemDTO]
    distribution: list[DistributionDTO]
    total: int
    average_freshness: float
    actions: list[str]  # action type names, oldest first
