"""Application service: Inventory Report use case.

Stocks a fresh inventory, ages it, clears out spoiled bananas, sorts
what is left and hands bananas out to users.  Each run works on its own
manager; nothing is kept between runs.
"""

from __future__ import annotations

from collections.abc import Sequence

from bananas.application.dto import DistributionDTO, InventoryReportDTO, ItemDTO
from bananas.domain.model.item import Item
from bananas.domain.service.inventory_manager import InventoryManager, create


class InventoryReportHandler:

    def __init__(self, remove_on_distribute: bool = False) -> None:
        self._remove_on_distribute = remove_on_distribute

    def handle(
        self,
        freshness_levels: Sequence[float],
        users: Sequence[str] = (),
        decay: float = 0,
    ) -> InventoryReportDTO:
        manager: InventoryManager = create(
            remove_on_distribute=self._remove_on_distribute
        )
        for freshness in freshness_levels:
            manager.add_item(freshness)

        if decay:
            manager.decay(decay)

        spoiled = manager.remove_spoiled()
        manager.sort_by_freshness()

        distribution = manager.distribute_items(users) if users else []

        stats = manager.get_statistics()
        return InventoryReportDTO(
            items=[self._to_dto(item) for item in manager.get_items()],
            spoiled=[self._to_dto(item) for item in spoiled],
            distribution=[
                DistributionDTO(
                    user=result.user,
                    item_id=result.item.id,
                    freshness=result.item.freshness,
                )
                for result in distribution
            ],
            total=stats.total,
            average_freshness=stats.average_freshness,
            actions=[entry.type.value for entry in manager.get_actions_log()],
        )

    @staticmethod
    def _to_dto(item: Item) -> ItemDTO:
        return ItemDTO(id=item.id, freshness=item.freshness)
