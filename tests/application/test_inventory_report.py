"""Integration tests for the InventoryReport use case."""

import pytest

from bananas.application.dto import DistributionDTO, ItemDTO
from bananas.application.inventory_report import InventoryReportHandler
from bananas.domain.exceptions import InsufficientInventoryError, ValidationError


class TestInventoryReportHappyPath:

    def test_sorts_and_summarizes(self):
        dto = InventoryReportHandler().handle([5, 7, 3])
        assert [item.freshness for item in dto.items] == [7, 5, 3]
        assert dto.total == 3
        assert dto.average_freshness == 5

    def test_removes_spoiled(self):
        dto = InventoryReportHandler().handle([0, 6, 0])
        assert dto.spoiled == [ItemDTO(id=1, freshness=0), ItemDTO(id=3, freshness=0)]
        assert dto.items == [ItemDTO(id=2, freshness=6)]

    def test_decay_applied_before_spoilage_check(self):
        dto = InventoryReportHandler().handle([2, 8], decay=2)
        assert [item.id for item in dto.spoiled] == [1]
        assert dto.items == [ItemDTO(id=2, freshness=6)]

    def test_distributes_freshest_first(self):
        dto = InventoryReportHandler().handle([5, 7], users=["Alice", "Bob"])
        assert dto.distribution == [
            DistributionDTO(user="Alice", item_id=2, freshness=7),
            DistributionDTO(user="Bob", item_id=1, freshness=5),
        ]
        assert dto.total == 2

    def test_take_removes_distributed(self):
        handler = InventoryReportHandler(remove_on_distribute=True)
        dto = handler.handle([5, 7, 9], users=["Alice"])
        assert dto.total == 2
        assert [item.freshness for item in dto.items] == [7, 5]

    def test_records_actions(self):
        dto = InventoryReportHandler().handle([5], users=["Alice"], decay=1)
        assert dto.actions == ["ADD", "DECAY", "REMOVE_SPOILED", "SORT", "DISTRIBUTE"]

    def test_empty_report(self):
        dto = InventoryReportHandler().handle([])
        assert dto.items == []
        assert dto.total == 0
        assert dto.average_freshness == 0


class TestInventoryReportValidation:

    def test_invalid_freshness_rejected(self):
        with pytest.raises(ValidationError, match="between 0 and 10"):
            InventoryReportHandler().handle([5, 12])

    def test_too_many_users_rejected(self):
        with pytest.raises(InsufficientInventoryError):
            InventoryReportHandler().handle([5], users=["Alice", "Bob"])

    def test_negative_decay_rejected(self):
        with pytest.raises(ValidationError, match="non-negative"):
            InventoryReportHandler().handle([5], decay=-1)
