"""Unit tests for the Item entity and freshness validation."""

import math

import pytest

from bananas.domain.exceptions import ValidationError
from bananas.domain.model.item import Item, validate_freshness


class TestValidateFreshness:

    @pytest.mark.parametrize("freshness", [0, 5, 10, 0.5, 9.99])
    def test_in_range_accepted(self, freshness):
        validate_freshness(freshness)

    @pytest.mark.parametrize("freshness", [-1, 11, -0.01, 10.01])
    def test_out_of_range_rejected(self, freshness):
        with pytest.raises(ValidationError, match="between 0 and 10"):
            validate_freshness(freshness)

    def test_nan_rejected(self):
        with pytest.raises(ValidationError, match="between 0 and 10"):
            validate_freshness(math.nan)

    def test_string_rejected(self):
        with pytest.raises(ValidationError, match="must be a number"):
            validate_freshness("5")

    def test_bool_rejected(self):
        with pytest.raises(ValidationError, match="must be a number"):
            validate_freshness(True)


class TestItemSpoiled:

    def test_positive_freshness_is_not_spoiled(self):
        assert not Item(id=1, freshness=0.1).is_spoiled

    def test_zero_freshness_is_spoiled(self):
        assert Item(id=1, freshness=0).is_spoiled

    def test_negative_freshness_is_spoiled(self):
        assert Item(id=1, freshness=-1).is_spoiled
