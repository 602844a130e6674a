"""Item entity — a single banana in stock.

Freshness is validated once, when the manager creates the item.  After
that the field is a plain attribute: callers holding a reference may set
it to anything, and the manager sees the change.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from numbers import Real

from bananas.domain.exceptions import ValidationError

# ---------------------------------------------------------------------------
# Constants for business rules
# ---------------------------------------------------------------------------
MIN_FRESHNESS = 0
MAX_FRESHNESS = 10
DEFAULT_FRESHNESS = 10


@dataclass
class Item:
    """A banana with a manager-assigned id and a freshness score."""

    id: int
    freshness: float

    @property
    def is_spoiled(self) -> bool:
        return self.freshness <= MIN_FRESHNESS


def validate_freshness(freshness: object) -> None:
    """Raise ValidationError unless *freshness* is a number in range."""
    if isinstance(freshness, bool) or not isinstance(freshness, Real):
        raise ValidationError(
            f"Banana freshness must be a number, got {type(freshness).__name__}"
        )
    if math.isnan(freshness) or not MIN_FRESHNESS <= freshness <= MAX_FRESHNESS:
        raise ValidationError(
            f"Banana freshness must be between {MIN_FRESHNESS} and "
            f"{MAX_FRESHNESS}, got {freshness}"
        )
