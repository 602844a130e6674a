"""Domain service: Inventory Manager.

Owns the live collection of bananas and the append-only action log.
Every operation validates first and only then mutates, so a rejected
call leaves both the collection and the log untouched.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from numbers import Real

from bananas.domain.exceptions import InsufficientInventoryError, ValidationError
from bananas.domain.model.action_log import ActionType, LogEntry
from bananas.domain.model.item import (
    DEFAULT_FRESHNESS,
    MIN_FRESHNESS,
    Item,
    validate_freshness,
)
from bananas.domain.model.value_objects import DistributionResult, InventoryStatistics

logger = logging.getLogger(__name__)


class InventoryManager:
    """In-memory inventory of bananas.

    ``get_items()`` hands out the live list, and callers are allowed to
    edit item fields through it.  Later operations (``remove_spoiled``
    in particular) see those edits.
    """

    def __init__(self, remove_on_distribute: bool = False) -> None:
        self._items: list[Item] = []
        self._log: list[LogEntry] = []
        self._next_id = 1
        self._remove_on_distribute = remove_on_distribute

    # --- Commands -------------------------------------------------------------

    def add_item(self, freshness: float = DEFAULT_FRESHNESS) -> None:
        """Add a banana.

        Raises ValidationError if *freshness* is outside the allowed range.
        """
        try:
            validate_freshness(freshness)
        except ValidationError:
            logger.warning("Rejected banana with freshness %r", freshness)
            raise

        item = Item(id=self._next_id, freshness=freshness)
        self._next_id += 1
        self._items.append(item)
        self._record(ActionType.ADD, id=item.id, freshness=freshness)
        logger.debug("Added banana %d (freshness %s)", item.id, freshness)

    def remove_item(self, item_id: int) -> None:
        """Remove the banana with *item_id*.

        A missing id is not an error; the attempt is still logged.
        """
        removed = False
        for index, item in enumerate(self._items):
            if item.id == item_id:
                del self._items[index]
                removed = True
                break

        self._record(ActionType.REMOVE, id=item_id, removed=removed)
        if removed:
            logger.debug("Removed banana %d", item_id)
        else:
            logger.debug("No banana with id %r to remove", item_id)

    def distribute_items(self, users: Sequence[str]) -> list[DistributionResult]:
        """Pair the first ``len(users)`` bananas with *users*, in order.

        Raises InsufficientInventoryError if there are more users than
        bananas, and ValidationError if *users* is a single string.
        Items stay in stock unless the manager was created with
        ``remove_on_distribute=True``.
        """
        if isinstance(users, str):
            logger.warning("Rejected distribution to a bare string %r", users)
            raise ValidationError(
                "Users must be a sequence of names, not a single string"
            )

        users = list(users)
        if len(users) > len(self._items):
            logger.warning(
                "Cannot distribute to %d users, only %d bananas in stock",
                len(users), len(self._items),
            )
            raise InsufficientInventoryError(
                requested=len(users), available=len(self._items)
            )

        results = [
            DistributionResult(user=user, item=item)
            for user, item in zip(users, self._items)
        ]
        if self._remove_on_distribute:
            del self._items[:len(results)]

        self._record(
            ActionType.DISTRIBUTE,
            users=tuple(users),
            item_ids=tuple(r.item.id for r in results),
            removed=self._remove_on_distribute,
        )
        logger.debug("Distributed %d bananas", len(results))
        return results

    def sort_by_freshness(self) -> None:
        """Order the stock freshest first.  Ties keep their relative order."""
        self._items.sort(key=lambda item: item.freshness, reverse=True)
        self._record(ActionType.SORT)
        logger.debug("Sorted %d bananas by freshness", len(self._items))

    def remove_spoiled(self) -> list[Item]:
        """Drop every banana with freshness <= 0 and return them."""
        spoiled = [item for item in self._items if item.is_spoiled]
        # Slice assignment keeps the list handed out by get_items() live.
        self._items[:] = [item for item in self._items if not item.is_spoiled]

        self._record(ActionType.REMOVE_SPOILED, ids=tuple(item.id for item in spoiled))
        logger.debug("Removed %d spoiled bananas", len(spoiled))
        return spoiled

    def decay(self, amount: float = 1) -> None:
        """Age every banana by *amount*.

        Decay stops at MIN_FRESHNESS.  Bananas already at or below it keep
        their freshness.
        """
        if isinstance(amount, bool) or not isinstance(amount, Real) or not amount >= 0:
            logger.warning("Rejected decay amount %r", amount)
            raise ValidationError(
                f"Decay amount must be a non-negative number, got {amount!r}"
            )

        for item in self._items:
            if item.freshness > MIN_FRESHNESS:
                item.freshness = max(MIN_FRESHNESS, item.freshness - amount)
        self._record(ActionType.DECAY, amount=amount)
        logger.debug("Decayed %d bananas by %s", len(self._items), amount)

    # --- Queries --------------------------------------------------------------

    def get_items(self) -> list[Item]:
        return self._items

    def get_statistics(self) -> InventoryStatistics:
        total = len(self._items)
        if total == 0:
            return InventoryStatistics(total=0, average_freshness=0)
        average = sum(item.freshness for item in self._items) / total
        return InventoryStatistics(total=total, average_freshness=average)

    def get_actions_log(self) -> list[LogEntry]:
        """Return every recorded action, oldest first."""
        return list(self._log)

    # --- Internal helpers -----------------------------------------------------

    def _record(self, action: ActionType, **payload: object) -> None:
        self._log.append(LogEntry(type=action, payload=payload))


def create(remove_on_distribute: bool = False) -> InventoryManager:
    """Build a new, empty inventory manager."""
    return InventoryManager(remove_on_distribute=remove_on_distribute)
