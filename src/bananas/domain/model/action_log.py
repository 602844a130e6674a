"""Audit trail of actions performed on an inventory."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from types import MappingProxyType
from typing import Any


class ActionType(str, Enum):
    ADD = "ADD"
    REMOVE = "REMOVE"
    DISTRIBUTE = "DISTRIBUTE"
    SORT = "SORT"
    REMOVE_SPOILED = "REMOVE_SPOILED"
    DECAY = "DECAY"


@dataclass(frozen=True)
class LogEntry:
    """One recorded action.  Entries are never edited or removed.

    ``payload`` is stored as a read-only copy of the mapping it was
    built from.
    """

    type: ActionType
    payload: Mapping[str, Any] = field(default_factory=dict)
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def __post_init__(self) -> None:
        object.__setattr__(self, "payload", MappingProxyType(dict(self.payload)))
