"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class InsufficientInventoryError(DomainException):
    """There are fewer items in stock than a request needs."""

    def __init__(self, requested: int, available: int) -> None:
        super().__init__(
            f"Not enough bananas for all users "
            f"(need {requested}, have {available} in stock)"
        )
        self.requested = requested
        self.available = available
