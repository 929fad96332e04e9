"""Domain-level exceptions.

All checkout failures are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly
messages.  Each one is scoped to a single checkout attempt.
"""

from __future__ import annotations


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated.

    ``field`` names the offending input when there is one, so callers
    can show the message next to it.
    """

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(message)
        self.field = field


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class StoreError(DomainException):
    """The order store could not persist or read an order."""


class NotifyError(DomainException):
    """The messaging gateway could not deliver an order notification."""


class SubmissionInProgressError(DomainException):
    """An order is already being placed for this session."""
