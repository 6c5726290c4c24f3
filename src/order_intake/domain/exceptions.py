"""Domain-level exceptions.

All failures the intake flow knows how to describe are subclasses of
DomainException so the outer layers (request handler, CLI) can catch them
uniformly and display user-friendly messages.
"""

from __future__ import annotations


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class OrderValidationError(ValidationError):
    """One or more submitted order fields failed validation.

    ``field_errors`` maps each failing field to a single message.
    """

    def __init__(self, field_errors: dict[str, str]) -> None:
        self.field_errors = dict(field_errors)
        fields = ", ".join(sorted(self.field_errors))
        super().__init__(f"Invalid order fields: {fields}")


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class StorageError(DomainException):
    """The order store could not persist or load an order."""


class NotificationError(DomainException):
    """The administrator alert could not be delivered."""


class ConfigurationError(DomainException):
    """Required settings for the selected backends are missing."""
