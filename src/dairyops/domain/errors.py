"""Shared domain error messages and error types."""

from typing import Mapping


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """A draft failed validation.

    Carries the field -> message mapping so callers can surface each
    message next to the field it belongs to.
    """

    def __init__(self, errors: Mapping[str, str]):
        self.errors = dict(errors)
        super().__init__(validation_failed(self.errors))


class NotFoundError(DomainError):
    """Requested record, index or field does not exist."""


class NotAuthenticatedError(DomainError):
    """Dashboard accessed without an authenticated session."""


def validation_failed(errors: Mapping[str, str]) -> str:
    """Return summary message for a failed validation."""
    count = len(errors)
    fields = ", ".join(errors)
    return f"{count} invalid field{'s' if count != 1 else ''}: {fields}"


def record_not_found(title: str, record_id: int) -> str:
    """Return message for missing record by ID."""
    return f"{title} record {record_id} not found"


def record_index_out_of_range(title: str, index: int, count: int) -> str:
    """Return message for an index outside the store."""
    return f"{title} has no record at position {index} ({count} record{'s' if count != 1 else ''})"


def unknown_field(title: str, name: str) -> str:
    """Return message for a field the entity does not define."""
    return f"{title} has no field '{name}'"


def unknown_entity(name: str) -> str:
    """Return message for an entity the dashboard does not manage."""
    return f"Unknown record type '{name}'"


def not_authenticated() -> str:
    """Return message when the dashboard is used while logged out."""
    return "Not logged in. Use 'login USERNAME' first."
