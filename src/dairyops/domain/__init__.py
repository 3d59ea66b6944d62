"""Domain layer for dairyops application."""

from dairyops.domain.entities import ChartSeries, Record
from dairyops.domain.errors import (
    DomainError,
    NotAuthenticatedError,
    NotFoundError,
    ValidationError,
)
from dairyops.domain.schema import EntitySchema, Field, FieldKind

__all__ = [
    "ChartSeries",
    "Record",
    "DomainError",
    "NotAuthenticatedError",
    "NotFoundError",
    "ValidationError",
    "EntitySchema",
    "Field",
    "FieldKind",
]
