"""Mapper functions to convert between domain records and SQLAlchemy rows.

Rows store each value as the string its field formats it to; the schema
turns those strings back into typed values on the way out.
"""

from datetime import UTC
from typing import Any, Mapping

from dairyops.database.models import RecordRow
from dairyops.domain import entities as domain
from dairyops.domain.schema import EntitySchema


def values_to_row(schema: EntitySchema, values: Mapping[str, Any]) -> dict[str, str]:
    """Convert typed record values to the JSON stored on a row."""
    stored = {}
    for name, value in values.items():
        field = schema.get_field(name)
        stored[name] = field.format(value) if field is not None else str(value)
    return stored


def row_to_domain(schema: EntitySchema, row: RecordRow) -> domain.Record:
    """Convert a SQLAlchemy RecordRow to a domain Record entity."""
    values = {}
    for name, text in (row.payload or {}).items():
        field = schema.get_field(name)
        values[name] = field.parse(text) if field is not None else text

    # SQLite drops the timezone; timestamps are always written in UTC
    created_at = row.created_at
    if created_at.tzinfo is None:
        created_at = created_at.replace(tzinfo=UTC)
    return domain.Record(id=row.id, values=values, created_at=created_at)
