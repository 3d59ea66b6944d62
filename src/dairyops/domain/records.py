"""Record management service.

``RecordManager`` is the form controller and CRUD service for one entity
type. It holds the draft being edited, the index of the record under edit
(None while creating), and the per-field errors of the last submit.

Two layers of API are exposed:

- ``set_field`` / ``start_edit`` / ``submit`` / ``cancel`` drive the form.
  ``submit`` never raises on invalid input; it stores the errors and leaves
  the store untouched.
- ``validate`` / ``create`` / ``update`` / ``delete`` operate on the store
  directly and raise ``ValidationError`` or ``NotFoundError``.
"""

import logging
from typing import Any, Mapping, Optional

from dairyops.database.base import RecordStore
from dairyops.domain.entities import ChartSeries, Record
from dairyops.domain.errors import (
    NotFoundError,
    ValidationError,
    record_index_out_of_range,
    unknown_field,
)
from dairyops.domain.schema import EntitySchema

logger = logging.getLogger(__name__)


class RecordManager:
    """Service for managing the records of one entity."""

    def __init__(self, schema: EntitySchema, store: RecordStore):
        """Initialize record manager.

        Args:
            schema: Entity schema
            store: Record store owned by this manager
        """
        self.schema = schema
        self.store = store
        self.draft: dict[str, str] = schema.initial_draft()
        self.edit_index: Optional[int] = None
        self.errors: dict[str, str] = {}

    @property
    def is_editing(self) -> bool:
        return self.edit_index is not None

    # Form operations
    def set_field(self, name: str, value: Any) -> str:
        """Update one draft field, applying the field's input normalizers.

        Args:
            name: Field name
            value: Raw input

        Returns:
            The normalized value stored in the draft

        Raises:
            NotFoundError: If the entity has no such input field
        """
        field = self.schema.get_field(name)
        if field is None or field.computed:
            raise NotFoundError(unknown_field(self.schema.title, name))

        normalized = field.normalize("" if value is None else str(value))
        self.draft[name] = normalized
        return normalized

    def start_edit(self, index: int) -> dict[str, str]:
        """Load the record at ``index`` into the draft.

        Secret fields are left blank; submitting them blank keeps the stored
        value.

        Raises:
            NotFoundError: If index is out of range
        """
        record = self._record_at(index)
        self.draft = self.schema.to_draft(record.values)
        self.edit_index = index
        self.errors = {}
        return dict(self.draft)

    def submit(self) -> Optional[Record]:
        """Validate the draft and commit it.

        Returns:
            The committed record, or None if validation failed (see ``errors``)
        """
        try:
            if self.edit_index is None:
                record = self.create(self.draft)
            else:
                record = self.update(self.edit_index, self.draft)
        except ValidationError as e:
            self.errors = e.errors
            return None

        self.cancel()
        return record

    def cancel(self) -> None:
        """Discard the draft and leave edit mode without touching the store."""
        self.draft = self.schema.initial_draft()
        self.edit_index = None
        self.errors = {}

    # Store operations
    def validate(self, values: Mapping[str, Any], editing: Optional[Record] = None) -> dict[str, str]:
        """Validate values, returning field -> message for every invalid field.

        Args:
            values: Draft values
            editing: Record being replaced, if any; blank secret fields keep
                its values and skip validation
        """
        return self.schema.validate(values, skip=self._kept_secrets(values, editing))

    def create(self, values: Mapping[str, Any]) -> Record:
        """Create a record from draft values.

        Returns:
            The stored record

        Raises:
            ValidationError: If any field is invalid
        """
        errors = self.validate(values)
        if errors:
            logger.debug("Rejected new %s: %s", self.schema.name, errors)
            raise ValidationError(errors)

        parsed = self.schema.parse_draft(values)
        finalize = None
        if self.schema.compute is not None:
            compute = self.schema.compute

            def finalize(record_id: int, fields: dict[str, Any]) -> dict[str, Any]:
                return compute(fields, record_id, None)

        record = self.store.append(parsed, finalize=finalize)
        logger.debug("Created %s %s", self.schema.name, record.id)
        return record

    def update(self, index: int, values: Mapping[str, Any]) -> Record:
        """Replace the record at ``index`` with draft values.

        Returns:
            The stored record (same ID)

        Raises:
            NotFoundError: If index is out of range
            ValidationError: If any field is invalid
        """
        previous = self._record_at(index)
        kept = self._kept_secrets(values, previous)

        errors = self.validate(values, editing=previous)
        if errors:
            logger.debug("Rejected update of %s %s: %s", self.schema.name, previous.id, errors)
            raise ValidationError(errors)

        parsed = self.schema.parse_draft(values)
        for name in kept:
            parsed[name] = previous.get(name)
        if self.schema.compute is not None:
            parsed = self.schema.compute(parsed, previous.id, previous)

        record = self.store.replace(self._store_index(index), parsed)
        logger.debug("Updated %s %s", self.schema.name, record.id)
        return record

    def delete(self, record_id: int) -> None:
        """Delete a record by ID (the caller has confirmed the deletion).

        Keeps an in-progress edit pointing at the same record, or cancels it
        if that record is the one deleted.

        Raises:
            NotFoundError: If no record has this ID
        """
        records = self.records()
        position = next((i for i, r in enumerate(records) if r.id == record_id), None)

        self.store.delete(record_id)
        logger.info("Deleted %s %s", self.schema.name, record_id)

        if self.edit_index is not None and position is not None:
            if position == self.edit_index:
                self.cancel()
            elif position < self.edit_index:
                self.edit_index -= 1

    def records(self) -> list[Record]:
        """Records in list order.

        Insertion order, or newest first when the schema sets ``newest_first``.
        Every index argument of the manager refers to this order.
        """
        records = self.store.list_records()
        if self.schema.newest_first:
            records.reverse()
        return records

    def get(self, record_id: int) -> Optional[Record]:
        return self.store.get(record_id)

    def search(self, text: str) -> list[Record]:
        """Case-insensitive substring search over the schema's search fields.

        Entities without search fields match against every visible field.
        An empty search returns every record.
        """
        needle = text.strip().upper()
        records = self.records()
        if not needle:
            return records

        if self.schema.search_fields:
            fields = [self.schema.get_field(name) for name in self.schema.search_fields]
        else:
            fields = [f for f in self.schema.fields if not f.secret]

        return [
            record
            for record in records
            if any(needle in f.format(record.get(f.name)).upper() for f in fields)
        ]

    def view(self, index: int) -> list[tuple[str, str]]:
        """Return (label, value) pairs for read-only display of one record."""
        record = self._record_at(index)
        return [
            (f.label, f.format(record.get(f.name)))
            for f in self.schema.fields
            if not f.secret
        ]

    def statistics(self) -> Any:
        """Summary statistics recomputed from the current records."""
        if self.schema.statistics is None:
            return None
        return self.schema.statistics(self.records())

    def chart(self) -> Optional[ChartSeries]:
        if self.schema.chart is None:
            return None
        return self.schema.chart(self.records())

    def _record_at(self, index: int) -> Record:
        records = self.records()
        if not 0 <= index < len(records):
            raise NotFoundError(record_index_out_of_range(self.schema.title, index, len(records)))
        return records[index]

    def _store_index(self, index: int) -> int:
        if self.schema.newest_first:
            return self.store.count() - 1 - index
        return index

    def _kept_secrets(self, values: Mapping[str, Any], editing: Optional[Record]) -> tuple[str, ...]:
        if editing is None:
            return ()
        return tuple(
            f.name
            for f in self.schema.input_fields
            if f.secret and not f.clean(values.get(f.name, ""))
        )
