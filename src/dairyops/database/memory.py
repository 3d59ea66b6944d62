"""List-backed record store."""

import itertools
from datetime import datetime, UTC
from typing import Any, Mapping, Optional

from dairyops.database.base import Finalize, RecordStore
from dairyops.domain.entities import Record
from dairyops.domain.errors import (
    NotFoundError,
    record_index_out_of_range,
    record_not_found,
)


class MemoryRecordStore(RecordStore):
    """Record store holding records in a Python list."""

    def __init__(self, title: str = "Record"):
        """Initialize an empty store.

        Args:
            title: Entity title used in error messages
        """
        self.title = title
        self._records: list[Record] = []
        self._ids = itertools.count(1)

    def append(self, values: Mapping[str, Any], finalize: Optional[Finalize] = None) -> Record:
        record_id = next(self._ids)
        values = dict(values)
        if finalize is not None:
            values = finalize(record_id, values)
        record = Record(id=record_id, values=values, created_at=datetime.now(UTC))
        self._records.append(record)
        return record

    def replace(self, index: int, values: Mapping[str, Any]) -> Record:
        if not 0 <= index < len(self._records):
            raise NotFoundError(record_index_out_of_range(self.title, index, len(self._records)))
        old = self._records[index]
        record = Record(id=old.id, values=dict(values), created_at=old.created_at)
        self._records[index] = record
        return record

    def delete(self, record_id: int) -> None:
        for i, record in enumerate(self._records):
            if record.id == record_id:
                del self._records[i]
                return
        raise NotFoundError(record_not_found(self.title, record_id))

    def get(self, record_id: int) -> Optional[Record]:
        for record in self._records:
            if record.id == record_id:
                return record
        return None

    def list_records(self) -> list[Record]:
        return list(self._records)

    def count(self) -> int:
        return len(self._records)

    def clear(self) -> None:
        self._records.clear()
