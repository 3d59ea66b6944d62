"""SQLAlchemy record store implementation."""

from datetime import datetime, UTC
from typing import Any, Mapping, Optional
from sqlalchemy.orm import Session

from dairyops.database.base import Finalize, RecordStore
from dairyops.database.models import RecordRow, create_session_factory
from dairyops.database.mappers import row_to_domain, values_to_row
from dairyops.domain.entities import Record
from dairyops.domain.errors import (
    NotFoundError,
    record_index_out_of_range,
    record_not_found,
)
from dairyops.domain.schema import EntitySchema


class SQLAlchemyRecordStore(RecordStore):
    """SQLAlchemy-based implementation of RecordStore.

    Each store owns its own engine, so every entity gets a private table and
    its own ID sequence.
    """

    def __init__(self, schema: EntitySchema, database_url: str = "sqlite://"):
        """Initialize SQLAlchemy record store.

        Args:
            schema: Schema used to convert stored strings to typed values
            database_url: SQLAlchemy database URL (in-memory SQLite by default)
        """
        self.schema = schema
        self.database_url = database_url
        self.session_factory = create_session_factory(database_url)
        self._session: Optional[Session] = None

    def _get_session(self) -> Session:
        """Get current session, creating one if needed."""
        if self._session is None:
            self._session = self.session_factory()
        return self._session

    def _ordered(self):
        return self._get_session().query(RecordRow).order_by(RecordRow.id)

    def close(self) -> None:
        if self._session is not None:
            self._session.close()
            self._session = None

    def append(self, values: Mapping[str, Any], finalize: Optional[Finalize] = None) -> Record:
        session = self._get_session()
        row = RecordRow(payload={}, created_at=datetime.now(UTC))
        session.add(row)
        try:
            # Flush to obtain the ID before computing ID-derived fields
            session.flush()
            values = dict(values)
            if finalize is not None:
                values = finalize(row.id, values)
            row.payload = values_to_row(self.schema, values)
            session.commit()
        except Exception:
            session.rollback()
            raise
        return row_to_domain(self.schema, row)

    def replace(self, index: int, values: Mapping[str, Any]) -> Record:
        session = self._get_session()
        row = self._ordered().offset(index).limit(1).one_or_none() if index >= 0 else None
        if row is None:
            raise NotFoundError(record_index_out_of_range(self.schema.title, index, self.count()))
        row.payload = values_to_row(self.schema, values)
        session.commit()
        return row_to_domain(self.schema, row)

    def delete(self, record_id: int) -> None:
        session = self._get_session()
        row = session.get(RecordRow, record_id)
        if row is None:
            raise NotFoundError(record_not_found(self.schema.title, record_id))
        session.delete(row)
        session.commit()

    def get(self, record_id: int) -> Optional[Record]:
        row = self._get_session().get(RecordRow, record_id)
        return row_to_domain(self.schema, row) if row is not None else None

    def list_records(self) -> list[Record]:
        return [row_to_domain(self.schema, row) for row in self._ordered().all()]

    def count(self) -> int:
        return self._get_session().query(RecordRow).count()

    def clear(self) -> None:
        session = self._get_session()
        session.query(RecordRow).delete()
        session.commit()
