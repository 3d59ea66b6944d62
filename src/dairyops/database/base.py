"""Abstract record store interface."""

from abc import ABC, abstractmethod
from typing import Any, Callable, Mapping, Optional

# Import entities directly to avoid circular import through domain/__init__.py
from dairyops.domain.entities import Record

Finalize = Callable[[int, dict[str, Any]], dict[str, Any]]


class RecordStore(ABC):
    """Ordered store of the records of one entity type.

    Records keep insertion order. Identifiers come from a per-store counter
    and are never reused, even after deletes.
    """

    @abstractmethod
    def append(self, values: Mapping[str, Any], finalize: Optional[Finalize] = None) -> Record:
        """Add a record at the end. Returns the stored record.

        ``finalize`` receives the new record ID and the values and returns
        the values to store, so ID-derived fields are set in the same commit.
        """
        pass

    @abstractmethod
    def replace(self, index: int, values: Mapping[str, Any]) -> Record:
        """Replace the values of the record at ``index``, keeping its ID."""
        pass

    @abstractmethod
    def delete(self, record_id: int) -> None:
        """Delete a record by ID."""
        pass

    @abstractmethod
    def get(self, record_id: int) -> Optional[Record]:
        """Get record by ID."""
        pass

    @abstractmethod
    def list_records(self) -> list[Record]:
        """List all records in insertion order."""
        pass

    @abstractmethod
    def count(self) -> int:
        """Number of stored records."""
        pass

    @abstractmethod
    def clear(self) -> None:
        """Remove every record."""
        pass

    def close(self) -> None:
        """Release backend resources."""
        pass
