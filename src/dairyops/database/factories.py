"""Record store factory functions."""

import os
from typing import Optional

from dairyops.database.base import RecordStore
from dairyops.database.memory import MemoryRecordStore
from dairyops.database.sqlalchemy_store import SQLAlchemyRecordStore
from dairyops.domain.schema import EntitySchema

STORE_BACKENDS = ("memory", "sqlalchemy")


def resolve_backend(backend: Optional[str] = None) -> str:
    """Resolve the store backend name.

    Args:
        backend: Backend name. If None, checks DAIRYOPS_STORE environment
            variable, then defaults to "memory"

    Returns:
        Backend name

    Raises:
        ValueError: If the backend is not supported
    """
    if backend is None:
        backend = os.environ.get("DAIRYOPS_STORE")

    if backend is None:
        backend = "memory"

    backend = backend.strip().lower()
    if backend not in STORE_BACKENDS:
        raise ValueError(
            f"Unknown store backend '{backend}'. Supported backends: {', '.join(STORE_BACKENDS)}"
        )
    return backend


def create_record_store(schema: EntitySchema, backend: Optional[str] = None) -> RecordStore:
    """Create an empty record store for one entity.

    Args:
        schema: Entity schema the store holds records of
        backend: "memory" or "sqlalchemy" (see resolve_backend)

    Returns:
        RecordStore instance
    """
    if resolve_backend(backend) == "sqlalchemy":
        return SQLAlchemyRecordStore(schema)
    return MemoryRecordStore(title=schema.title)
