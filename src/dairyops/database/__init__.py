"""Record store layer for dairyops application."""

from dairyops.database.base import RecordStore
from dairyops.database.factories import create_record_store

__all__ = ["RecordStore", "create_record_store"]
