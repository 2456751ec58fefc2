"""
Flat-file persistence.

Every collection (users, assessment results, the college catalog and the
per-college detail documents) is one JSON document on disk that is read and
rewritten whole.
"""
from .config import DEFAULT_STORE_CONFIG, StoreConfig
from .json_store import (
    InMemoryRecordStore,
    JsonRecordStore,
    RecordStore,
    load_document,
    save_document,
)

__all__ = [
    "DEFAULT_STORE_CONFIG",
    "InMemoryRecordStore",
    "JsonRecordStore",
    "RecordStore",
    "StoreConfig",
    "load_document",
    "save_document",
]
