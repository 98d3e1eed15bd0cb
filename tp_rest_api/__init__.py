"""
TP REST API - products and orders over JSON documents on disk.

Core package: record store, identifier generator and collection services.
The HTTP layer lives in the ``web`` package.
"""

from tp_rest_api.collection_service import (
    COLLECTION_NAMES,
    ORDERS,
    PRODUCTS,
    CollectionService,
    build_services,
)
from tp_rest_api.identifiers import IdGenerator, next_id
from tp_rest_api.record_store import (
    RecordStore,
    RecordStoreError,
    RecordStoreWriteError,
    UnserializableRecordError,
)

__all__ = [
    "COLLECTION_NAMES",
    "PRODUCTS",
    "ORDERS",
    "CollectionService",
    "build_services",
    "IdGenerator",
    "next_id",
    "RecordStore",
    "RecordStoreError",
    "RecordStoreWriteError",
    "UnserializableRecordError",
]

__version__ = "0.1.0"
