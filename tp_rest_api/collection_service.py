"""
Collection services for the TP REST API.

One ``CollectionService`` per collection (products, orders). Reads go
straight to the record store; creates hold a per-collection lock across the
load -> append -> save cycle so concurrent creates never drop a record.
"""

import logging
import threading
from typing import Any, List, Mapping, Optional

from tp_rest_api.identifiers import IdGenerator
from tp_rest_api.record_store import Record, RecordStore

logger = logging.getLogger(__name__)

PRODUCTS = "products"
ORDERS = "orders"
COLLECTION_NAMES = (PRODUCTS, ORDERS)


class CollectionService:
    """
    List/create operations over one named collection.

    Records are open mappings; the only field the service owns is ``id``,
    which is always generated here. A client-supplied ``id`` is discarded.
    """

    def __init__(
        self,
        name: str,
        store: RecordStore,
        id_generator: Optional[IdGenerator] = None,
    ) -> None:
        """
        Args:
            name: Collection name, also the backing document name.
            store: Record store holding the backing document.
            id_generator: Identifier source. Defaults to a fresh generator.
        """
        store.path_for(name)
        self.name = name
        self.store = store
        self.id_generator = id_generator or IdGenerator()
        self._write_lock = threading.Lock()

    def list_all(self) -> List[Record]:
        """Every stored record, in insertion order. Empty if nothing is stored."""
        return self.store.load(self.name)

    def count(self) -> int:
        """Number of stored records."""
        return len(self.list_all())

    def create(self, fields: Mapping[str, Any]) -> Record:
        """
        Append a new record built from ``fields`` and persist the collection.

        Args:
            fields: Client-supplied fields, stored verbatim apart from ``id``.

        Returns:
            The created record, ``id`` first.

        Raises:
            RecordStoreWriteError: If the collection could not be saved.
        """
        with self._write_lock:
            record: Record = {"id": self.id_generator.next_id()}
            record.update((key, value) for key, value in fields.items() if key != "id")
            records = self.store.load(self.name)
            records.append(record)
            self.store.save(self.name, records)
        logger.info(f"Created {self.name} record id={record['id']} (total={len(records)})")
        return record


def build_services(
    store: RecordStore,
    id_generator: Optional[IdGenerator] = None,
) -> dict:
    """
    Build one service per known collection, sharing ``store`` and ``id_generator``.

    Returns:
        Mapping of collection name -> CollectionService.
    """
    id_generator = id_generator or IdGenerator()
    return {
        name: CollectionService(name, store, id_generator=id_generator)
        for name in COLLECTION_NAMES
    }
