"""
Record store for the TP REST API.

Each collection is persisted as one JSON array in ``<data_dir>/<name>.json``.
Every load reads the whole document and every save rewrites it in full.
"""

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any, Dict, List, Union

logger = logging.getLogger(__name__)

Record = Dict[str, Any]

DOCUMENT_SUFFIX = ".json"


class RecordStoreError(Exception):
    """Base class for record store failures."""
    pass


class RecordStoreWriteError(RecordStoreError):
    """The backing document could not be written."""
    pass


class UnserializableRecordError(RecordStoreWriteError):
    """A record holds a value with no JSON form (NaN, Infinity, arbitrary objects)."""
    pass


def _reject_constant(name: str):
    raise ValueError(f"Non-standard JSON constant: {name}")


class RecordStore:
    """
    Whole-document JSON storage for named collections.

    A missing, unreadable or corrupt document loads as an empty collection.
    Saves go through a temporary file and ``os.replace`` so a reader never
    sees a truncated document.
    """

    def __init__(self, data_dir: Union[str, Path]) -> None:
        """
        Args:
            data_dir: Directory holding one ``<name>.json`` per collection.
                Created on the first save if it does not exist.
        """
        self.data_dir = Path(data_dir)

    def path_for(self, name: str) -> Path:
        """Return the backing document path for collection ``name``."""
        if not name or "/" in name or "\\" in name or ".." in name:
            raise ValueError(f"Invalid collection name: {name!r}")
        return self.data_dir / f"{name}{DOCUMENT_SUFFIX}"

    def ensure_data_dir(self) -> Path:
        """Create the data directory if needed and return it."""
        self.data_dir.mkdir(parents=True, exist_ok=True)
        return self.data_dir

    def load(self, name: str) -> List[Record]:
        """
        Load every record of collection ``name``.

        Args:
            name: Collection name (e.g. ``"products"``).

        Returns:
            The stored records in insertion order, or an empty list when the
            document is missing, unreadable, not valid JSON (NaN and Infinity
            included), or not an array.
        """
        path = self.path_for(name)
        if not path.exists():
            logger.debug(f"No backing document for '{name}' at {path}, starting empty")
            return []
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f, parse_constant=_reject_constant)
        except (OSError, ValueError) as e:
            logger.warning(f"Unreadable document for '{name}' at {path}, treating as empty: {e}")
            return []
        if not isinstance(data, list):
            logger.warning(
                f"Document for '{name}' at {path} holds {type(data).__name__}, not a list; treating as empty"
            )
            return []
        return data

    def save(self, name: str, records: List[Record]) -> None:
        """
        Overwrite collection ``name`` with ``records``.

        Args:
            name: Collection name.
            records: Full list of records to persist.

        Raises:
            UnserializableRecordError: If a record has no strict JSON form.
            RecordStoreWriteError: If the document could not be written. The
                previous document is left untouched in both cases.
        """
        path = self.path_for(name)
        tmp = None
        try:
            self.ensure_data_dir()
            fd, tmp = tempfile.mkstemp(dir=str(self.data_dir), prefix=f".{name}.", suffix=".tmp")
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(records, f, indent=2, ensure_ascii=False, allow_nan=False)
            os.replace(tmp, path)
            tmp = None
        except (TypeError, ValueError) as e:
            raise UnserializableRecordError(f"Could not serialise '{name}': {e!s}") from e
        except OSError as e:
            raise RecordStoreWriteError(f"Could not write '{name}' to {path}: {e!s}") from e
        finally:
            if tmp is not None and os.path.exists(tmp):
                try:
                    os.remove(tmp)
                except OSError:
                    pass
