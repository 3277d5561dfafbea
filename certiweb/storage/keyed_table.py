"""Keyed Table primitive.

A keyed table maps a numeric id to a typed record inside one named region
of host storage. The whole collection is the unit of persistence:

- ``load`` reads and decodes every entry stored under the table's name, or
  returns an empty dict if nothing was ever stored there
- ``store`` encodes and writes the entire collection back as one blob

There is no per-key addressing. Every mutation loads the full collection,
changes one entry in memory and stores the full collection again, so the
cost of an operation grows with the size of its table. Table logic only
talks to this class, so per-key storage can replace it later without
touching the ``*_crud`` modules.
"""

import json
import logging
from dataclasses import asdict, fields
from typing import Dict, Generic, Type, TypeVar

from certiweb.protocols import KeyValueStore, StorageError
from certiweb.types import MAX_RECORD_ID, MIN_RECORD_ID, RECORD_TYPES, TableName

logger = logging.getLogger(__name__)

R = TypeVar("R")


class KeyedTable(Generic[R]):
    """Load/store cycle for one named collection of ``record_type`` records."""

    def __init__(self, name: TableName, record_type: Type[R]):
        self.name = name
        self.record_type = record_type
        self._field_types = {f.name: f.type for f in fields(record_type)}

    def __repr__(self) -> str:
        return f"KeyedTable({self.name.value!r}, {self.record_type.__name__})"

    def load(self, store: KeyValueStore) -> Dict[int, R]:
        """Return the persisted collection, or an empty one if never stored."""
        blob = store.get(self.name.value)
        if blob is None:
            logger.debug(f"Loaded {self.name.value}: no collection stored yet")
            return {}
        collection = self._decode(blob)
        logger.debug(f"Loaded {self.name.value}: {len(collection)} entries")
        return collection

    def store(self, store: KeyValueStore, collection: Dict[int, R]) -> None:
        """Persist the entire collection, replacing whatever was stored before."""
        blob = self._encode(collection)
        store.set(self.name.value, blob)
        logger.debug(f"Stored {self.name.value}: {len(collection)} entries")

    def _encode(self, collection: Dict[int, R]) -> str:
        payload = {}
        for record_id in sorted(collection):
            record = collection[record_id]
            if not isinstance(record, self.record_type):
                raise StorageError(
                    f"{self.name.value}[{record_id}] holds {type(record).__name__}, "
                    f"expected {self.record_type.__name__}"
                )
            payload[str(record_id)] = asdict(record)
        return json.dumps(payload, sort_keys=True, ensure_ascii=False)

    def _decode(self, blob: str) -> Dict[int, R]:
        try:
            payload = json.loads(blob)
        except (TypeError, ValueError) as e:
            raise StorageError(f"Collection {self.name.value} is not valid JSON: {e}") from e

        if not isinstance(payload, dict):
            raise StorageError(f"Collection {self.name.value} must be a JSON object")

        collection: Dict[int, R] = {}
        for key, raw in payload.items():
            try:
                record_id = int(key)
            except ValueError as e:
                raise StorageError(f"Collection {self.name.value} has non-numeric id {key!r}") from e
            if not MIN_RECORD_ID <= record_id <= MAX_RECORD_ID:
                raise StorageError(f"Collection {self.name.value} has out-of-range id {key}")
            if not self._matches(raw):
                raise StorageError(
                    f"Collection {self.name.value} entry {key} does not match "
                    f"{self.record_type.__name__}"
                )
            collection[record_id] = self.record_type(**raw)
        return collection

    def _matches(self, raw) -> bool:
        """Same field names as the record type, each value of the declared type."""
        if not isinstance(raw, dict) or set(raw) != set(self._field_types):
            return False
        for name, field_type in self._field_types.items():
            value = raw[name]
            # JSON true/false decode to bool, which is an int subclass.
            if isinstance(value, bool) or not isinstance(value, field_type):
                return False
        return True


TABLES: Dict[TableName, KeyedTable] = {
    name: KeyedTable(name, record_type) for name, record_type in RECORD_TYPES.items()
}


def get_table(name: TableName) -> KeyedTable:
    """Return the KeyedTable registered for ``name``."""
    return TABLES[TableName(name)]
