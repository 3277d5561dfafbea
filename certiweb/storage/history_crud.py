"""History table operations.

Two write paths share this table with different policies:

- ``append_history`` is strict create and rejects a taken id
- ``verify_document`` is an upsert stamped with the host clock; it writes
  whether or not the id already has an entry

Both are kept as they are. ``verify_document`` does not look at the
Documents table, so verifying an unregistered id still records an entry.
"""

import logging
from typing import Optional

from certiweb.protocols import Clock, KeyValueStore, RecordAlreadyExistsError
from certiweb.types import HistoryEntry, TableName

from .keyed_table import get_table

logger = logging.getLogger(__name__)

_history = get_table(TableName.HISTORY)


def append_history(store: KeyValueStore, entry_id: int, entry: HistoryEntry) -> None:
    """Insert a history entry. Raises RecordAlreadyExistsError if the id is taken."""
    history = _history.load(store)

    if entry_id in history:
        logger.warning(f"Rejected append_history: id {entry_id} already exists")
        raise RecordAlreadyExistsError(
            TableName.HISTORY.value,
            entry_id,
            "History entry with the same ID already exists",
        )

    history[entry_id] = entry
    _history.store(store, history)
    logger.info(f"Appended history entry {entry_id}")


def get_history(store: KeyValueStore, entry_id: int) -> Optional[HistoryEntry]:
    """Return the history entry for ``entry_id`` or None."""
    return _history.load(store).get(entry_id)


def verify_document(
    store: KeyValueStore, clock: Clock, entry_id: int, outcome: str
) -> HistoryEntry:
    """Record ``outcome`` at the current clock time, overwriting any prior entry."""
    history = _history.load(store)

    entry = HistoryEntry(timestamp=clock.now(), outcome=outcome)
    replaced = entry_id in history
    history[entry_id] = entry
    _history.store(store, history)
    logger.info(
        f"Verified {entry_id} at {entry.timestamp}" + (" (replaced prior entry)" if replaced else "")
    )
    return entry
