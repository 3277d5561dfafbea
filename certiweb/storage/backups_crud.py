"""Backups table operations.

Strict create only. A backup record cannot be changed once registered.
"""

import logging
from typing import Optional

from certiweb.protocols import KeyValueStore, RecordAlreadyExistsError
from certiweb.types import Backup, TableName

from .keyed_table import get_table

logger = logging.getLogger(__name__)

_backups = get_table(TableName.BACKUPS)


def register_backup(store: KeyValueStore, backup_id: int, backup: Backup) -> None:
    """Insert a backup record. Raises RecordAlreadyExistsError if the id is taken."""
    backups = _backups.load(store)

    if backup_id in backups:
        logger.warning(f"Rejected register_backup: id {backup_id} already exists")
        raise RecordAlreadyExistsError(
            TableName.BACKUPS.value, backup_id, "Backup with that ID already exists"
        )

    backups[backup_id] = backup
    _backups.store(store, backups)
    logger.info(f"Registered backup {backup_id} at {backup.location}")


def get_backup(store: KeyValueStore, backup_id: int) -> Optional[Backup]:
    """Return the backup record for ``backup_id`` or None."""
    return _backups.load(store).get(backup_id)
