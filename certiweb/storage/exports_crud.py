"""Exports table operations. Upsert only."""

import logging
from typing import Optional

from certiweb.protocols import KeyValueStore
from certiweb.types import ExportRecord, TableName

from .keyed_table import get_table

logger = logging.getLogger(__name__)

_exports = get_table(TableName.EXPORTS)


def export_data(store: KeyValueStore, export_id: int, export_format: str) -> None:
    exports = _exports.load(store)
    exports[export_id] = ExportRecord(format=export_format)
    _exports.store(store, exports)
    logger.info(f"Recorded export {export_id} as {export_format}")


def validate_export(store: KeyValueStore, export_id: int) -> Optional[str]:
    """Return the recorded export format, or None if nothing was exported."""
    record = _exports.load(store).get(export_id)
    return record.format if record else None
