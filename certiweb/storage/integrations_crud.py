"""Integrations table operations.

Upsert only: ``sync_integration`` records which external system an id was
last synchronized with.
"""

import logging
from typing import Optional

from certiweb.protocols import KeyValueStore
from certiweb.types import Integration, TableName

from .keyed_table import get_table

logger = logging.getLogger(__name__)

_integrations = get_table(TableName.INTEGRATIONS)


def sync_integration(store: KeyValueStore, integration_id: int, system_name: str) -> None:
    integrations = _integrations.load(store)
    integrations[integration_id] = Integration(system_name=system_name)
    _integrations.store(store, integrations)
    logger.info(f"Synced integration {integration_id} with {system_name}")


def verify_integration(store: KeyValueStore, integration_id: int) -> Optional[str]:
    """Return the system name last synced for ``integration_id`` or None."""
    record = _integrations.load(store).get(integration_id)
    return record.system_name if record else None
