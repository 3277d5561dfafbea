"""Notifications table operations.

Upsert only: ``configure_notification`` overwrites the slot for an id
without checking it first. Reading an unset id returns None.
"""

import logging
from typing import Optional

from certiweb.protocols import KeyValueStore
from certiweb.types import NotificationConfig, TableName

from .keyed_table import get_table

logger = logging.getLogger(__name__)

_notifications = get_table(TableName.NOTIFICATIONS)


def configure_notification(
    store: KeyValueStore, notification_id: int, notification_type: str
) -> None:
    """Set the notification type for ``notification_id``, replacing any prior one."""
    notifications = _notifications.load(store)
    notifications[notification_id] = NotificationConfig(type=notification_type)
    _notifications.store(store, notifications)
    logger.info(f"Configured notification {notification_id} as {notification_type}")


def send_notification(store: KeyValueStore, notification_id: int) -> Optional[str]:
    """Return the configured notification type, or None if none is set."""
    config = _notifications.load(store).get(notification_id)
    return config.type if config else None
