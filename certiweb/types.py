"""
Shared record types for certiweb.

All record dataclasses live here. Each logical table persists one record
kind, keyed by a numeric id that is scoped to that table only: document 7
and user 7 are unrelated.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

# Identifiers are 32-bit signed integers.
MIN_RECORD_ID = -(2**31)
MAX_RECORD_ID = 2**31 - 1


class TableName(str, Enum):
    """Names of the persisted collections, one per logical table."""

    DOCUMENTS = "documents"
    HISTORY = "history"
    BACKUPS = "backups"
    USERS = "users"
    NOTIFICATIONS = "notifications"
    SESSIONS = "sessions"
    REPORTS = "reports"
    EXPORTS = "exports"
    INTEGRATIONS = "integrations"


VALID_TABLE_NAMES = frozenset(t.value for t in TableName)


# === Documents, history and backups ===


@dataclass
class Document:
    """A registered academic or certification document."""

    title: str
    status: str
    created_at: int


@dataclass
class HistoryEntry:
    """Outcome of the latest verification recorded for an id."""

    timestamp: int
    outcome: str


@dataclass
class Backup:
    """Where and by whom a backup copy was taken. Immutable once created."""

    timestamp: int
    location: str
    author: str


# === Accounts ===


@dataclass
class User:
    name: str
    role: str


@dataclass
class Session:
    """Authentication session slot.

    ``payload`` is a single text slot: ``authenticate`` fills it with
    credentials and ``assign_permissions`` later replaces it with a
    permission string. Both are never held at the same time.
    """

    payload: str


# === Notifications, reports, exports, integrations ===


@dataclass
class NotificationConfig:
    type: str


@dataclass
class Report:
    generated_at: int
    format: str


@dataclass
class ExportRecord:
    format: str


@dataclass
class Integration:
    system_name: str


RECORD_TYPES = {
    TableName.DOCUMENTS: Document,
    TableName.HISTORY: HistoryEntry,
    TableName.BACKUPS: Backup,
    TableName.USERS: User,
    TableName.NOTIFICATIONS: NotificationConfig,
    TableName.SESSIONS: Session,
    TableName.REPORTS: Report,
    TableName.EXPORTS: ExportRecord,
    TableName.INTEGRATIONS: Integration,
}


def parse_table_name(value: str) -> Optional[TableName]:
    """Return the TableName for ``value`` or None if it names no table."""
    try:
        return TableName(value)
    except ValueError:
        return None
