"""
certiweb Protocol Definitions
=============================

Interface contracts between the registry and its host environment.

The registry owns no storage medium and no clock. The host supplies:
- a durable key-value service holding one blob per collection name
- a monotonic clock returning integer timestamps

Error handling philosophy:
- Strict-create operations raise RecordAlreadyExistsError on a taken id
- Update operations raise RecordNotFoundError on a missing id
- Invalid arguments raise ValueError before any storage access
- Unreadable or unwritable collections raise StorageError
- A failed invocation leaves every collection as it was before the call
"""

from __future__ import annotations

from typing import ContextManager, Optional, Protocol, runtime_checkable

# =============================================================================
# HOST COLLABORATORS
# =============================================================================


@runtime_checkable
class KeyValueStore(Protocol):
    """Durable key-value service supplied by the host.

    Implementations: InMemoryStore, SQLiteStore.
    """

    def get(self, name: str) -> Optional[str]:
        """Return the blob stored under ``name``, or None if never set."""
        ...

    def set(self, name: str, blob: str) -> None:
        """Store ``blob`` under ``name``, replacing any prior value."""
        ...

    def transaction(self) -> ContextManager[None]:
        """Scope one invocation.

        Writes issued inside the block become visible only if the block
        exits normally. If an exception escapes, all of them are discarded.
        """
        ...


@runtime_checkable
class Clock(Protocol):
    """Monotonic clock supplied by the host.

    Implementations: SystemClock, FixedClock.
    """

    def now(self) -> int:
        """Current time as an integer timestamp."""
        ...


# =============================================================================
# ERRORS
# =============================================================================


class CertiwebError(Exception):
    """Base for all certiweb errors."""

    pass


class RecordAlreadyExistsError(CertiwebError):
    """Raised when a strict-create operation targets an id already present."""

    def __init__(self, table: str, record_id: int, message: Optional[str] = None):
        self.table = table
        self.record_id = record_id
        super().__init__(message or f"Record {record_id} already exists in {table}")


class RecordNotFoundError(CertiwebError):
    """Raised when an update operation targets an id that is not present."""

    def __init__(self, table: str, record_id: int, message: Optional[str] = None):
        self.table = table
        self.record_id = record_id
        super().__init__(message or f"Record {record_id} not found in {table}")


class StorageError(CertiwebError):
    """Raised when a persisted collection cannot be read, decoded or written."""

    pass
