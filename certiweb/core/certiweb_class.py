"""Certiweb class: main interface for registry operations.

This module defines the Certiweb class skeleton, which inherits the
public operation surface from the table mixins.
"""

import contextlib
import logging
from typing import Iterator, Optional

from certiweb.clock import SystemClock
from certiweb.config import Settings, get_settings, validate_registry_id
from certiweb.core.accounts import AccountsMixin
from certiweb.core.records import RecordsMixin
from certiweb.core.reporting import ReportingMixin
from certiweb.core.validation import ValidationMixin
from certiweb.logging_config import log_rejected, log_write
from certiweb.protocols import (
    Clock,
    KeyValueStore,
    RecordAlreadyExistsError,
    RecordNotFoundError,
)
from certiweb.storage import SQLiteStore, get_table
from certiweb.types import VALID_TABLE_NAMES, TableName, parse_table_name

logger = logging.getLogger(__name__)


class Certiweb(
    RecordsMixin,
    AccountsMixin,
    ReportingMixin,
    ValidationMixin,
):
    """Main interface for certiweb registry operations.

    Every write runs as one invocation: the table's collection is loaded,
    validated, changed and stored inside a single host transaction. If the
    invocation raises, the host discards its writes and every collection is
    left exactly as it was.

    The registry assumes the host serializes invocations. There is no
    locking and no version check, so two concurrent writers to the same
    table would lose one of the updates.

    Examples:
        # SQLite file under ~/.certiweb
        registry = Certiweb(registry_id="school")

        # In-memory host, fixed clock
        from certiweb.clock import FixedClock
        from certiweb.storage import InMemoryStore
        registry = Certiweb(store=InMemoryStore(), clock=FixedClock(1640995200))
    """

    def __init__(
        self,
        registry_id: Optional[str] = None,
        store: Optional[KeyValueStore] = None,
        clock: Optional[Clock] = None,
        settings: Optional[Settings] = None,
    ):
        """Initialize Certiweb.

        Args:
            registry_id: Names this registry; selects the SQLite file when
                no store is given. Defaults to the configured registry id.
            store: Host key-value service. Defaults to a SQLiteStore in the
                configured data directory.
            clock: Host clock. Defaults to SystemClock.
            settings: Settings override, mainly for tests.
        """
        self._settings = settings or get_settings()
        self.registry_id = validate_registry_id(registry_id or self._settings.registry_id)
        self.max_text_length = self._settings.max_text_length

        if store is None:
            store = SQLiteStore(self._settings.db_path(self.registry_id))
        if not isinstance(store, KeyValueStore):
            raise TypeError(f"Invalid host store {store!r}: needs get, set and transaction")
        if clock is None:
            clock = SystemClock()
        if not isinstance(clock, Clock):
            raise TypeError(f"Invalid clock {clock!r}: needs now()")

        self._store = store
        self._clock = clock
        logger.debug(
            f"Certiweb registry={self.registry_id} store={type(store).__name__} "
            f"clock={type(clock).__name__}"
        )

    @property
    def store(self) -> KeyValueStore:
        return self._store

    @property
    def clock(self) -> Clock:
        return self._clock

    @contextlib.contextmanager
    def _invocation(self, operation: str, table: TableName, record_id: int) -> Iterator[None]:
        """Run one write operation as an all-or-nothing host transaction."""
        try:
            with self._store.transaction():
                yield
        except (RecordAlreadyExistsError, RecordNotFoundError) as e:
            log_rejected(
                self.registry_id,
                table.value,
                record_id,
                type(e).__name__,
                self._settings.data_dir,
            )
            raise
        log_write(self.registry_id, table.value, record_id, operation, self._settings.data_dir)

    def table_size(self, table: str) -> int:
        """Number of entries currently persisted in ``table``."""
        name = parse_table_name(table)
        if name is None:
            raise ValueError(
                f"Unknown table: {table!r} (expected one of {sorted(VALID_TABLE_NAMES)})"
            )
        return len(get_table(name).load(self._store))
