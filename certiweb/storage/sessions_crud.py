"""Sessions table operations.

Each session id owns one text slot. ``authenticate`` always overwrites it
with credentials; ``assign_permissions`` requires the session to exist and
then overwrites the same slot with a permission string.
"""

import logging
from typing import Optional

from certiweb.protocols import KeyValueStore, RecordNotFoundError
from certiweb.types import Session, TableName

from .keyed_table import get_table

logger = logging.getLogger(__name__)

_sessions = get_table(TableName.SESSIONS)


def authenticate(store: KeyValueStore, session_id: int, credentials: str) -> None:
    """Open or replace the session slot with ``credentials``. Never fails."""
    sessions = _sessions.load(store)
    sessions[session_id] = Session(payload=credentials)
    _sessions.store(store, sessions)
    # Credentials are never written to logs.
    logger.info(f"Authenticated session {session_id}")


def assign_permissions(store: KeyValueStore, session_id: int, permissions: str) -> None:
    """Overwrite an existing session slot with ``permissions``.

    Raises RecordNotFoundError if the session was never authenticated.
    """
    sessions = _sessions.load(store)

    if session_id not in sessions:
        logger.warning(f"Rejected assign_permissions: session {session_id} not found")
        raise RecordNotFoundError(TableName.SESSIONS.value, session_id, "Session not found")

    sessions[session_id] = Session(payload=permissions)
    _sessions.store(store, sessions)
    logger.info(f"Assigned permissions to session {session_id}")


def get_session(store: KeyValueStore, session_id: int) -> Optional[Session]:
    return _sessions.load(store).get(session_id)
