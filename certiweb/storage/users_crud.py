"""Users table operations.

Strict create, strict update. ``assign_role`` keeps the user's name.
"""

import logging
from typing import Optional

from certiweb.protocols import KeyValueStore, RecordAlreadyExistsError, RecordNotFoundError
from certiweb.types import TableName, User

from .keyed_table import get_table

logger = logging.getLogger(__name__)

_users = get_table(TableName.USERS)


def create_user(store: KeyValueStore, user_id: int, user: User) -> None:
    """Insert a user. Raises RecordAlreadyExistsError if the id is taken."""
    users = _users.load(store)

    if user_id in users:
        logger.warning(f"Rejected create_user: id {user_id} already exists")
        raise RecordAlreadyExistsError(TableName.USERS.value, user_id, "User already exists")

    users[user_id] = user
    _users.store(store, users)
    logger.info(f"Created user {user_id} with role {user.role}")


def get_user(store: KeyValueStore, user_id: int) -> Optional[User]:
    return _users.load(store).get(user_id)


def assign_role(store: KeyValueStore, user_id: int, new_role: str) -> User:
    """Replace a user's role. Raises RecordNotFoundError if the id is missing."""
    users = _users.load(store)

    current = users.get(user_id)
    if current is None:
        logger.warning(f"Rejected assign_role: id {user_id} not found")
        raise RecordNotFoundError(TableName.USERS.value, user_id, "User not found")

    updated = User(name=current.name, role=new_role)
    users[user_id] = updated
    _users.store(store, users)
    logger.info(f"User {user_id} role: {current.role} -> {new_role}")
    return updated
