"""User and session operations for certiweb."""

from typing import Optional

from certiweb.storage import sessions_crud, users_crud
from certiweb.types import Session, TableName, User


class AccountsMixin:
    """User accounts and authentication sessions."""

    # =========================================================================
    # USERS
    # =========================================================================

    def create_user(self, id: int, name: str, role: str) -> None:
        """Create a user account.

        Raises:
            RecordAlreadyExistsError: a user with ``id`` already exists.
        """
        id = self._validate_record_id(id)
        user = User(name=self._validate_text(name, "name"), role=self._validate_text(role, "role"))
        with self._invocation("create_user", TableName.USERS, id):
            users_crud.create_user(self._store, id, user)

    def get_user(self, id: int) -> Optional[User]:
        id = self._validate_record_id(id)
        return users_crud.get_user(self._store, id)

    def assign_role(self, id: int, new_role: str) -> None:
        """Replace a user's role, keeping the name.

        Raises:
            RecordNotFoundError: no user with ``id``.
        """
        id = self._validate_record_id(id)
        new_role = self._validate_text(new_role, "new_role")
        with self._invocation("assign_role", TableName.USERS, id):
            users_crud.assign_role(self._store, id, new_role)

    # =========================================================================
    # SESSIONS
    # =========================================================================

    def authenticate(self, id: int, credentials: str) -> None:
        """Open a session or replace its slot with new credentials. Never fails."""
        id = self._validate_record_id(id)
        credentials = self._validate_text(credentials, "credentials")
        with self._invocation("authenticate", TableName.SESSIONS, id):
            sessions_crud.authenticate(self._store, id, credentials)

    def assign_permissions(self, id: int, permissions: str) -> None:
        """Replace an existing session's slot with a permission string.

        Raises:
            RecordNotFoundError: session ``id`` was never authenticated.
        """
        id = self._validate_record_id(id)
        permissions = self._validate_text(permissions, "permissions")
        with self._invocation("assign_permissions", TableName.SESSIONS, id):
            sessions_crud.assign_permissions(self._store, id, permissions)

    def get_session(self, id: int) -> Optional[Session]:
        id = self._validate_record_id(id)
        return sessions_crud.get_session(self._store, id)
