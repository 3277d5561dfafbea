"""Document, history and backup operations for certiweb."""

from typing import Optional

from certiweb.storage import backups_crud, documents_crud, history_crud
from certiweb.types import Backup, Document, HistoryEntry, TableName


class RecordsMixin:
    """Documents, their verification history, and their backups."""

    # =========================================================================
    # DOCUMENTS
    # =========================================================================

    def register_document(self, id: int, title: str, status: str, created_at: int) -> None:
        """Register a new document.

        Raises:
            RecordAlreadyExistsError: a document with ``id`` is already registered.
        """
        id = self._validate_record_id(id)
        document = Document(
            title=self._validate_text(title, "title"),
            status=self._validate_text(status, "status"),
            created_at=self._validate_timestamp(created_at, "created_at"),
        )
        with self._invocation("register_document", TableName.DOCUMENTS, id):
            documents_crud.register_document(self._store, id, document)

    def get_document(self, id: int) -> Optional[Document]:
        id = self._validate_record_id(id)
        return documents_crud.get_document(self._store, id)

    def update_document_status(self, id: int, new_status: str) -> None:
        """Change a registered document's status. Title and creation time are kept.

        Raises:
            RecordNotFoundError: no document with ``id``.
        """
        id = self._validate_record_id(id)
        new_status = self._validate_text(new_status, "new_status")
        with self._invocation("update_document_status", TableName.DOCUMENTS, id):
            documents_crud.update_document_status(self._store, id, new_status)

    # =========================================================================
    # HISTORY
    # =========================================================================

    def append_history(self, id: int, timestamp: int, outcome: str) -> None:
        """Add a history entry with an explicit timestamp.

        Raises:
            RecordAlreadyExistsError: ``id`` already has a history entry.
        """
        id = self._validate_record_id(id)
        entry = HistoryEntry(
            timestamp=self._validate_timestamp(timestamp),
            outcome=self._validate_text(outcome, "outcome"),
        )
        with self._invocation("append_history", TableName.HISTORY, id):
            history_crud.append_history(self._store, id, entry)

    def get_history(self, id: int) -> Optional[HistoryEntry]:
        id = self._validate_record_id(id)
        return history_crud.get_history(self._store, id)

    def verify_document(self, id: int, outcome: str) -> None:
        """Record a verification outcome stamped with the current clock time.

        Always succeeds. Any earlier history entry for ``id`` is replaced,
        whether it came from ``append_history`` or an earlier verification.
        """
        id = self._validate_record_id(id)
        outcome = self._validate_text(outcome, "outcome")
        with self._invocation("verify_document", TableName.HISTORY, id):
            history_crud.verify_document(self._store, self._clock, id, outcome)

    # =========================================================================
    # BACKUPS
    # =========================================================================

    def register_backup(self, id: int, timestamp: int, location: str, author: str) -> None:
        """Register a backup. Backups cannot be modified afterwards.

        Raises:
            RecordAlreadyExistsError: a backup with ``id`` already exists.
        """
        id = self._validate_record_id(id)
        backup = Backup(
            timestamp=self._validate_timestamp(timestamp),
            location=self._validate_text(location, "location"),
            author=self._validate_text(author, "author"),
        )
        with self._invocation("register_backup", TableName.BACKUPS, id):
            backups_crud.register_backup(self._store, id, backup)

    def get_backup(self, id: int) -> Optional[Backup]:
        id = self._validate_record_id(id)
        return backups_crud.get_backup(self._store, id)
