"""Documents table operations.

Policy: strict create (``register_document`` rejects a taken id) and
strict update (``update_document_status`` rejects a missing id). Documents
are never deleted.

All functions receive the host store explicitly so they can run against
any KeyValueStore implementation.
"""

import logging
from typing import Optional

from certiweb.protocols import KeyValueStore, RecordAlreadyExistsError, RecordNotFoundError
from certiweb.types import Document, TableName

from .keyed_table import get_table

logger = logging.getLogger(__name__)

_documents = get_table(TableName.DOCUMENTS)


def register_document(store: KeyValueStore, document_id: int, document: Document) -> None:
    """Insert a new document. Raises RecordAlreadyExistsError if the id is taken."""
    documents = _documents.load(store)

    if document_id in documents:
        logger.warning(f"Rejected register_document: id {document_id} already exists")
        raise RecordAlreadyExistsError(
            TableName.DOCUMENTS.value,
            document_id,
            "Document with the same ID already exists",
        )

    documents[document_id] = document
    _documents.store(store, documents)
    logger.info(f"Registered document {document_id} ({document.status})")


def get_document(store: KeyValueStore, document_id: int) -> Optional[Document]:
    """Return the document for ``document_id`` or None."""
    return _documents.load(store).get(document_id)


def update_document_status(store: KeyValueStore, document_id: int, new_status: str) -> Document:
    """Replace a document's status, keeping title and creation time.

    Raises RecordNotFoundError if the id is not registered.
    """
    documents = _documents.load(store)

    current = documents.get(document_id)
    if current is None:
        logger.warning(f"Rejected update_document_status: id {document_id} not found")
        raise RecordNotFoundError(TableName.DOCUMENTS.value, document_id, "Document not found")

    updated = Document(title=current.title, status=new_status, created_at=current.created_at)
    documents[document_id] = updated
    _documents.store(store, documents)
    logger.info(f"Document {document_id} status: {current.status} -> {new_status}")
    return updated
