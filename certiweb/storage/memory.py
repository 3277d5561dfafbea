"""In-process host store.

Stands in for the host's durable key-value service in tests and in
embedded use where durability is not needed. Blobs are kept as the same
strings a durable store would persist, so decoding runs on every load.
"""

import contextlib
import logging
from typing import Dict, Iterator, Optional

logger = logging.getLogger(__name__)


class InMemoryStore:
    """Dict-backed key-value store with all-or-nothing transactions."""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._data: Dict[str, str] = dict(initial or {})

    def get(self, name: str) -> Optional[str]:
        return self._data.get(name)

    def set(self, name: str, blob: str) -> None:
        self._data[name] = blob

    def names(self) -> list:
        """Names that currently hold a value."""
        return sorted(self._data)

    def snapshot(self) -> Dict[str, str]:
        """Copy of everything stored, for inspection."""
        return dict(self._data)

    @contextlib.contextmanager
    def transaction(self) -> Iterator[None]:
        """Discard every write made in the block if an exception escapes it."""
        saved = dict(self._data)
        try:
            yield
        except BaseException as e:
            logger.debug(f"Invocation failed, discarding writes: {e!r}")
            self._data = saved
            raise
