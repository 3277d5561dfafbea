"""
certiweb - Persistent registry for academic and certification records.

Documents, verification history, backups, users, sessions, notifications,
reports, exports and integrations, kept as keyed tables in host storage.
"""

from .core import Certiweb
from .protocols import (
    CertiwebError,
    RecordAlreadyExistsError,
    RecordNotFoundError,
    StorageError,
)

try:
    from importlib.metadata import version

    __version__ = version("certiweb")
except Exception:
    __version__ = "0.0.0"

__all__ = [
    "Certiweb",
    "CertiwebError",
    "RecordAlreadyExistsError",
    "RecordNotFoundError",
    "StorageError",
]
