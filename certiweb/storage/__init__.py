"""certiweb storage layer.

Host stores (InMemoryStore, SQLiteStore), the KeyedTable primitive, and one
``*_crud`` module per logical table.
"""

from .keyed_table import TABLES, KeyedTable, get_table
from .memory import InMemoryStore
from .sqlite import SQLiteStore

__all__ = [
    "KeyedTable",
    "TABLES",
    "get_table",
    "InMemoryStore",
    "SQLiteStore",
]
