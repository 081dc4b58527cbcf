"""
Entity stores.

``EntityStore`` defines the contract; ``MemoryEntityStore`` keeps data
in process memory and ``SQLiteEntityStore`` persists it to a SQLite
file.  Both behave identically as far as callers can observe.
"""

from .base import EntityStore
from .memory import MemoryEntityStore
from .sqlite import SQLiteEntityStore

__all__ = ["EntityStore", "MemoryEntityStore", "SQLiteEntityStore"]
