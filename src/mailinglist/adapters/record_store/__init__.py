"""Record store adapters.

This package contains the SQLAlchemy-based record store, which persists
subscribers in a relational database (SQLite or PostgreSQL), and an in-memory
record store used by tests.
"""

from .in_memory import InMemoryRecordStore
from .sqlalchemy_store import SqlAlchemyRecordStore

__all__ = [
    "InMemoryRecordStore",
    "SqlAlchemyRecordStore",
]
