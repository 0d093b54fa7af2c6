"""Fixtures for the RecordStore contract suite."""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from mailinglist.adapters.record_store import (
    InMemoryRecordStore,
    SqlAlchemyRecordStore,
)
from mailinglist.interfaces.record_store import RecordStore


@pytest.fixture(params=["memory", "sql_memory", "sql_file", "postgres"])
def record_store(request: pytest.FixtureRequest) -> Iterator[RecordStore]:
    """Return a fresh, initialized RecordStore for the requested backend.

    Supported params:
      - `"memory"` → InMemoryRecordStore
      - `"sql_memory"` → SqlAlchemyRecordStore on in-memory SQLite
      - `"sql_file"` → SqlAlchemyRecordStore on a SQLite file
      - `"postgres"` → SqlAlchemyRecordStore on PostgreSQL (skipped without Docker)

    Engine fixtures are requested lazily so that only the chosen backend is built.
    """
    match request.param:
        case "memory":
            store: RecordStore = InMemoryRecordStore()
        case "sql_memory":
            store = SqlAlchemyRecordStore(request.getfixturevalue("sqlite_engine_memory"))
        case "sql_file":
            store = SqlAlchemyRecordStore(request.getfixturevalue("sqlite_engine_file"))
        case "postgres":
            store = SqlAlchemyRecordStore(request.getfixturevalue("postgres_engine"))
        case _:
            raise ValueError(f"unknown store type: {request.param}")
    store.initialize()
    yield store


@pytest.fixture(params=["sql_memory", "sql_file", "postgres"])
def shared_engine_store(request: pytest.FixtureRequest) -> RecordStore:
    """SqlAlchemyRecordStore on one Engine shared by every calling thread."""
    match request.param:
        case "sql_memory":
            engine = request.getfixturevalue("sqlite_engine_memory")
        case "sql_file":
            engine = request.getfixturevalue("sqlite_engine_file")
        case "postgres":
            engine = request.getfixturevalue("postgres_engine")
        case _:
            raise ValueError(f"unknown store type: {request.param}")
    return SqlAlchemyRecordStore(engine)
