"""Database engine factory and helpers.

This module centralizes creation of SQLAlchemy Engines and applies
backend-specific tuning:

- **SQLite**: adds connection PRAGMAs to enable WAL and tune durability and
  temporary storage, and applies the store timeout as the busy timeout. An
  in-memory database lives in a single connection, which the pool hands to
  one transaction at a time.
- **PostgreSQL**: applies the store timeout as ``statement_timeout``.

Every backend also uses the store timeout as the connection-pool checkout
timeout, so a request never blocks on the store for much longer than that.

Use this module whenever you need an Engine so that all connections are
consistently configured.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from sqlalchemy import create_engine, event
from sqlalchemy.engine import URL, make_url
from sqlalchemy.pool import QueuePool

from .dialects import DialectName

if TYPE_CHECKING:
    from sqlite3 import Connection as SQLiteConnection

    from sqlalchemy.engine import Engine

SQLITE_NAMES = {"sqlite", "sqlite+pysqlite"}
SQLITE_MEMORY_DATABASES = {None, "", ":memory:"}

#: Default per-operation store timeout, in seconds.
DEFAULT_TIMEOUT = 1.0


def is_sqlite(url: str | URL) -> bool:
    """Return True if the given SQLAlchemy URL or string corresponds to SQLite.

    Args:
        url: A database URL string or SQLAlchemy :class:`URL`.

    Returns:
        bool: True if the backend is SQLite, otherwise False.
    """
    u = make_url(str(url))
    return u.get_backend_name() in SQLITE_NAMES


def is_sqlite_memory(url: str | URL) -> bool:
    """Return True if the URL points at a private in-memory SQLite database."""
    u = make_url(str(url))
    return is_sqlite(u) and u.database in SQLITE_MEMORY_DATABASES


def make_engine(
    url: str | URL, *, echo: bool = False, timeout: float = DEFAULT_TIMEOUT
) -> Engine:
    """Create a SQLAlchemy Engine for the given URL.

    If the backend is SQLite, applies a set of PRAGMAs on every connection:
        - ``journal_mode=WAL`` (write-ahead logging for concurrency)
        - ``synchronous=NORMAL`` (balanced durability)
        - ``temp_store=MEMORY`` (reduce temp file I/O)

    In-memory SQLite databases exist per connection, so they are served from
    a pool of exactly one connection. Concurrent transactions wait for it (up
    to the store timeout) instead of interleaving on it.

    Args:
        url: Database connection URL (str or :class:`URL`).
        echo: If True, log SQL statements.
        timeout: Per-operation timeout in seconds (busy timeout, pool
            checkout timeout, statement timeout).

    Returns:
        Engine: Configured SQLAlchemy Engine.
    """
    kwargs: dict[str, Any] = {"echo": echo}
    connect_args: dict[str, Any] = {}

    dialect = DialectName.from_string(make_url(str(url)).get_backend_name())
    if dialect is DialectName.SQLITE:
        connect_args["timeout"] = timeout
        connect_args["check_same_thread"] = False
        if is_sqlite_memory(url):
            kwargs.update(poolclass=QueuePool, pool_size=1, max_overflow=0)
        kwargs["pool_timeout"] = timeout
    elif dialect is DialectName.POSTGRES:
        connect_args["options"] = f"-c statement_timeout={int(timeout * 1000)}"
        kwargs["pool_timeout"] = timeout

    engine = create_engine(url, connect_args=connect_args, **kwargs)

    if dialect is DialectName.SQLITE:

        @event.listens_for(engine, "connect")
        def _sqlite_pragmas(dbapi_conn: SQLiteConnection, conn_record):  # type: ignore #pylint: disable=W0613
            cur = dbapi_conn.cursor()
            cur.execute("PRAGMA journal_mode=WAL;")
            cur.execute("PRAGMA synchronous=NORMAL;")
            cur.execute("PRAGMA temp_store=MEMORY;")
            cur.close()

    return engine
