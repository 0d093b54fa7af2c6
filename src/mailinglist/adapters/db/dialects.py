"""Utility enums and helpers for database dialect handling.

This module defines the set of supported database dialect names used by
MAILINGLIST, and the dialect-specific recognition of driver errors that the
record store must tell apart (e.g. "table already exists").
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from sqlalchemy.engine import Connection, Engine
    from sqlalchemy.exc import DBAPIError

#: SQLSTATE raised by PostgreSQL for CREATE TABLE on an existing table.
PG_DUPLICATE_TABLE = "42P07"  # pragma: no mutate

SQLITE_TABLE_EXISTS_KEYWORDS = ("table", "already exists")  # pragma: no mutate


class UnsupportedDialect(Exception):
    """Raised when an unsupported database dialect is encountered."""


class DialectName(str, Enum):
    """Enumeration of supported SQLAlchemy dialect names.

    Attributes:
        POSTGRES: PostgreSQL dialect (``"postgresql"``).
        SQLITE:   SQLite dialect (``"sqlite"``).
    """

    POSTGRES = "postgresql"
    SQLITE = "sqlite"

    @classmethod
    def from_string(cls, dialect_str: str) -> DialectName:
        """Normalize and convert an arbitrary dialect string to DialectName.

        Accepts common aliases and driver-qualified names (e.g., 'postgres',
        'postgresql+psycopg', 'sqlite', 'sqlite+pysqlite').

        Args:
            dialect_str: a raw dialect string

        Returns:
            The corresponding DialectName enum member.

        Raises:
            UnsupportedDialect: if the dialect is not recognized or supported.
        """

        raw = (dialect_str or "").strip().lower()
        base = raw.split("+", 1)[0]

        if base in {"postgres", "postgresql", "pg"}:
            return cls.POSTGRES
        if base in {"sqlite"}:
            return cls.SQLITE

        raise UnsupportedDialect(f"Unsupported dialect: {dialect_str!r}")

    @classmethod
    def from_sqlalchemy(cls, obj: Engine | Connection) -> DialectName:
        """Extract dialect from a SQLAlchemy Engine or Connection.

        Args:
            obj: SQLAlchemy Engine or Connection instance.

        Returns:
            The corresponding DialectName enum member.

        Raises:
            UnsupportedDialect: if the dialect is not recognized or supported.
        """
        try:
            name = obj.dialect.name
        except AttributeError as e:
            raise UnsupportedDialect(
                f"Object {type(obj).__name__} does not expose .dialect.name"
            ) from e
        return cls.from_string(name)

    def is_table_exists_error(self, error: DBAPIError) -> bool:
        """Tell whether a failed CREATE TABLE failed only because the table exists.

        Args:
            error: The SQLAlchemy-wrapped driver error.

        Returns:
            bool: True for the "table already exists" outcome of this dialect.
        """
        if self is DialectName.POSTGRES:
            # psycopg 3 exposes `sqlstate`, psycopg2 `pgcode`
            code = getattr(error.orig, "sqlstate", None) or getattr(
                error.orig, "pgcode", None
            )
            return code == PG_DUPLICATE_TABLE
        msg = str(error.orig if error.orig is not None else error).lower()
        return all(kw in msg for kw in SQLITE_TABLE_EXISTS_KEYWORDS)
