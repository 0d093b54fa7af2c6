"""SQLAlchemy-backed RecordStore adapter for MAILINGLIST.

Persists subscriber records in the ``emails`` table (see
`adapters.record_store.schema`). The adapter holds the process-wide Engine and
runs every primitive in its own short transaction, relying on the database's
statement-level atomicity; there are no application-level locks.

Driver errors are mapped to the MAILINGLIST error taxonomy here and nowhere
else:

- ``IntegrityError`` on the unique email constraint → `UniqueConstraintViolation`
- any other ``IntegrityError`` → `ValidationError`
- any other ``DBAPIError`` or a pool checkout timeout → `StoreUnavailable`
- a failed CREATE TABLE other than "already exists" → `StoreInitializationError`
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from typing import TYPE_CHECKING, NoReturn

from sqlalchemy import delete, insert, select, update
from sqlalchemy.exc import DBAPIError, IntegrityError
from sqlalchemy.exc import TimeoutError as PoolTimeoutError

from mailinglist.adapters.db.dialects import DialectName
from mailinglist.domain import (
    EPOCH,
    StoreInitializationError,
    StoreUnavailable,
    SubscriberRecord,
    UniqueConstraintViolation,
    ValidationError,
)
from mailinglist.interfaces.record_store import RecordStore

from .schema import emails

if TYPE_CHECKING:
    from sqlalchemy.engine import Connection, Engine, RowMapping

logger = logging.getLogger(__name__)

# all flags must be present
UNIQUE_EMAIL_CONSTRAINT_KEYWORDS = ("email", "unique")  # pragma: no mutate

EMPTY_STRING = ""  # pragma: no mutate

#: Largest LIMIT/OFFSET both backends accept (signed 64-bit).
MAX_ROW_BOUND = 2**63 - 1


class SqlAlchemyRecordStore(RecordStore):
    """SQLAlchemy-backed RecordStore supporting SQLite and PostgreSQL."""

    def __init__(self, engine: Engine):
        self.engine = engine
        self.dialect = DialectName.from_sqlalchemy(engine)

    # --------------------------------------------------------------------- #
    # Interface implementation
    # --------------------------------------------------------------------- #

    def initialize(self) -> None:
        try:
            with self.engine.begin() as conn:
                emails.create(conn, checkfirst=False)
        except DBAPIError as e:
            if self.dialect.is_table_exists_error(e):
                logger.debug("Table %r already exists", emails.name)
                return
            raise StoreInitializationError(
                f"cannot create table {emails.name!r}: {e}"
            ) from e
        except PoolTimeoutError as e:
            raise StoreInitializationError(
                f"cannot create table {emails.name!r}: {e}"
            ) from e
        logger.info("Created table %r", emails.name)

    def insert(self, email: str) -> None:
        stmt = insert(emails).values(email=email, confirmed_at=EPOCH, opt_out=False)
        try:
            with self._transaction() as conn:
                conn.execute(stmt)
        except IntegrityError as e:
            self._raise_from_integrity_error(e, email)
        logger.debug("Inserted subscriber %s", email)

    def find_by_email(self, email: str) -> SubscriberRecord | None:
        stmt = select(emails).where(emails.c.email == email)
        with self._transaction() as conn:
            row = conn.execute(stmt).mappings().one_or_none()
        if row is None:
            return None
        return self._record_from_row(row)

    def list_page(self, page: int, count: int) -> list[SubscriberRecord]:
        offset = (page - 1) * count
        if offset > MAX_ROW_BOUND:
            # past any row a 64-bit id can address
            return []
        stmt = (
            select(emails)
            .order_by(emails.c.id.asc())
            .limit(min(count, MAX_ROW_BOUND))
            .offset(offset)
        )
        with self._transaction() as conn:
            rows = conn.execute(stmt).mappings().all()
        return [self._record_from_row(row) for row in rows]

    def replace(self, record: SubscriberRecord) -> None:
        stmt = (
            update(emails)
            .where(emails.c.email == record.email)
            .values(confirmed_at=record.confirmed_at, opt_out=record.opt_out)
        )
        with self._transaction() as conn:
            result = conn.execute(stmt)
        logger.debug("Replaced %s (%d row(s))", record.email, result.rowcount)

    def remove(self, email: str) -> None:
        stmt = delete(emails).where(emails.c.email == email)
        with self._transaction() as conn:
            result = conn.execute(stmt)
        logger.debug("Removed %s (%d row(s))", email, result.rowcount)

    # --------------------------------------------------------------------- #
    # Internals
    # --------------------------------------------------------------------- #

    @contextmanager
    def _transaction(self) -> Iterator[Connection]:
        """Run a block in its own transaction, mapping I/O failures.

        ``IntegrityError`` is let through so callers can tell constraint
        violations apart; every other driver error becomes `StoreUnavailable`.

        Yields:
            Connection: A connection with an open transaction.
        """
        try:
            with self.engine.begin() as conn:
                yield conn
        except IntegrityError:
            raise
        except DBAPIError as e:  # OperationalError, InterfaceError, etc.
            raise StoreUnavailable(str(e)) from e
        except PoolTimeoutError as e:
            raise StoreUnavailable(str(e)) from e

    @staticmethod
    def _record_from_row(row: RowMapping) -> SubscriberRecord:
        return SubscriberRecord(
            id=int(row["id"]),
            email=row["email"],
            confirmed_at=row["confirmed_at"],
            opt_out=bool(row["opt_out"]),
        )

    @staticmethod
    def _raise_from_integrity_error(
        integrity_error: IntegrityError, email: str
    ) -> NoReturn:
        """Translate an IntegrityError raised by an insert.

        Args:
            integrity_error: The SQLAlchemy IntegrityError instance to handle.
            email: The address that was being inserted.

        Raises:
            UniqueConstraintViolation: If the error reports the unique email
                constraint.
            ValidationError: For any other integrity error (e.g. a NULL
                email), which only malformed arguments can cause.
        """
        msg = (
            str(integrity_error.orig)
            if integrity_error.orig not in (None, EMPTY_STRING)
            else str(integrity_error)
        )

        if all(kw in msg.lower() for kw in UNIQUE_EMAIL_CONSTRAINT_KEYWORDS):
            raise UniqueConstraintViolation(email) from integrity_error

        raise ValidationError(msg) from integrity_error
