"""Custom SQLAlchemy types for MAILINGLIST.

These types encapsulate small storage representations while preserving clear
Python-side types for tooling.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import TYPE_CHECKING, Any

from sqlalchemy import BigInteger, Integer
from sqlalchemy.types import TypeDecorator

from mailinglist.domain import EPOCH

if TYPE_CHECKING:
    from sqlalchemy.engine.interfaces import Dialect

__all__ = ["BIGINT_PK", "EpochSeconds"]


BIGINT_PK = BigInteger().with_variant(Integer(), "sqlite")

_ONE_SECOND = timedelta(seconds=1)


class EpochSeconds(TypeDecorator[datetime]):  # pylint: disable=too-many-ancestors
    """UTC datetime stored as integer seconds since the Unix epoch.

    Naive datetimes are treated as UTC. Sub-second precision is dropped
    (floored) on write. ``None`` and ``0`` both read back as the epoch.
    """

    impl = BigInteger
    cache_ok = True

    def process_bind_param(self, value: datetime | None, dialect: Dialect) -> Any:
        if value is None:
            return 0
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return (value - EPOCH) // _ONE_SECOND

    def process_result_value(self, value: Any, dialect: Dialect) -> datetime:
        if not value:
            return EPOCH
        return EPOCH + timedelta(seconds=int(value))

    def process_literal_param(self, value: datetime | None, dialect: Dialect) -> Any:
        return str(self.process_bind_param(value, dialect))

    @property
    def python_type(self) -> type[datetime]:
        return datetime
