"""Interface for the durable table of subscriber records.

Defines the `RecordStore` port: atomic create/read/update/delete/list
primitives over subscriber records, with uniqueness on the email address.

Contract overview
-----------------
- "Not found" is a value (``None`` or an empty list), never an error.
- `replace()` and `remove()` on a missing row are no-op successes.
- Per-request storage failures raise `StoreUnavailable`.
- Only `initialize()` may raise `StoreInitializationError`.
"""

from __future__ import annotations

import abc
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from mailinglist.domain import SubscriberRecord


class RecordStore(abc.ABC):
    """Durable table of subscriber records keyed by email address."""

    @abc.abstractmethod
    def initialize(self) -> None:
        """Create the backing table if it does not exist yet.

        A table that already exists is a tolerated outcome, so calling this on
        every process start is safe.

        Raises:
            StoreInitializationError: If the table cannot be created for any
                reason other than it already existing.
        """

    @abc.abstractmethod
    def insert(self, email: str) -> None:
        """Create a new, unconfirmed, opted-in subscriber.

        The record gets a store-assigned id, ``confirmed_at`` at the epoch and
        ``opt_out`` set to False. The created row is not read back.

        Args:
            email: The address to subscribe, stored as given.

        Raises:
            UniqueConstraintViolation: If the address is already subscribed.
            StoreUnavailable: On storage I/O failure.
        """

    @abc.abstractmethod
    def find_by_email(self, email: str) -> SubscriberRecord | None:
        """Look up a subscriber by email address.

        Args:
            email: The address to look up (exact, case-sensitive match).

        Returns:
            SubscriberRecord | None: The record if found, otherwise ``None``.

        Raises:
            StoreUnavailable: On storage I/O failure.
        """

    @abc.abstractmethod
    def list_page(self, page: int, count: int) -> list[SubscriberRecord]:
        """Return one page of subscribers ordered by id ascending.

        Page 1 holds the first `count` records; page ``n`` starts at offset
        ``(n - 1) * count``. Pages past the end are empty.

        Args:
            page: 1-based page number.
            count: Page size.

        Returns:
            list[SubscriberRecord]: Up to `count` records, possibly empty.

        Raises:
            StoreUnavailable: On storage I/O failure.
        """

    @abc.abstractmethod
    def replace(self, record: SubscriberRecord) -> None:
        """Overwrite ``confirmed_at`` and ``opt_out`` of the row matching
        ``record.email``.

        The id and email of the stored row are never changed. If no row
        matches, this is a no-op.

        Raises:
            StoreUnavailable: On storage I/O failure.
        """

    @abc.abstractmethod
    def remove(self, email: str) -> None:
        """Physically delete the row matching `email`; no-op if absent.

        Raises:
            StoreUnavailable: On storage I/O failure.
        """
