"""Transport-neutral CRUD operations on mailing-list subscribers."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from mailinglist.domain import ValidationError

if TYPE_CHECKING:
    from mailinglist.domain import SubscriberRecord
    from mailinglist.interfaces.record_store import RecordStore

logger = logging.getLogger(__name__)


class EmailService:
    """The single source of truth for subscriber CRUD semantics.

    Every transport adapter delegates here so that behavior is identical
    regardless of transport. Store errors propagate unchanged; ``None`` means
    "no such subscriber" and is never an error.

    Args:
        store: The record store shared by all requests of the process.
    """

    def __init__(self, store: RecordStore) -> None:
        self.store = store

    def create_email(self, address: str) -> SubscriberRecord | None:
        """Subscribe a new address and return the persisted record.

        Raises:
            ValidationError: If `address` is empty.
            UniqueConstraintViolation: If `address` is already subscribed.
            StoreUnavailable: On storage I/O failure.
        """
        if not address:
            raise ValidationError("email address is required")
        logger.debug("Creating subscriber %s", address)
        self.store.insert(address)
        return self.store.find_by_email(address)

    def get_email(self, address: str) -> SubscriberRecord | None:
        """Return the subscriber with this address, or ``None``."""
        logger.debug("Getting subscriber %s", address)
        return self.store.find_by_email(address)

    def get_email_batch(self, page: int, count: int) -> list[SubscriberRecord]:
        """Return one page of subscribers, ordered by id.

        Args:
            page: 1-based page number; must be > 0.
            count: Page size; must be > 0.

        Returns:
            list[SubscriberRecord]: The page as stored, possibly empty.

        Raises:
            ValidationError: If `page` or `count` is not a positive integer.
            StoreUnavailable: On storage I/O failure.
        """
        if not _is_positive_int(page) or not _is_positive_int(count):
            raise ValidationError("page and count are required and must be > 0")
        logger.debug("Getting subscriber batch page=%d count=%d", page, count)
        return self.store.list_page(page, count)

    def update_email(self, record: SubscriberRecord) -> SubscriberRecord | None:
        """Write ``confirmed_at`` and ``opt_out`` and return what is now stored.

        The record's email is the key; its id is ignored. Updating an address
        that is not subscribed is not an error and returns ``None``.
        """
        logger.debug("Updating subscriber %s", record.email)
        self.store.replace(record)
        return self.store.find_by_email(record.email)

    def delete_email(self, address: str) -> SubscriberRecord | None:
        """Unsubscribe an address and return what is now stored.

        The result is ``None`` once the delete succeeded; deleting an address
        that is not subscribed is not an error.
        """
        logger.debug("Deleting subscriber %s", address)
        self.store.remove(address)
        return self.store.find_by_email(address)


def _is_positive_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value > 0
