"""In-memory RecordStore implementation for testing purposes."""

import dataclasses
import itertools

from mailinglist.domain import EPOCH, SubscriberRecord, UniqueConstraintViolation
from mailinglist.interfaces.record_store import RecordStore


class InMemoryRecordStore(RecordStore):
    """In-memory RecordStore implementation for testing purposes.

    Note: This implementation is not thread-safe and is intended
    solely for use in single-threaded test scenarios
    """

    def __init__(self) -> None:
        self.records: dict[str, SubscriberRecord] = {}
        self._ids = itertools.count(1)
        self.initialized = False

    def initialize(self) -> None:
        self.initialized = True

    def insert(self, email: str) -> None:
        if email in self.records:
            raise UniqueConstraintViolation(email)
        self.records[email] = SubscriberRecord(
            id=next(self._ids), email=email, confirmed_at=EPOCH, opt_out=False
        )

    def find_by_email(self, email: str) -> SubscriberRecord | None:
        return self.records.get(email)

    def list_page(self, page: int, count: int) -> list[SubscriberRecord]:
        ordered = sorted(self.records.values(), key=lambda record: record.id)
        start = (page - 1) * count
        return ordered[start : start + count]

    def replace(self, record: SubscriberRecord) -> None:
        if (stored := self.records.get(record.email)) is None:
            return
        self.records[record.email] = dataclasses.replace(
            stored, confirmed_at=record.confirmed_at, opt_out=record.opt_out
        )

    def remove(self, email: str) -> None:
        self.records.pop(email, None)
