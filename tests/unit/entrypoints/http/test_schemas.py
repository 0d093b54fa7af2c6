"""Unit tests for the JSON wire schemas."""

from datetime import datetime, timezone

from mailinglist.domain import EPOCH, SubscriberRecord
from mailinglist.entrypoints.http.schemas import BatchQuery, EmailEntry, ErrorBody


def test_entry_dumps_capitalized_fields():
    record = SubscriberRecord(
        email="alice@example.com",
        id=7,
        confirmed_at=datetime(2024, 1, 1, 12, 0, 0, tzinfo=timezone.utc),
        opt_out=True,
    )

    payload = EmailEntry.from_record(record).model_dump(by_alias=True, mode="json")

    assert payload == {
        "Id": 7,
        "Email": "alice@example.com",
        "ConfirmedAt": "2024-01-01T12:00:00Z",
        "OptOut": True,
    }


def test_entry_input_defaults():
    entry = EmailEntry.model_validate({"Email": "alice@example.com"})

    assert entry.to_record() == SubscriberRecord(email="alice@example.com")
    assert entry.confirmed_at == EPOCH


def test_entry_accepts_snake_case_names():
    entry = EmailEntry.model_validate({"email": "alice@example.com", "opt_out": True})
    assert entry.opt_out is True


def test_entry_naive_time_becomes_utc_record():
    entry = EmailEntry.model_validate(
        {"Email": "alice@example.com", "ConfirmedAt": "2024-03-01T10:20:30"}
    )

    assert entry.to_record().confirmed_at == datetime(
        2024, 3, 1, 10, 20, 30, tzinfo=timezone.utc
    )


def test_batch_query_defaults_to_invalid_zeroes():
    """Missing paging fields reach the service as 0 and are rejected there."""
    query = BatchQuery.model_validate({})
    assert (query.page, query.count) == (0, 0)


def test_error_body_shape():
    assert ErrorBody(Error="boom").model_dump() == {"Error": "boom"}
