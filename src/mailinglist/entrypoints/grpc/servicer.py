"""gRPC servicer: maps ``MailingListService`` calls onto the CRUD service.

Status codes per error class:

| Raised                    | Status           |
|---------------------------|------------------|
| ValidationError           | INVALID_ARGUMENT |
| UniqueConstraintViolation | ALREADY_EXISTS   |
| StoreUnavailable          | UNAVAILABLE      |
| anything else             | INTERNAL (message not leaked) |
"""

from __future__ import annotations

import logging
import math
from collections.abc import Iterator
from contextlib import contextmanager
from datetime import datetime, timezone

import grpc

from mailinglist.domain import (
    StoreUnavailable,
    SubscriberRecord,
    UniqueConstraintViolation,
    ValidationError,
)
from mailinglist.service_layer import EmailService

from .generated import mailinglist_pb2 as pb
from .generated.mailinglist_pb2_grpc import MailingListServiceServicer

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MSG = "internal server error"  # pragma: no mutate

ERROR_STATUS: tuple[tuple[type[Exception], grpc.StatusCode], ...] = (
    (ValidationError, grpc.StatusCode.INVALID_ARGUMENT),
    (UniqueConstraintViolation, grpc.StatusCode.ALREADY_EXISTS),
    (StoreUnavailable, grpc.StatusCode.UNAVAILABLE),
)


def entry_from_record(record: SubscriberRecord) -> pb.EmailEntry:
    return pb.EmailEntry(
        id=record.id,
        email=record.email,
        confirmed_at=math.floor(record.confirmed_at.timestamp()),
        opt_out=record.opt_out,
    )


def record_from_entry(entry: pb.EmailEntry) -> SubscriberRecord:
    """Convert a wire entry; `confirmed_at` is seconds since the epoch.

    Raises:
        ValidationError: If `confirmed_at` is outside the datetime range.
    """
    try:
        confirmed_at = datetime.fromtimestamp(entry.confirmed_at, tz=timezone.utc)
    except (OverflowError, OSError, ValueError) as e:
        raise ValidationError(
            f"confirmed_at out of range: {entry.confirmed_at}"
        ) from e
    return SubscriberRecord(
        id=entry.id,
        email=entry.email,
        confirmed_at=confirmed_at,
        opt_out=entry.opt_out,
    )


def _email_response(record: SubscriberRecord | None) -> pb.EmailResponse:
    if record is None:
        return pb.EmailResponse()
    return pb.EmailResponse(email_entry=entry_from_record(record))


@contextmanager
def _status_on_error(method: str, context: grpc.ServicerContext) -> Iterator[None]:
    """Abort the call with the status matching a raised error."""
    try:
        yield
    except tuple(exc for exc, _ in ERROR_STATUS) as e:
        code = next(code for exc, code in ERROR_STATUS if isinstance(e, exc))
        logger.warning("gRPC %s failed with %s: %s", method, code.name, e)
        context.abort(code, str(e))
    except Exception:  # pylint: disable=broad-exception-caught
        logger.exception("Unhandled error in gRPC %s", method)
        context.abort(grpc.StatusCode.INTERNAL, INTERNAL_ERROR_MSG)


class MailingListServicer(MailingListServiceServicer):
    """Thin adapter from protobuf requests to `EmailService` calls.

    Absence is an `EmailResponse` without `email_entry`, never an error.
    """

    def __init__(self, service: EmailService) -> None:
        self.service = service

    # pylint: disable=invalid-name

    def CreateEmail(self, request, context):
        logger.info("gRPC CreateEmail: %s", request.email_addr)
        with _status_on_error("CreateEmail", context):
            return _email_response(self.service.create_email(request.email_addr))

    def GetEmail(self, request, context):
        logger.info("gRPC GetEmail: %s", request.email_addr)
        with _status_on_error("GetEmail", context):
            return _email_response(self.service.get_email(request.email_addr))

    def GetEmailBatch(self, request, context):
        logger.info("gRPC GetEmailBatch: page=%d count=%d", request.page, request.count)
        with _status_on_error("GetEmailBatch", context):
            records = self.service.get_email_batch(request.page, request.count)
            return pb.GetEmailBatchResponse(
                email_entries=[entry_from_record(r) for r in records]
            )

    def UpdateEmail(self, request, context):
        logger.info("gRPC UpdateEmail: %s", request.email_entry.email)
        with _status_on_error("UpdateEmail", context):
            record = record_from_entry(request.email_entry)
            return _email_response(self.service.update_email(record))

    def DeleteEmail(self, request, context):
        logger.info("gRPC DeleteEmail: %s", request.email_addr)
        with _status_on_error("DeleteEmail", context):
            return _email_response(self.service.delete_email(request.email_addr))
