"""Domain layer for MAILINGLIST.

Contains the subscriber record and the error taxonomy shared by the store,
the service layer and every transport adapter. This package is deliberately
technology-agnostic.

Dependency rule: do not import from `mailinglist.adapters` or
`mailinglist.entrypoints`.
"""

from .errors import (
    MailingListError,
    StoreInitializationError,
    StoreUnavailable,
    UniqueConstraintViolation,
    ValidationError,
)
from .subscriber import EPOCH, SubscriberRecord

__all__ = [
    "EPOCH",
    "MailingListError",
    "StoreInitializationError",
    "StoreUnavailable",
    "SubscriberRecord",
    "UniqueConstraintViolation",
    "ValidationError",
]
