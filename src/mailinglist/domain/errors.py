"""Error taxonomy shared by every layer of MAILINGLIST.

Adapters raise these, the service layer lets them propagate unchanged, and
transport adapters map them to their own status codes:

| Error                        | Caused by | HTTP |
|------------------------------|-----------|------|
| `ValidationError`            | client    | 400  |
| `UniqueConstraintViolation`  | client    | 409  |
| `StoreUnavailable`           | server    | 503  |
| `StoreInitializationError`   | server    | fatal at startup |

"Not found" is never an error; it is the ``None`` result of a lookup.
"""


class MailingListError(Exception):
    """Base class for MAILINGLIST errors."""


class ValidationError(MailingListError):
    """Raised when a required argument is missing or malformed.

    Examples: an empty email address, a non-positive page or count.
    """


class UniqueConstraintViolation(MailingListError):
    """Raised when creating a subscriber whose email already exists.

    Attributes:
        email (str): The email address that is already subscribed.
    """

    def __init__(self, email: str) -> None:
        super().__init__(f"Email '{email}' is already subscribed.")
        self.email = email


class StoreUnavailable(MailingListError):
    """Storage I/O failure or timeout; callers decide whether to retry."""


class StoreInitializationError(MailingListError):
    """The subscriber table could not be created.

    Raised only at startup, and never for the tolerated "table already
    exists" outcome. The process cannot continue without a table.
    """
