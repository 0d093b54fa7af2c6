"""The subscriber record, the only entity of the mailing list."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

from .errors import ValidationError

#: Epoch-zero. A record confirmed "at the epoch" has not been confirmed yet.
EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


@dataclass(frozen=True, slots=True)
class SubscriberRecord:
    """One mailing-list subscriber.

    Notes:
      - `id` is assigned by the store; it is ``0`` on records built by callers
        (e.g. an update request) and is never written back by the store.
      - `confirmed_at` is normalized to a tz-aware UTC datetime. Naive values
        are treated as UTC.
    """

    email: str
    id: int = 0
    confirmed_at: datetime = field(default=EPOCH)
    opt_out: bool = False

    def __post_init__(self) -> None:
        if not isinstance(self.confirmed_at, datetime):
            raise ValidationError("confirmed_at must be a datetime.")
        if self.confirmed_at.tzinfo is None:
            object.__setattr__(
                self, "confirmed_at", self.confirmed_at.replace(tzinfo=timezone.utc)
            )
        elif self.confirmed_at.utcoffset():
            object.__setattr__(
                self, "confirmed_at", self.confirmed_at.astimezone(timezone.utc)
            )

    @property
    def is_confirmed(self) -> bool:
        """True once the subscriber has a confirmation time after the epoch."""
        return self.confirmed_at > EPOCH
