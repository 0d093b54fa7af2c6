"""Wire schemas for the JSON/HTTP adapter.

Field names on the wire are capitalized (``Id``, ``Email``, ``ConfirmedAt``,
``OptOut``, ``Page``, ``Count``); Python attributes are snake_case. Both
spellings are accepted on input.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from mailinglist.domain import EPOCH, SubscriberRecord


class EmailEntry(BaseModel):
    """A subscriber record as sent and received over JSON."""

    model_config = ConfigDict(populate_by_name=True)

    id: int = Field(0, alias="Id")
    email: str = Field("", alias="Email")
    confirmed_at: datetime = Field(EPOCH, alias="ConfirmedAt")
    opt_out: bool = Field(False, alias="OptOut")

    @classmethod
    def from_record(cls, record: SubscriberRecord) -> "EmailEntry":
        return cls(
            id=record.id,
            email=record.email,
            confirmed_at=record.confirmed_at,
            opt_out=record.opt_out,
        )

    def to_record(self) -> SubscriberRecord:
        return SubscriberRecord(
            id=self.id,
            email=self.email,
            confirmed_at=self.confirmed_at,
            opt_out=self.opt_out,
        )


class BatchQuery(BaseModel):
    """Paging parameters of a batch request; both must be > 0."""

    model_config = ConfigDict(populate_by_name=True)

    page: int = Field(0, alias="Page")
    count: int = Field(0, alias="Count")


class ErrorBody(BaseModel):
    """Body of every non-2xx response."""

    Error: str
