"""Subscriber table schema.

Defines the ``emails`` table: one row per mailing-list subscriber.

| Column         | Storage                     | Notes                         |
|----------------|-----------------------------|-------------------------------|
| `id`           | integer primary key         | store-assigned, never reused  |
| `email`        | text, UNIQUE                | stored as given               |
| `confirmed_at` | integer seconds since epoch | 0 = not yet confirmed         |
| `opt_out`      | boolean (0/1 on SQLite)     | false at creation             |

Identifiers are never reused: SQLite gets ``AUTOINCREMENT`` and PostgreSQL an
``IDENTITY`` column.
"""

from __future__ import annotations

from sqlalchemy import Boolean, Column, Identity, String, Table, false, text

from mailinglist.adapters.db.metadata import metadata
from mailinglist.adapters.db.sa_types import BIGINT_PK, EpochSeconds

__all__ = ["emails"]

emails = Table(
    "emails",
    metadata,
    Column(
        "id",
        BIGINT_PK,
        Identity(start=1),
        nullable=False,
        primary_key=True,
        comment="Store-assigned subscriber id.",
    ),
    Column(
        "email",
        String(320),
        nullable=False,
        unique=True,
        comment="Subscriber email address (case-sensitive, not normalized).",
    ),
    Column(
        "confirmed_at",
        EpochSeconds(),
        nullable=False,
        server_default=text("0"),
        comment="Confirmation time as integer seconds since the Unix epoch.",
    ),
    Column(
        "opt_out",
        Boolean(create_constraint=False),
        nullable=False,
        server_default=false(),
        comment="True once the subscriber has opted out.",
    ),
    sqlite_autoincrement=True,
    comment="Mailing-list subscribers. One row per email address.",
)
