"""Tests for the naming convention of `metadata` as applied to `emails`.

Constraint names must be deterministic and identical on every backend, since
error mapping and operators read them in driver messages.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import UniqueConstraint, inspect

from mailinglist.adapters.db.metadata import metadata
from mailinglist.adapters.record_store.schema import emails

if TYPE_CHECKING:
    from sqlalchemy.engine import Engine


def test_emails_table_is_registered():
    assert metadata.tables["emails"] is emails


def test_unique_email_constraint_named_by_convention():
    [unique] = [c for c in emails.constraints if isinstance(c, UniqueConstraint)]
    assert unique.name == "uq_emails_email"
    assert [col.name for col in unique.columns] == ["email"]


def test_primary_key_named_by_convention():
    assert emails.primary_key.name == "pk_emails"


def test_unique_constraint_reflects_from_sqlite(sqlite_engine_memory: Engine):
    """On SQLite, UNIQUE constraints may reflect as unique indexes."""
    inspector = inspect(sqlite_engine_memory)
    uq_names = {uc.get("name") for uc in inspector.get_unique_constraints("emails")}
    ix_names = {ix.get("name") for ix in inspector.get_indexes("emails")}
    assert "uq_emails_email" in uq_names | ix_names
