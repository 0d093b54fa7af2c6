"""MAILINGLIST DB CLI: subscriber table bootstrap and health.

Behavior
- ``db init`` creates the ``emails`` table; an existing table is fine.
- ``db status`` reports reachability, backend, sanitized URL and whether the
  table exists, without creating anything.
- Human-oriented notices go to **stderr**; plain facts to **stdout**.

Requirements
- ``MAILINGLIST_DB_URL`` must be set.

Failure modes
- Missing/invalid ``MAILINGLIST_DB_URL`` or a table that cannot be created →
  ``ClickException`` with guidance.
"""

from __future__ import annotations

import click
import click_extra as clickx
from sqlalchemy import inspect, text
from sqlalchemy.exc import DBAPIError

from .helpers import describe_backend, error, sanitize_url, success, warn
from .helpers.container import load_container

TABLE_NAME = "emails"  # pragma: no mutate

INIT_INSTRUCTIONS = "Run 'mailinglist db init' to create the subscriber table."


@click.group(cls=clickx.ExtraGroup)
def db() -> None:
    """Subscriber table management commands."""


@db.command()
def init() -> None:
    """Create the subscriber table if it does not exist."""
    container = load_container(initialize=True)
    try:
        success("Subscriber table ready.")
        click.echo(f"URL     : {sanitize_url(str(container.engine.url))}")
    finally:
        container.close()


@db.command()
def status() -> None:
    """Show database connection and subscriber table status."""
    container = load_container(initialize=False)
    engine = container.engine
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))  # pragma: no mutate
            has_table = inspect(conn).has_table(TABLE_NAME)
    except DBAPIError as e:
        error("Cannot connect to database")
        click.echo(str(e))
        raise SystemExit(1) from e
    else:
        success("Database reachable")
        url = engine.url.render_as_string(hide_password=False)
        click.echo(f"Backend : {describe_backend(url)}")
        click.echo(f"URL     : {sanitize_url(url)}")
        click.echo(f"Table   : {TABLE_NAME} ({'present' if has_table else 'missing'})")
        if not has_table:
            warn(INIT_INSTRUCTIONS)
    finally:
        container.close()
