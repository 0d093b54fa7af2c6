"""``mailinglist email``: one-shot CRUD calls against the subscriber table.

Each command runs a single CRUD service operation in-process and prints the
result as JSON on stdout (``null`` when there is no such subscriber), using
the same record encoding as the JSON/HTTP API.
"""

from __future__ import annotations

import json
from collections.abc import Callable
from datetime import datetime

import click
import click_extra as clickx

from mailinglist.domain import MailingListError, SubscriberRecord
from mailinglist.entrypoints.http.schemas import EmailEntry
from mailinglist.service_layer import EmailService

from .helpers.container import load_container

DATETIME_FORMATS = ["%Y-%m-%dT%H:%M:%S%z", "%Y-%m-%dT%H:%M:%S", "%Y-%m-%d"]
OperationResult = SubscriberRecord | list[SubscriberRecord] | None


def _dump(record: SubscriberRecord | None) -> dict | None:
    if record is None:
        return None
    return EmailEntry.from_record(record).model_dump(by_alias=True, mode="json")


def _run(operation: Callable[[EmailService], OperationResult]) -> None:
    """Run `operation(service)` and print its result as JSON."""
    container = load_container(initialize=True)
    try:
        result = operation(container.service)
    except MailingListError as e:
        raise click.ClickException(str(e)) from e
    finally:
        container.close()

    payload = [_dump(r) for r in result] if isinstance(result, list) else _dump(result)
    click.echo(json.dumps(payload, indent=2))


@click.group(cls=clickx.ExtraGroup)
def email() -> None:
    """Create, read, update and delete subscribers."""


@email.command()
@click.argument("address")
def create(address: str) -> None:
    """Subscribe ADDRESS."""
    _run(lambda service: service.create_email(address))


@email.command()
@click.argument("address")
def get(address: str) -> None:
    """Show the subscriber ADDRESS."""
    _run(lambda service: service.get_email(address))


@email.command(name="list")
@click.option("--page", type=int, default=1, show_default=True, help="1-based page.")
@click.option("--count", type=int, default=10, show_default=True, help="Page size.")
def list_(page: int, count: int) -> None:
    """List subscribers, one page at a time, ordered by id."""
    _run(lambda service: service.get_email_batch(page, count))


@email.command()
@click.argument("address")
@click.option(
    "--confirmed-at",
    type=click.DateTime(formats=DATETIME_FORMATS),
    default=None,
    help="Confirmation time (UTC unless an offset is given). Unchanged if omitted.",
)
@click.option(
    "--opt-out/--opt-in",
    "opt_out",
    default=None,
    help="Opt the subscriber out of (or back into) mailings. Unchanged if omitted.",
)
def update(address: str, confirmed_at: datetime | None, opt_out: bool | None) -> None:
    """Update confirmation time and opt-out flag of ADDRESS."""

    def _update(service: EmailService) -> SubscriberRecord | None:
        if (current := service.get_email(address)) is None:
            return None
        return service.update_email(
            SubscriberRecord(
                email=address,
                confirmed_at=(
                    confirmed_at if confirmed_at is not None else current.confirmed_at
                ),
                opt_out=opt_out if opt_out is not None else current.opt_out,
            )
        )

    _run(_update)


@email.command()
@click.argument("address")
def delete(address: str) -> None:
    """Unsubscribe ADDRESS."""
    _run(lambda service: service.delete_email(address))
