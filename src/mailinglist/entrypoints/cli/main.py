"""Top-level ``mailinglist`` command.

The group itself only sets up logging; the work happens in its subcommands:

- ``mailinglist db``: create the subscriber table and report its status.
- ``mailinglist serve``: run the JSON/HTTP and gRPC APIs.
- ``mailinglist email``: one-shot create/get/list/update/delete calls.

Examples
    $ mailinglist db init
    $ mailinglist -v serve --bind :8080 --grpc-bind :8081
    $ mailinglist email create alice@example.com
"""

import logging
from pathlib import Path

import click
import click_extra as clickx
from platformdirs import user_log_dir

from mailinglist import __version__
from mailinglist.logging import configure_logging, console_level, log_startup

from .db import db as db_group
from .email import email as email_group
from .helpers.log_level_parser import parse_log_level
from .serve import serve as serve_command

logger = logging.getLogger(__name__)

DEFAULT_LOG_PATH = (
    Path(user_log_dir("mailinglist", appauthor=False, ensure_exists=True))
    / "latest.log"
)
DEFAULT_FLIGHT_RECORDER_CAPACITY = 2000

HELP = """Mailing-list subscriber store.

    Create the subscriber table, serve the JSON/HTTP and gRPC APIs, or call
    the CRUD operations directly. Every command reads the database URL from
    MAILINGLIST_DB_URL.
    """


@clickx.extra_group(
    version=__version__,
    help=HELP,
    params=[
        clickx.ColorOption(show_envvar=True),
        clickx.TimerOption(show_envvar=True),
        clickx.ExtraVersionOption(),
    ],
)
@click.option(
    "-v",
    "--verbose",
    "verbose_count",
    count=True,
    help="Log more on the console: -v for INFO, -vv for DEBUG.",
)
@click.option(
    "-q",
    "--quiet",
    "quiet_count",
    count=True,
    help="Log less on the console: -q for ERROR, -qq for CRITICAL only.",
)
@click.option(
    "--debug/--no-debug",
    default=False,
    help="Console at DEBUG, with timestamps, logger names and source lines.",
)
@click.option(
    "--log-path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=DEFAULT_LOG_PATH,
    envvar="MAILINGLIST_LOG_PATH",
    show_default=True,
    show_envvar=True,
    help="File the flight recorder writes to.",
)
@click.option(
    "--flight-recorder/--no-flight-recorder",
    "flight_recorder",
    default=True,
    show_envvar=True,
    help=(
        "Keep recent log records at DEBUG in memory and write them to "
        "--log-path as soon as a WARNING or worse is logged."
    ),
)
@click.option(
    "--flight-recorder-capacity",
    type=click.IntRange(min=1),
    default=DEFAULT_FLIGHT_RECORDER_CAPACITY,
    hidden=True,
    envvar="MAILINGLIST_FLIGHT_RECORDER_CAPACITY",
    help="Number of records the flight recorder keeps.",
)
@click.option(
    "--force-flush/--no-force-flush",
    "force_flush_flight_recorder",
    default=False,
    show_default=True,
    show_envvar=True,
    help="Also write the flight recorder buffer when the command exits.",
)
@click.option(
    "-L",
    "--logger-level",
    "logger_levels",
    multiple=True,
    callback=parse_log_level,
    default=("sqlalchemy=WARNING", "uvicorn.access=WARNING"),
    envvar="MAILINGLIST_LOGGER_LEVELS",
    show_default=True,
    show_envvar=True,
    help=(
        "Minimum level for one logger, as NAME=LEVEL; binds the console and "
        "the flight recorder. Repeatable, e.g. -L uvicorn.access=INFO to log "
        "each HTTP request."
    ),
)
@clickx.pass_context
def mailinglist(  # pylint: disable=too-many-arguments, too-many-positional-arguments
    ctx: click.Context,
    verbose_count: int,
    quiet_count: int,
    debug: bool,
    log_path: Path,
    flight_recorder: bool,
    flight_recorder_capacity: int,
    force_flush_flight_recorder: bool,
    logger_levels: dict[str, int],
) -> None:
    """Mailing-list subscriber store."""
    level = console_level(verbose_count, quiet_count)
    handlers = configure_logging(
        level=level,
        debug_mode=debug,
        color=ctx.color is not False,
        flight_recorder_path=log_path if flight_recorder else None,
        flight_recorder_capacity=flight_recorder_capacity,
        force_flush=force_flush_flight_recorder,
        logger_levels=logger_levels,
    )
    log_startup(
        logger,
        app_version=__version__,
        level=level,
        handlers=handlers,
        logger_levels=logger_levels,
    )
    ctx.call_on_close(logging.shutdown)


mailinglist.add_command(db_group)
mailinglist.add_command(serve_command)
mailinglist.add_command(email_group)
