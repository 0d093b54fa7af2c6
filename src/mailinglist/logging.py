"""Logging setup shared by the MAILINGLIST CLI and the servers it runs.

Console output goes through Rich. An in-memory "flight recorder" keeps the
most recent records at DEBUG granularity and writes them to a file once a
WARNING or worse is logged (or on exit, when forced).

Both API servers log through loggers we do not own: uvicorn uses
``uvicorn.error`` for lifecycle messages and ``uvicorn.access`` for one line
per request, and grpcio logs under ``grpc``. `route_server_loggers` strips any
handlers those libraries attached so their records reach the root handlers,
and the console tags them (``[uvicorn]``, ``[http]``, ``[grpc]``) so they stand
apart from our own messages.
"""

from __future__ import annotations

import logging
import platform
from logging.handlers import MemoryHandler
from typing import TYPE_CHECKING, Literal, TypeAlias

import fastapi
import grpc
import sqlalchemy
import uvicorn
from rich.console import Console
from rich.logging import RichHandler

if TYPE_CHECKING:
    from logging import Handler, Logger
    from pathlib import Path

# pylint: disable=too-few-public-methods

PROJECT_PREFIX = "mailinglist"

#: Console tags for loggers of other libraries; the first matching name wins.
THIRD_PARTY_TAGS = {
    "uvicorn.access": "[http]",
    "uvicorn.error": "[uvicorn]",
    "uvicorn": "[uvicorn]",
    "sqlalchemy": "[sql]",
    "grpc": "[grpc]",
}

#: Loggers of the API servers, routed through our handlers.
SERVER_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access", "grpc")

FLIGHT_RECORDER_FORMAT = (
    "[%(asctime)s] [%(process)d:%(threadName)s] "
    "%(levelname)s %(name)s:%(lineno)d: %(message)s"
)

ColorSystem: TypeAlias = Literal["auto", "standard", "256", "truecolor", "windows"]


def _is_under(name: str, parent: str) -> bool:
    return name == parent or name.startswith(parent + ".")


def third_party_tag(name: str) -> str:
    """Return the console tag for logger `name`, or "" for our own loggers.

    Known server and database loggers get a fixed tag; any other library is
    tagged with the first component of its logger name.
    """
    if _is_under(name, PROJECT_PREFIX):
        return ""
    for parent, tag in THIRD_PARTY_TAGS.items():
        if _is_under(name, parent):
            return tag
    return f"[{name.split('.')[0]}]"


class ThirdPartyPrefixFilter(logging.Filter):
    """Set `record.prefix` to the record's tag followed by a space.

    Project records get an empty prefix. Never drops a record.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        tag = third_party_tag(record.name)
        record.prefix = f"{tag} " if tag else ""
        return True


def console_level(verbose: int, quiet: int) -> int:
    """Console level for `-v`/`-q` counts, starting from WARNING."""
    level = logging.WARNING - 10 * verbose + 10 * quiet
    return max(logging.DEBUG, min(logging.CRITICAL, level))


def config_console_handler(
    level: int = logging.INFO, debug_mode: bool = False, color: bool = True
) -> RichHandler:
    """Build the stderr console handler.

    In debug mode everything down to DEBUG is shown with timestamps, logger
    names and source locations. Otherwise records are tagged by origin.
    """
    color_system: ColorSystem | None = "auto" if color else None
    handler = RichHandler(
        level=logging.DEBUG if debug_mode else level,
        console=Console(color_system=color_system, stderr=True),
        rich_tracebacks=True,
        show_time=False,
        show_path=debug_mode,
        enable_link_path=debug_mode,
    )

    if debug_mode:
        handler.setFormatter(logging.Formatter("%(asctime)s %(name)s: %(message)s"))
    else:
        handler.setFormatter(logging.Formatter("%(prefix)s%(message)s"))
        handler.addFilter(ThirdPartyPrefixFilter())
    return handler


def config_flight_recorder(
    path: Path,
    capacity: int = 2000,
    flush_level: int = logging.WARNING,
    flush_on_close: bool = False,
) -> MemoryHandler:
    """Build the flight recorder: a MemoryHandler in front of a log file.

    The file is truncated and opened on the first flush only, so a run that
    never flushes leaves no file behind.
    """
    target = logging.FileHandler(path, mode="w", encoding="utf-8", delay=True)
    target.setLevel(logging.DEBUG)
    target.setFormatter(logging.Formatter(FLIGHT_RECORDER_FORMAT))
    return MemoryHandler(
        capacity=capacity,
        flushLevel=flush_level,
        target=target,
        flushOnClose=flush_on_close,
    )


def route_server_loggers() -> None:
    """Send uvicorn and grpc records through the root handlers only."""
    for name in SERVER_LOGGERS:
        server_logger = logging.getLogger(name)
        server_logger.handlers.clear()
        server_logger.propagate = True


def configure_logging(  # pylint: disable=too-many-arguments
    *,
    level: int,
    debug_mode: bool,
    color: bool,
    flight_recorder_path: Path | None,
    flight_recorder_capacity: int = 2000,
    force_flush: bool = False,
    logger_levels: dict[str, int] | None = None,
) -> list[Handler]:
    """Install the console handler and, optionally, the flight recorder.

    The root logger passes everything; each handler applies its own level.
    `logger_levels` then sets per-logger minimums, which bind both handlers.

    Args:
        level: Console level (ignored in debug mode).
        debug_mode: Verbose console formatting at DEBUG.
        color: Allow colored console output.
        flight_recorder_path: Where the flight recorder writes, or None to
            run without one.
        flight_recorder_capacity: Records kept in memory before a flush.
        force_flush: Write the buffered records on exit too.
        logger_levels: Minimum level per logger name.

    Returns:
        The handlers installed on the root logger.
    """
    handlers: list[Handler] = [
        config_console_handler(level=level, debug_mode=debug_mode, color=color)
    ]
    if flight_recorder_path is not None:
        handlers.append(
            config_flight_recorder(
                flight_recorder_path,
                capacity=flight_recorder_capacity,
                flush_on_close=force_flush,
            )
        )

    logging.basicConfig(level=logging.DEBUG, handlers=handlers, force=True)
    for name, logger_level in (logger_levels or {}).items():
        logging.getLogger(name).setLevel(logger_level)
    route_server_loggers()
    return handlers


def log_startup(
    logger: Logger,
    *,
    app_version: str,
    level: int,
    handlers: list[Handler],
    logger_levels: dict[str, int],
) -> None:
    """Log a one-line summary at INFO, then the runtime stack at DEBUG."""
    recorder = next((h for h in handlers if isinstance(h, MemoryHandler)), None)
    logger.info(
        "MAILINGLIST %s: console=%s, flight-recorder=%s",
        app_version,
        logging.getLevelName(level),
        "ON" if recorder else "OFF",
    )
    logger.debug(
        "Python %s on %s", platform.python_version(), platform.system() or "unknown"
    )
    logger.debug(
        "Stack: SQLAlchemy %s, FastAPI %s, uvicorn %s, grpcio %s",
        sqlalchemy.__version__,
        fastapi.__version__,
        uvicorn.__version__,
        grpc.__version__,
    )
    if recorder is not None and isinstance(recorder.target, logging.FileHandler):
        logger.debug(
            "Flight recorder: %s (capacity %d, flush on exit: %s)",
            recorder.target.baseFilename,
            recorder.capacity,
            "yes" if recorder.flushOnClose else "no",
        )
    logger.debug(
        "Logger levels: %s",
        ", ".join(
            f"{name}={logging.getLevelName(lvl)}" for name, lvl in logger_levels.items()
        )
        or "<none>",
    )
