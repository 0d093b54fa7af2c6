"""``mailinglist serve``: run the JSON/HTTP API and the gRPC API.

The subscriber table is created on startup if needed; failing to create it
aborts before either server binds. The gRPC server runs on its own thread
pool while uvicorn serves HTTP in the foreground; when uvicorn exits, the gRPC
server is stopped too. Both servers log through the handlers configured by the
top-level command (uvicorn's own logging config is disabled).
"""

from __future__ import annotations

import logging

import click
import uvicorn

from mailinglist import config
from mailinglist.entrypoints.grpc import GrpcBindError, start_server
from mailinglist.entrypoints.http import create_app
from mailinglist.logging import route_server_loggers

from .helpers.container import load_container

logger = logging.getLogger(__name__)

#: Seconds in-flight RPCs get to finish on shutdown.
GRPC_STOP_GRACE = 1.0


def _check_bind(bind: str, option: str) -> tuple[str, int]:
    try:
        return config.parse_bind(bind)
    except config.InvalidConfigError as e:
        raise click.BadParameter(str(e), param_hint=option) from e


@click.command()
@click.option(
    "--bind",
    "bind",
    default=config.DEFAULT_JSON_BIND,
    envvar=config.JSON_BIND_ENVVAR,
    show_default=True,
    show_envvar=True,
    help="HOST:PORT the JSON API listens on (':PORT' listens on all interfaces).",
)
@click.option(
    "--grpc-bind",
    "grpc_bind",
    default=config.DEFAULT_GRPC_BIND,
    envvar=config.GRPC_BIND_ENVVAR,
    show_default=True,
    show_envvar=True,
    help="HOST:PORT the gRPC API listens on.",
)
@click.option(
    "--grpc/--no-grpc",
    "with_grpc",
    default=True,
    show_default=True,
    help="Also serve the gRPC API.",
)
def serve(bind: str, grpc_bind: str, with_grpc: bool) -> None:
    """Serve the JSON/HTTP and gRPC APIs."""
    host, port = _check_bind(bind, "--bind")
    if with_grpc:
        _check_bind(grpc_bind, "--grpc-bind")

    container = load_container(initialize=True)
    grpc_server = None
    try:
        if with_grpc:
            try:
                grpc_server, _ = start_server(container.service, grpc_bind)
            except GrpcBindError as e:
                raise click.ClickException(str(e)) from e
        app = create_app(container.service)
        route_server_loggers()
        logger.info("JSON API server listening on %s:%d", host, port)
        uvicorn.run(app, host=host, port=port, log_config=None)
    finally:
        if grpc_server is not None:
            grpc_server.stop(GRPC_STOP_GRACE).wait()
        container.close()
