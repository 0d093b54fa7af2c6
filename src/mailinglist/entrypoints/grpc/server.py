"""Build and start the gRPC server around an existing CRUD service."""

from __future__ import annotations

import logging
from concurrent import futures

import grpc

from mailinglist import config
from mailinglist.service_layer import EmailService

from .generated.mailinglist_pb2_grpc import add_MailingListServiceServicer_to_server
from .servicer import MailingListServicer

logger = logging.getLogger(__name__)

DEFAULT_MAX_WORKERS = 10


class GrpcBindError(Exception):
    """Raised when the gRPC server cannot listen on the requested address."""


def create_server(
    service: EmailService, *, max_workers: int = DEFAULT_MAX_WORKERS
) -> grpc.Server:
    """Return an unstarted, unbound server exposing `service`."""
    server = grpc.server(futures.ThreadPoolExecutor(max_workers=max_workers))
    add_MailingListServiceServicer_to_server(MailingListServicer(service), server)
    return server


def start_server(service: EmailService, bind: str) -> tuple[grpc.Server, int]:
    """Bind a new server to ``HOST:PORT`` and start serving in the background.

    Port 0 picks a free port; the port actually bound is returned.

    Raises:
        InvalidConfigError: If `bind` is not ``HOST:PORT``.
        GrpcBindError: If the address cannot be bound.
    """
    host, port = config.parse_bind(bind)
    server = create_server(service)
    try:
        bound = server.add_insecure_port(f"{host}:{port}")
    except RuntimeError as e:
        raise GrpcBindError(f"cannot listen on {bind}: {e}") from e
    if not bound:
        raise GrpcBindError(f"cannot listen on {bind}")
    server.start()
    logger.info("gRPC API server listening on %s:%d", host, bound)
    return server, bound
