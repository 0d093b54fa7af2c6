"""Configuration utilities for MAILINGLIST.

This module centralizes small helpers and constants related to application
configuration. All settings come from the environment.
"""

import os

DB_URL_ENVVAR = "MAILINGLIST_DB_URL"  # pragma: no mutate
STORE_TIMEOUT_ENVVAR = "MAILINGLIST_STORE_TIMEOUT"  # pragma: no mutate
JSON_BIND_ENVVAR = "MAILINGLIST_JSON_BIND"  # pragma: no mutate
GRPC_BIND_ENVVAR = "MAILINGLIST_GRPC_BIND"  # pragma: no mutate

DEFAULT_STORE_TIMEOUT = 1.0
DEFAULT_JSON_BIND = "127.0.0.1:8080"
DEFAULT_GRPC_BIND = "127.0.0.1:8081"


class DatabaseUrlNotSetError(Exception):
    """Raised when the MAILINGLIST_DB_URL environment variable is not set."""


class InvalidConfigError(Exception):
    """Raised when a configuration value is present but malformed."""


def get_db_url() -> str:
    """Get the database URL from the environment.

    Returns:
        The value of the `MAILINGLIST_DB_URL` environment variable.

    Raises:
        DatabaseUrlNotSetError: If `MAILINGLIST_DB_URL` is not set.
    """
    if not (url := os.environ.get(DB_URL_ENVVAR)):
        raise DatabaseUrlNotSetError
    return url


def get_store_timeout() -> float:
    """Get the per-operation store timeout, in seconds.

    Returns:
        The value of `MAILINGLIST_STORE_TIMEOUT`, or 1.0 when unset.

    Raises:
        InvalidConfigError: If the value is not a positive number.
    """
    if not (raw := os.environ.get(STORE_TIMEOUT_ENVVAR)):
        return DEFAULT_STORE_TIMEOUT
    try:
        timeout = float(raw)
    except ValueError as e:
        raise InvalidConfigError(
            f"{STORE_TIMEOUT_ENVVAR} must be a number of seconds, got {raw!r}"
        ) from e
    if timeout <= 0:
        raise InvalidConfigError(f"{STORE_TIMEOUT_ENVVAR} must be > 0, got {raw!r}")
    return timeout


def get_json_bind() -> str:
    """Get the HOST:PORT the JSON/HTTP adapter listens on."""
    return os.environ.get(JSON_BIND_ENVVAR) or DEFAULT_JSON_BIND


def get_grpc_bind() -> str:
    """Get the HOST:PORT the gRPC adapter listens on."""
    return os.environ.get(GRPC_BIND_ENVVAR) or DEFAULT_GRPC_BIND


def parse_bind(bind: str) -> tuple[str, int]:
    """Split a ``HOST:PORT`` bind address.

    An empty host (``":8080"``) means all interfaces, as in Go-style binds.

    Raises:
        InvalidConfigError: If the port is missing or not an integer.
    """
    host, sep, port = bind.rpartition(":")
    if not sep or not port.isdigit():
        raise InvalidConfigError(f"bind address must be HOST:PORT, got {bind!r}")
    return host or "0.0.0.0", int(port)
