"""Unit tests for the logging helpers."""

import logging

import pytest

from mailinglist.logging import (
    SERVER_LOGGERS,
    ThirdPartyPrefixFilter,
    console_level,
    route_server_loggers,
    third_party_tag,
)


@pytest.mark.parametrize(
    ("name", "tag"),
    [
        ("mailinglist", ""),
        ("mailinglist.entrypoints.http.app", ""),
        ("uvicorn.access", "[http]"),
        ("uvicorn.error", "[uvicorn]"),
        ("uvicorn", "[uvicorn]"),
        ("sqlalchemy.engine.Engine", "[sql]"),
        ("sqlalchemy.pool.impl.QueuePool", "[sql]"),
        ("grpc._server", "[grpc]"),
        ("some.thirdparty", "[some]"),
        ("mailinglistish", "[mailinglistish]"),
        ("uvicornx.access", "[uvicornx]"),
    ],
)
def test_third_party_tag(name, tag):
    assert third_party_tag(name) == tag


def test_prefix_filter_sets_spaced_prefix_and_keeps_records():
    record = logging.makeLogRecord({"name": "uvicorn.access", "msg": "GET /"})
    own = logging.makeLogRecord({"name": "mailinglist.demo", "msg": "hi"})
    prefix_filter = ThirdPartyPrefixFilter()

    assert prefix_filter.filter(record) is True
    assert prefix_filter.filter(own) is True
    assert record.prefix == "[http] "  # type: ignore[attr-defined]
    assert own.prefix == ""  # type: ignore[attr-defined]


@pytest.mark.parametrize(
    ("verbose", "quiet", "level"),
    [
        (0, 0, logging.WARNING),
        (1, 0, logging.INFO),
        (2, 0, logging.DEBUG),
        (5, 0, logging.DEBUG),
        (0, 1, logging.ERROR),
        (0, 2, logging.CRITICAL),
        (0, 9, logging.CRITICAL),
        (2, 1, logging.INFO),
    ],
)
def test_console_level(verbose, quiet, level):
    assert console_level(verbose, quiet) == level


def test_route_server_loggers_drops_library_handlers():
    loggers = [logging.getLogger(name) for name in SERVER_LOGGERS]
    saved = [(lg.handlers[:], lg.propagate) for lg in loggers]
    try:
        for lg in loggers:
            lg.addHandler(logging.NullHandler())
            lg.propagate = False

        route_server_loggers()

        assert all(lg.handlers == [] for lg in loggers)
        assert all(lg.propagate for lg in loggers)
    finally:
        for lg, (handlers, propagate) in zip(loggers, saved):
            lg.handlers[:] = handlers
            lg.propagate = propagate
