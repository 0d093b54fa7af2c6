"""Fixtures and test helpers for end-to-end CLI tests.

Provides a test-only `log-demo` command that logs on project, library and
server loggers, plus fixtures to register it, obtain a CliRunner, run tests
in an isolated filesystem, and invoke the CLI against a fresh SQLite database.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path
from typing import Any

import click
import pytest
from click.testing import CliRunner, Result

from mailinglist.entrypoints.cli.main import mailinglist

# pylint: disable=redefined-outer-name


PROJECT_LOGGER = "mailinglist.demo"
LIBRARY_LOGGER = "some.thirdparty"


@click.command()
def log_demo():
    """Log one message per level on a project logger, then library noise.

    The last DEBUG record comes after every WARNING, so only a forced flush
    writes it to the flight recorder.
    """
    project = logging.getLogger(PROJECT_LOGGER)
    project.debug("project debug message")
    project.info("project info message")
    project.warning("project warning message")
    project.error("project error message")
    project.critical("project critical message")
    library = logging.getLogger(LIBRARY_LOGGER)
    library.debug("library debug message")
    library.info("library info message")
    library.warning("library warning message")
    logging.getLogger("uvicorn.error").warning("server lifecycle message")
    logging.getLogger("uvicorn.access").warning("request line message")
    project.debug("project trailing debug message")


@pytest.fixture
def registered_log_demo():
    """Register the 'log-demo' command for the duration of a test."""
    mailinglist.add_command(log_demo, name="log-demo")
    try:
        yield
    finally:
        mailinglist.commands.pop("log-demo", None)
        # cloup also files the command in the group's default help section.
        mailinglist._default_section.commands.pop(  # pylint: disable=protected-access
            "log-demo", None
        )


@pytest.fixture
def runner():
    """Return a Click CliRunner for invoking CLI commands in tests."""
    return CliRunner()


@pytest.fixture
def fs(runner):
    """Run the test inside `runner.isolated_filesystem()`."""
    with runner.isolated_filesystem():
        yield


@pytest.fixture
def db_url(tmp_path: Path) -> str:
    """URL of a not yet created SQLite file private to the test."""
    return f"sqlite+pysqlite:///{tmp_path / 'cli.db'}"


@pytest.fixture
def invoke(runner, db_url, tmp_path) -> Callable[..., Result]:
    """Invoke `mailinglist` with MAILINGLIST_DB_URL pointing at `db_url`.

    The flight recorder writes under the test's temp dir rather than the
    user log directory.
    """

    def _invoke(*args: str, env: dict[str, Any] | None = None) -> Result:
        full_env = {"MAILINGLIST_DB_URL": db_url, **(env or {})}
        cli_args = ["--log-path", str(tmp_path / "flight.log"), *args]
        return runner.invoke(mailinglist, cli_args, env=full_env)

    return _invoke
