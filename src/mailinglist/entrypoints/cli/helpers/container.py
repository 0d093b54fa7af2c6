"""Build the application container for CLI commands.

Translates configuration and bootstrap failures into ``click.ClickException``
with guidance, so commands never show a traceback for a setup problem.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click
from sqlalchemy.exc import ArgumentError

from mailinglist import config
from mailinglist.adapters.db.dialects import UnsupportedDialect
from mailinglist.bootstrap import bootstrap
from mailinglist.domain import StoreInitializationError

if TYPE_CHECKING:
    from mailinglist.bootstrap import AppContainer

MISSING_DB_URL_MSG = (
    "MAILINGLIST_DB_URL is not set.\n\n"
    "Set it before running this command, e.g.:\n"
    "  export MAILINGLIST_DB_URL='sqlite+pysqlite:///mailinglist.db'\n"
    "  or in PowerShell:\n"
    "  $env:MAILINGLIST_DB_URL='sqlite+pysqlite:///mailinglist.db'"
)

INVALID_URL_FORMAT_MSG = (
    "The value of MAILINGLIST_DB_URL is not a valid SQLAlchemy database URL "
    "for a supported backend (sqlite, postgresql)."
)

INIT_FAILED_MSG = "Cannot create the subscriber table:\n  {error}"


def load_container(*, initialize: bool = True) -> AppContainer:
    """Bootstrap the application from the environment.

    Args:
        initialize: Create the subscriber table if it does not exist yet.

    Raises:
        click.ClickException: On any configuration or bootstrap failure.
    """
    try:
        return bootstrap(initialize=initialize)
    except config.DatabaseUrlNotSetError as e:
        raise click.ClickException(MISSING_DB_URL_MSG) from e
    except config.InvalidConfigError as e:
        raise click.ClickException(str(e)) from e
    except (ArgumentError, UnsupportedDialect) as e:
        raise click.ClickException(INVALID_URL_FORMAT_MSG) from e
    except StoreInitializationError as e:
        raise click.ClickException(INIT_FAILED_MSG.format(error=e)) from e
