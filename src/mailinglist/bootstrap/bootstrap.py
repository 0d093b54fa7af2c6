"""Bootstrap the CRUD service with its record store."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from mailinglist import config
from mailinglist.adapters.db.engine import make_engine
from mailinglist.adapters.record_store import SqlAlchemyRecordStore
from mailinglist.service_layer import EmailService

if TYPE_CHECKING:
    from sqlalchemy.engine import Engine

    from mailinglist.interfaces.record_store import RecordStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AppContainer:
    """A class to hold application wiring constants."""

    engine: Engine
    store: RecordStore
    service: EmailService

    def close(self) -> None:
        """Release the pooled database connections."""
        self.engine.dispose()


def build_record_store(url: str, timeout: float) -> SqlAlchemyRecordStore:
    """Build the record store over a new engine for `url`."""
    engine = make_engine(url, timeout=timeout)
    return SqlAlchemyRecordStore(engine)


def bootstrap(
    url: str | None = None, *, timeout: float | None = None, initialize: bool = True
) -> AppContainer:
    """Build the shared store and the CRUD service on top of it.

    Args:
        url: Database URL; defaults to `MAILINGLIST_DB_URL`.
        timeout: Per-operation store timeout in seconds; defaults to
            `MAILINGLIST_STORE_TIMEOUT`.
        initialize: Create the subscriber table if it does not exist yet.

    Returns:
        AppContainer: The wired application.

    Raises:
        DatabaseUrlNotSetError: If no URL is given and none is configured.
        StoreInitializationError: If the subscriber table cannot be created.
    """
    url = url if url is not None else config.get_db_url()
    timeout = timeout if timeout is not None else config.get_store_timeout()

    store = build_record_store(url, timeout)
    if initialize:
        store.initialize()
    logger.debug("Bootstrapped record store for %s", store.engine.url)

    return AppContainer(
        engine=store.engine,
        store=store,
        service=EmailService(store),
    )
