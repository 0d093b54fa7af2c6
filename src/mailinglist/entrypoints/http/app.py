"""MAILINGLIST JSON/HTTP API.

Routes, one per CRUD operation:

| Path               | Method | Body                          | Response          |
|--------------------|--------|-------------------------------|-------------------|
| `/email/create`    | POST   | `{"Email": ...}`              | record            |
| `/email/get`       | GET    | `{"Email": ...}`              | record or null    |
| `/email/get_batch` | GET    | `{"Page": ..., "Count": ...}` | list of records   |
| `/email/update`    | PUT    | record                        | record or null    |
| `/email/delete`    | POST   | `{"Email": ...}`              | record or null    |

Handlers are plain ``def`` functions, so each request runs on its own worker
thread and blocks on the CRUD service until the store answers.
"""

import logging

from fastapi import APIRouter, Depends, FastAPI, Request

from mailinglist import __version__
from mailinglist.domain import SubscriberRecord
from mailinglist.service_layer import EmailService

from .error_handlers import register_error_handlers
from .schemas import BatchQuery, EmailEntry

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/email", tags=["email"])


def get_service(request: Request) -> EmailService:
    """Return the CRUD service shared by all requests of this app."""
    return request.app.state.service


def _entry_or_none(record: SubscriberRecord | None) -> EmailEntry | None:
    return EmailEntry.from_record(record) if record is not None else None


@router.post("/create", response_model=EmailEntry | None)
def create_email(
    entry: EmailEntry, service: EmailService = Depends(get_service)
) -> EmailEntry | None:
    """Subscribe a new address."""
    logger.info("JSON CreateEmail: %s", entry.email)
    return _entry_or_none(service.create_email(entry.email))


@router.get("/get", response_model=EmailEntry | None)
def get_email(
    entry: EmailEntry, service: EmailService = Depends(get_service)
) -> EmailEntry | None:
    """Look up a subscriber; ``null`` when not subscribed."""
    logger.info("JSON GetEmail: %s", entry.email)
    return _entry_or_none(service.get_email(entry.email))


@router.get("/get_batch", response_model=list[EmailEntry])
def get_email_batch(
    query: BatchQuery, service: EmailService = Depends(get_service)
) -> list[EmailEntry]:
    """Return one page of subscribers, ordered by id."""
    logger.info("JSON GetEmailBatch: page=%s count=%s", query.page, query.count)
    records = service.get_email_batch(query.page, query.count)
    return [EmailEntry.from_record(record) for record in records]


@router.put("/update", response_model=EmailEntry | None)
def update_email(
    entry: EmailEntry, service: EmailService = Depends(get_service)
) -> EmailEntry | None:
    """Overwrite confirmation time and opt-out flag of a subscriber."""
    logger.info("JSON UpdateEmail: %s", entry.email)
    return _entry_or_none(service.update_email(entry.to_record()))


@router.post("/delete", response_model=EmailEntry | None)
def delete_email(
    entry: EmailEntry, service: EmailService = Depends(get_service)
) -> EmailEntry | None:
    """Unsubscribe an address; the response is ``null`` once it is gone."""
    logger.info("JSON DeleteEmail: %s", entry.email)
    return _entry_or_none(service.delete_email(entry.email))


def create_app(service: EmailService) -> FastAPI:
    """Build the JSON/HTTP API around an existing CRUD service.

    Args:
        service: The service every request delegates to.

    Returns:
        FastAPI: The ASGI application.
    """
    app = FastAPI(title="MAILINGLIST JSON API", version=__version__)
    app.state.service = service
    register_error_handlers(app)
    app.include_router(router)
    return app
