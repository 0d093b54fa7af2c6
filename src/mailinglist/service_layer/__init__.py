"""Service layer for MAILINGLIST.

Implements the application use-cases: the transport-neutral CRUD operations
every adapter delegates to, with the validation rules they share.

Dependency rule: may import `mailinglist.domain` and `mailinglist.interfaces`,
but not `mailinglist.adapters` or `mailinglist.entrypoints`.
"""

from .email_service import EmailService

__all__ = ["EmailService"]
