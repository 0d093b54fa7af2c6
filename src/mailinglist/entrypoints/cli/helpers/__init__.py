"""CLI helpers for MAILINGLIST.

URL sanitization for safe display, parsing of per-logger level overrides,
and message emitters that write to stderr with emoji→ASCII fallbacks.
"""

from .db_url import describe_backend, sanitize_url
from .messages import error, success, warn

__all__ = ["describe_backend", "error", "sanitize_url", "success", "warn"]
