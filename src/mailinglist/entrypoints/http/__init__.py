"""JSON/HTTP transport adapter.

Five endpoints, one per CRUD operation, each accepting and returning
JSON-encoded records. Failures are a non-2xx status with an
``{"Error": "..."}`` body.
"""

from .app import create_app

__all__ = ["create_app"]
