"""gRPC transport adapter.

- ``protos/``: the ``MailingListService`` protocol definition.
- ``generated/``: message classes and client/server stubs for it.
- ``servicer``: thin adapter mapping RPCs onto the CRUD service.
- ``server``: server construction and startup.
"""

from .server import GrpcBindError, create_server, start_server

__all__ = ["GrpcBindError", "create_server", "start_server"]
