"""Entrypoints (inbound adapters) for MAILINGLIST.

Expose the application to the outside world: the JSON/HTTP API, the gRPC
API and the CLI.
Parse and validate inputs, call the CRUD service, and present results.

Dependency rule: may import `mailinglist.service_layer`, `mailinglist.domain`
and `mailinglist.bootstrap`; avoid importing `mailinglist.adapters` directly.
"""
