"""Adapters (infrastructure) for MAILINGLIST.

Provide concrete implementations of the ports in `mailinglist.interfaces`
(the record store), plus persistence mapping and related wiring (engines,
metadata, column types).

Dependency rule: may import `mailinglist.domain` and `mailinglist.interfaces`;
neither may import this package.
"""
