"""Bootstrap (composition root) for MAILINGLIST.

Assembles the application at runtime: builds the one shared engine, wires the
record store into the CRUD service, initializes the subscriber table, and
reads configuration.

Import rules:
- Entry points import *this* package (not adapters/interfaces/domain).
- This package may import: `mailinglist.adapters`, `mailinglist.service_layer`,
  `mailinglist.interfaces`, `mailinglist.domain`, and `mailinglist.config`.
- Inner layers must not import `mailinglist.bootstrap`.
"""

from .bootstrap import AppContainer, bootstrap, build_record_store

__all__ = ["AppContainer", "bootstrap", "build_record_store"]
