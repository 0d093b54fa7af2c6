"""MAILINGLIST

A small mailing-list subscriber service. A single relational table of
subscribers sits behind one transport-neutral CRUD service that every
transport adapter (JSON/HTTP, CLI) delegates to.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
