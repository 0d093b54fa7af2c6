"""Contract tests.

Purpose
- Define RecordStore behavior once and run it against the in-memory store and
  the SQLAlchemy store on every supported backend.

Guidelines
- Parametrize implementations via fixtures.
- Assert only the public contract, not internals.
"""
