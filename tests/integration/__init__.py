"""Integration tests.

Purpose
- Exercise the SQLAlchemy record store against real SQLite files and
  PostgreSQL containers, the bootstrap wiring, and the JSON/HTTP app.

Guidelines
- Use realistic configuration and setup/teardown per test or suite.
- Minimize mocking; prefer real databases or well-scoped test containers.
"""
