"""MAILINGLIST test suite.

Folder taxonomy
- unit/         : Isolated, fast checks of a single module/class/function.
- contract/     : RecordStore behavior enforced across every adapter/backend.
- integration/  : Real databases (SQLite files, PostgreSQL containers) and the
                  HTTP app in-process.
- e2e/          : The `mailinglist` CLI driven as a user would, via CliRunner.
- fixtures/     : Shared engine and data fixtures (loaded by the root conftest).
- helpers/      : Shared assertion utilities (no tests here).

General guidance
- Keep unit fast and deterministic; in-memory SQLite counts as no I/O.
- Integration hits real dependencies with realistic setup/teardown.
- PostgreSQL-backed tests skip themselves when Docker is unavailable.
- Each item is marked with its top-level folder (unit, contract, integration, e2e).
"""
