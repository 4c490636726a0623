"""Ultrashots.

This package contains the Ultrashots portfolio and CRM application: a
server that renders a single-page front-end through a server-driven page
protocol, backed by an async SQLModel database.

High-level architecture
-----------------------

- ``ultrashots.core``:

  - Logging and logfire monitoring configuration.
  - Database entities (roles, permissions, users, customers, projects,
    subscribers), async repositories and engine/session management.
  - Password hashing and slug helpers.

- ``ultrashots.seeders``:

  - Idempotent seeders and the ``DatabaseSeeder`` orchestrator which runs
    them in foreign-key dependency order.

- ``ultrashots.server``:

  - The FastAPI application factory wiring the ``health``, ``web`` and
    ``api`` channels, their middleware groups and exception mapping.
  - Page protocol rendering and the web/API route modules.

- ``ultrashots.cli``:

  - The ``ultrashots`` console (``serve``, ``db init``, ``db seed``).
"""

__version__ = "1.0.0"
