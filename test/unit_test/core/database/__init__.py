"""Unit tests for the database layer.

This package contains tests for the database layer in
ultrashots/core/database, including:

- Engine and DDL helpers
- Repository queries against an in-memory SQLite database

All tests use in-memory SQLite to ensure fast execution without
requiring external database services.
"""
