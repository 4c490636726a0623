"""
Ultrashots Server Package.

This package contains the web server implementation for the Ultrashots
portfolio and customer management application.

Subpackages:
    api: JSON endpoints mounted under ``/api/v1``.
    web: Page endpoints rendered through the page protocol.
    core: Configuration and constants.
    middleware: The web and api middleware groups.
    exception_handlers: Mapping of exceptions to responses.
    services: Request dependencies (database session, current user, permissions).
"""
