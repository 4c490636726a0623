"""
Domain exceptions raised by request handlers.

They are turned into responses by ``ultrashots.server.exception_handlers``.
"""

from typing import Dict, Optional


class AuthenticationRequired(Exception):
    """Raised when a route needs an authenticated user and there is none."""

    def __init__(self, message: str = "Unauthenticated.") -> None:
        super().__init__(message)
        self.message = message


class FormValidationError(Exception):
    """Raised when submitted form data is invalid.

    Args:
        errors: Mapping of field name to error message
    """

    def __init__(self, errors: Optional[Dict[str, str]] = None) -> None:
        self.errors = dict(errors or {})
        super().__init__("The given data was invalid.")
