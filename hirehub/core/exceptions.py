"""
Domain exceptions.

Services raise these; the handlers registered in main.py turn them into
JSON error responses with the matching status code.
"""

from typing import Any, Optional


class HireHubError(Exception):
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(HireHubError):
    status_code = 404

    @classmethod
    def for_entity(cls, entity: str, entity_id: Any) -> "NotFoundError":
        return cls(f"{entity} with id '{entity_id}' not found.")


class DuplicateEmailError(HireHubError):
    """Raised for duplicate emails and, more generally, duplicate unique names."""
    status_code = 409


class ConflictError(HireHubError):
    status_code = 409


class BadRequestError(HireHubError):
    status_code = 400


class ValidationError(HireHubError):
    status_code = 400

    def __init__(self, message: str, details: Optional[dict] = None):
        super().__init__(message)
        self.details = details or {}


class UnauthorizedError(HireHubError):
    status_code = 401


class ForbiddenError(HireHubError):
    status_code = 403
