"""
Employee Directory — Custom Exception Hierarchy
=================================================

What:  Application-specific exceptions raised by the HTTP layer.
How:   Each exception carries a user-facing message and an optional context
       dict. Handlers registered in main.py turn them into JSON responses.

Exception Hierarchy:
    EmployeeDirectoryError (base)     → 500 Internal Server Error
    ├── NotFoundError                 → 404 Not Found
    └── DuplicateEmployeeError        → 409 Conflict

What is NOT here:
    Store failures are not wrapped. sqlalchemy.exc.SQLAlchemyError travels
    from the repository through the service untouched and is mapped to a
    generic 500 by its own handler.
"""

from typing import Any, Dict, Optional


class EmployeeDirectoryError(Exception):
    """
    Base exception for all application errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info (returned as `details` where relevant)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class NotFoundError(EmployeeDirectoryError):
    """
    Raised when a requested resource does not exist.

    The service returns None for a missing employee; routes convert that
    None into this exception so the 404 mapping lives in one handler.
    """

    def __init__(
        self,
        resource: str = "resource",
        resource_id: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        message = f"The requested {resource} was not found"
        if resource_id:
            message = f"{resource} '{resource_id}' was not found"
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)


class DuplicateEmployeeError(EmployeeDirectoryError):
    """
    Raised when a create request uses an email that is already registered.

    HTTP:  409 Conflict
    """

    def __init__(
        self,
        email: str,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        ctx["email"] = email
        super().__init__(
            message=f"An employee with email '{email}' already exists",
            context=ctx,
        )
        self.email = email
