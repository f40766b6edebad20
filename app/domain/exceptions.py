# app/domain/exceptions.py

"""
Domain exceptions for the application.

These exceptions are framework independent. Each one carries an
``internal_code`` that the exception middleware maps to an HTTP status.
"""

from typing import Any, Optional


class DomainException(Exception):
    """
    Base exception for every error raised by the domain and application layers.
    """

    def __init__(self, detail: Any = None, internal_code: Optional[str] = None):
        super().__init__(detail)
        self.detail = detail
        self.internal_code = internal_code

    def __str__(self) -> str:
        return str(self.detail)


class ResourceNotFoundException(DomainException):
    """Resource not found."""

    def __init__(self, detail: str = "Resource not found", resource_id: Any = None):
        resource_info = f" (ID: {resource_id})" if resource_id is not None else ""
        super().__init__(
            detail=f"{detail}{resource_info}",
            internal_code="RESOURCE_NOT_FOUND"
        )


class DatabaseOperationException(DomainException):
    """Error while executing a database operation."""

    def __init__(self, detail: str = "Error executing database operation",
                 original_error: Optional[Exception] = None):
        error_info = f": {str(original_error)}" if original_error else ""
        super().__init__(
            detail=f"{detail}{error_info}",
            internal_code="DATABASE_OPERATION_ERROR"
        )
