# ABOUTME: Core exception classes for the market data client
# ABOUTME: Provides structured error handling with context and error codes

from typing import Dict, Any


class CoreException(Exception):
    """Base exception class for the market data client.

    Provides structured error handling with optional error codes and contextual
    details. All custom exceptions in the package inherit from this class
    to ensure consistent error handling patterns.

    Attributes:
        message: Human-readable error message
        code: Optional error code for programmatic handling
        details: Optional dictionary containing contextual information
    """

    def __init__(self, message: str, code: str | None = None, details: Dict[str, Any] | None = None):
        """Initialize CoreException with message, optional code and details.

        Args:
            message: Human-readable error message
            code: Optional error code for programmatic handling
            details: Optional dictionary containing contextual information
        """
        self.message = message
        self.code = code
        self.details = details.copy() if details else {}
        super().__init__(self.message)


class ValidationException(CoreException):
    """Exception raised for data validation errors.

    Used when input data fails validation checks, such as:
    - Missing required fields
    - Empty identifiers
    - Inconsistent ranges

    Should include specific details about what validation failed.
    """

    pass


class NotSupportedError(CoreException):
    """Exception raised when a requested operation is not supported.

    Used when a serializer receives a request type it does not know how to
    turn into an outbound call.

    Should include details about what operation was attempted.
    """

    pass
