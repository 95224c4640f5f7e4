# ABOUTME: Exceptions package exports
# ABOUTME: Exports fundamental exceptions and request validation errors

from market_client.exceptions.base import (
    CoreException,
    ValidationException,
    NotSupportedError,
)

from market_client.exceptions.request import RequestValidationError

__all__ = [
    "CoreException",
    "ValidationException",
    "NotSupportedError",
    # Request exceptions
    "RequestValidationError",
]
