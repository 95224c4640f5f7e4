# ABOUTME: Request interfaces package exports
# ABOUTME: Exports the abstract request serializer contract

from .request_serializer import AbstractRequestSerializer

__all__ = [
    "AbstractRequestSerializer",
]
