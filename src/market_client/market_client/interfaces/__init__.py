# ABOUTME: Interfaces package initialization
# ABOUTME: Exports abstract contracts implemented by the client components

from .request import AbstractRequestSerializer

__all__ = [
    "AbstractRequestSerializer",
]
