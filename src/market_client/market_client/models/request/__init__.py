# ABOUTME: Request models package exports
# ABOUTME: Exports the parameter objects handed to the HTTP transport

from .aggregates import AggregatesRequest
from .prepared import PreparedRequest

__all__ = [
    "AggregatesRequest",
    "PreparedRequest",
]
