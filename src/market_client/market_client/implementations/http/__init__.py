# ABOUTME: HTTP request serializer implementations package
# ABOUTME: Converts validated request models into endpoint paths and query parameters

from .aggregates_serializer import AggregatesRequestSerializer

__all__ = [
    "AggregatesRequestSerializer",
]
