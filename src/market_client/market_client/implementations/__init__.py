# ABOUTME: Implementations package initialization
# ABOUTME: Exports concrete implementations of the client interfaces

from .http import AggregatesRequestSerializer

__all__ = [
    "AggregatesRequestSerializer",
]
