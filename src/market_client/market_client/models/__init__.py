# ABOUTME: Models package initialization
# ABOUTME: Exports the data and request models of the client library

# Data models
from .data import TimeFrame, AggregationPeriod

# Request models
from .request import AggregatesRequest, PreparedRequest

# Type definitions
from .types import Timestamp

__all__ = [
    # Data
    "TimeFrame",
    "AggregationPeriod",
    # Requests
    "AggregatesRequest",
    "PreparedRequest",
    # Types
    "Timestamp",
]
