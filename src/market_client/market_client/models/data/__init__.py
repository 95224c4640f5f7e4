# ABOUTME: Data models package exports
# ABOUTME: Exports aggregation period value types

from .enum import TimeFrame
from .aggregation_period import AggregationPeriod

__all__ = [
    "TimeFrame",
    "AggregationPeriod",
]
