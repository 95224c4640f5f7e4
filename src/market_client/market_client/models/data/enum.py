from datetime import timedelta
from enum import Enum


class TimeFrame(str, Enum):
    """Enumeration for the base bar sizes of an aggregation period.

    Each member's value is the lower-case name used in the aggregates
    endpoint path (e.g. ``.../range/5/minute/...``).
    """

    MINUTE = "minute"
    HOUR = "hour"
    DAY = "day"
    WEEK = "week"
    MONTH = "month"
    QUARTER = "quarter"
    YEAR = "year"

    @classmethod
    def to_seconds(cls, time_frame: "TimeFrame") -> int:
        """
        Converts a `TimeFrame` member to its approximate duration in seconds.

        Args:
            time_frame: The `TimeFrame` member to convert.

        Returns:
            The duration of one bar of that size in seconds.
        """
        mapping = {
            cls.MINUTE: 60,
            cls.HOUR: 3600,
            cls.DAY: 86400,
            cls.WEEK: 604800,
            cls.MONTH: 2592000,  # 30 days approximation
            cls.QUARTER: 7776000,  # 90 days approximation
            cls.YEAR: 31536000,  # 365 days approximation
        }
        return mapping[time_frame]

    @classmethod
    def to_timedelta(cls, time_frame: "TimeFrame") -> timedelta:
        """
        Converts a `TimeFrame` member to a `datetime.timedelta` object.

        Args:
            time_frame: The `TimeFrame` member to convert.

        Returns:
            A `timedelta` object representing the duration of one bar.
        """
        return timedelta(seconds=cls.to_seconds(time_frame))

    def __str__(self) -> str:
        return self.value
