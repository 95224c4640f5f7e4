"""Aggregation period model definition."""

from datetime import timedelta

from pydantic import BaseModel, ConfigDict, Field, field_validator

from market_client.models.data.enum import TimeFrame


class AggregationPeriod(BaseModel):
    """
    Aggregation time span: a number of bars of a base bar size.

    ``AggregationPeriod(value=5, time_frame=TimeFrame.MINUTE)`` describes
    five-minute bars. The model is frozen and validated on construction, so a
    request holding one can rely on it being well formed.

    Attributes:
        value (int): Number of base bars per aggregate, greater than 0.
        time_frame (TimeFrame): Base bar size.
    """

    model_config = ConfigDict(frozen=True)

    value: int = Field(..., description="Number of base bars per aggregate", gt=0)
    time_frame: TimeFrame = Field(..., description="Base bar size")

    def __init__(self, value: int, time_frame: TimeFrame | str, **data):
        super().__init__(value=value, time_frame=time_frame, **data)

    @field_validator("time_frame", mode="before")
    @classmethod
    def normalize_time_frame(cls, v):
        """Accept time frame names case-insensitively."""
        if isinstance(v, str) and not isinstance(v, TimeFrame):
            return v.strip().lower()
        return v

    @classmethod
    def parse(cls, text: str) -> "AggregationPeriod":
        """
        Parses the ``"{value}/{time_frame}"`` form produced by `str()`.

        Args:
            text: Text such as ``"5/minute"``.

        Returns:
            The parsed `AggregationPeriod`.

        Raises:
            ValueError: If the text is not in ``value/time_frame`` form or
                either part is invalid.
        """
        value, sep, time_frame = text.strip().partition("/")
        if not sep or not value or not time_frame:
            raise ValueError(f"Invalid aggregation period: {text!r} (expected e.g. '5/minute')")
        try:
            count = int(value)
        except ValueError as e:
            raise ValueError(f"Invalid aggregation period count: {value!r}") from e
        # pydantic's ValidationError subclasses ValueError
        return cls(count, time_frame)

    def to_path_segments(self) -> tuple[str, str]:
        """Returns the ``(value, time_frame)`` segments used in endpoint paths."""
        return str(self.value), self.time_frame.value

    @property
    def duration(self) -> timedelta:
        """Approximate wall-clock span of one aggregate."""
        return TimeFrame.to_timedelta(self.time_frame) * self.value

    def __str__(self) -> str:
        return f"{self.value}/{self.time_frame.value}"
