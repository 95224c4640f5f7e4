"""Aggregates request parameters model definition."""

from datetime import date, datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr, computed_field, model_validator

from market_client.config.logging import get_logger
from market_client.exceptions.request import RequestValidationError
from market_client.models.data.aggregation_period import AggregationPeriod
from market_client.models.types import TIMESTAMP_ADAPTER
from market_client.validators.validation_result import ValidationIssue, ValidationResult

_logger = get_logger(__name__)

TimestampInput = datetime | date | str


class AggregatesRequest(BaseModel):
    """
    Encapsulates the parameters of an aggregates (historical bars) request.

    The request collects a symbol, an aggregation period, an inclusive time
    interval and an adjustment flag. Nothing is checked while the request is
    being built; the transport calls `validate` right before turning the
    request into an outbound call, and every inconsistency is reported at once.

    ``symbol`` and ``period`` are fixed at construction. The interval
    endpoints can only be set together through `set_inclusive_time_interval`
    and stay ``None`` until then. ``unadjusted`` can be changed at any time.
    `model_dump` output includes the interval and `model_validate` restores it.

    Attributes:
        symbol (str | None): Asset name for data retrieval.
        period (AggregationPeriod): Aggregation time span (number of bars and base bar size).
        unadjusted (bool): If True, results are not adjusted for splits.
        date_from (datetime | None): Start of the interval (inclusive), UTC.
        date_into (datetime | None): End of the interval (inclusive), UTC.
    """

    model_config = ConfigDict(
        str_strip_whitespace=True,
        validate_assignment=True,
    )

    symbol: str | None = Field(..., description="Asset name for data retrieval", frozen=True)
    period: AggregationPeriod = Field(..., description="Aggregation time span", frozen=True)
    unadjusted: bool = Field(False, description="Do not adjust results for splits")

    _date_from: datetime | None = PrivateAttr(default=None)
    _date_into: datetime | None = PrivateAttr(default=None)

    def __init__(self, symbol: str | None, period: AggregationPeriod, **data: Any):
        super().__init__(symbol=symbol, period=period, **data)

    @classmethod
    def for_interval(
        cls,
        symbol: str | None,
        period: AggregationPeriod,
        date_from: TimestampInput,
        date_into: TimestampInput,
        *,
        unadjusted: bool = False,
    ) -> "AggregatesRequest":
        """
        Creates a request with its whole time interval set up front.

        Args:
            symbol: Asset name for data retrieval.
            period: Aggregation time span.
            date_from: Interval start time (inclusive).
            date_into: Interval end time (inclusive).
            unadjusted: If True, results are not adjusted for splits.

        Returns:
            A new `AggregatesRequest`. It is not validated yet.
        """
        return cls(symbol, period, unadjusted=unadjusted).set_inclusive_time_interval(date_from, date_into)

    @model_validator(mode="wrap")
    @classmethod
    def restore_interval(cls, data: Any, handler) -> "AggregatesRequest":
        """Sets the interval from ``date_from``/``date_into`` keys, as emitted by `model_dump`."""
        if not isinstance(data, dict) or not ({"date_from", "date_into"} & data.keys()):
            return handler(data)

        data = dict(data)
        date_from = data.pop("date_from", None)
        date_into = data.pop("date_into", None)
        if (date_from is None) != (date_into is None):
            raise ValueError("date_from and date_into must be given together")

        request = handler(data)
        if date_from is not None:
            request.set_inclusive_time_interval(date_from, date_into)
        return request

    @computed_field
    @property
    def date_from(self) -> datetime | None:
        return self._date_from

    @computed_field
    @property
    def date_into(self) -> datetime | None:
        return self._date_into

    def set_inclusive_time_interval(self, date_from: TimestampInput, date_into: TimestampInput) -> "AggregatesRequest":
        """
        Sets the inclusive time interval of the request.

        Both endpoints are converted before either is stored, so a value that
        is not a timestamp leaves the previous interval untouched. The order of
        the endpoints is not checked here; see `validate`.

        Args:
            date_from: Interval start time.
            date_into: Interval end time.

        Returns:
            The same `AggregatesRequest` instance, for chaining.

        Raises:
            pydantic.ValidationError: If either value cannot be read as a timestamp.
        """
        start = TIMESTAMP_ADAPTER.validate_python(date_from)
        end = TIMESTAMP_ADAPTER.validate_python(date_into)
        self._date_from = start
        self._date_into = end
        return self

    def collect_validation_errors(self) -> list[ValidationIssue]:
        """
        Runs every consistency check and returns one issue per failure.

        All checks run independently and in a fixed order: symbol, interval
        start, interval end, interval ordering. A reversed interval is reported
        on both endpoints. The list is rebuilt on each call.

        Returns:
            The ordered list of issues; empty if the request is consistent.
        """
        issues: list[ValidationIssue] = []

        if not self.symbol:
            issues.append(
                ValidationIssue(
                    code="SYMBOL_EMPTY",
                    message="Symbols shouldn't be empty.",
                    field_path="symbol",
                    actual_value=self.symbol,
                )
            )

        if self._date_from is None:
            issues.append(
                ValidationIssue(
                    code="DATE_FROM_MISSING",
                    message="Time interval start should be specified.",
                    field_path="date_from",
                    suggestion="Call set_inclusive_time_interval() before sending the request.",
                )
            )

        if self._date_into is None:
            issues.append(
                ValidationIssue(
                    code="DATE_INTO_MISSING",
                    message="Time interval end should be specified.",
                    field_path="date_into",
                    suggestion="Call set_inclusive_time_interval() before sending the request.",
                )
            )

        if self._date_from is not None and self._date_into is not None and self._date_from > self._date_into:
            for field_path, value in (("date_from", self._date_from), ("date_into", self._date_into)):
                issues.append(
                    ValidationIssue(
                        code="TIME_INTERVAL_INVALID",
                        message="Time interval should be valid.",
                        field_path=field_path,
                        actual_value=value,
                        suggestion="Interval start must not be later than interval end.",
                    )
                )

        return issues

    def validation_result(self) -> ValidationResult:
        """Wraps `collect_validation_errors` into a `ValidationResult` summary."""
        return ValidationResult.from_issues(self.collect_validation_errors(), [type(self).__name__])

    @property
    def is_valid(self) -> bool:
        return not self.collect_validation_errors()

    def validate(self) -> None:  # type: ignore[override]
        """
        Checks the request before it is turned into an outbound call.

        Raises:
            RequestValidationError: If any check fails. The error carries every
                failed check, not only the first one.
        """
        issues = self.collect_validation_errors()
        if issues:
            error = RequestValidationError(issues)
            _logger.warning(
                f"Aggregates request for {self.symbol!r} rejected: {len(issues)} issue(s) on {error.field_names}"
            )
            raise error
