# ABOUTME: Aggregates endpoint implementation of AbstractRequestSerializer
# ABOUTME: Validates an AggregatesRequest and builds its endpoint path and query parameters

from datetime import datetime
from typing import cast
from urllib.parse import quote

from market_client.config.logging import get_logger
from market_client.config.settings import ClientSettings, get_settings
from market_client.exceptions.base import NotSupportedError
from market_client.interfaces.request.request_serializer import AbstractRequestSerializer
from market_client.models.request.aggregates import AggregatesRequest
from market_client.models.request.prepared import PreparedRequest


class AggregatesRequestSerializer(AbstractRequestSerializer[AggregatesRequest]):
    """
    Serializer for the aggregates (historical bars) endpoint.

    Produces ``GET {AGGREGATES_PATH}/{symbol}/range/{value}/{time_frame}/{from}/{into}``
    with an ``unadjusted`` query parameter. Dates are rendered in UTC with the
    configured ``DATE_FORMAT``.
    """

    def __init__(self, settings: ClientSettings | None = None):
        """
        Initialize the aggregates request serializer.

        Args:
            settings: Settings providing the endpoint path and date format.
                Defaults to the cached application settings.
        """
        self._settings = settings or get_settings()
        self._logger = get_logger(f"{__name__}.{self.__class__.__name__}")

    def serialize(self, request: AggregatesRequest) -> PreparedRequest:
        """
        Validates an `AggregatesRequest` and converts it into a `PreparedRequest`.

        Args:
            request: The aggregates request to serialize.

        Returns:
            The GET request for the aggregates endpoint.

        Raises:
            NotSupportedError: If `request` is not an `AggregatesRequest`.
            RequestValidationError: If the request parameters are inconsistent.
        """
        if not isinstance(request, AggregatesRequest):
            raise NotSupportedError(
                f"{self.__class__.__name__} cannot serialize {type(request).__name__}",
                code="UNSUPPORTED_REQUEST",
                details={"request_type": type(request).__name__},
            )

        request.validate()

        # validate() guarantees all three are set
        symbol = cast(str, request.symbol)
        date_from = cast(datetime, request.date_from)
        date_into = cast(datetime, request.date_into)

        value, time_frame = request.period.to_path_segments()
        path = "/".join(
            [
                self._settings.AGGREGATES_PATH,
                quote(symbol, safe=""),
                "range",
                value,
                time_frame,
                self._format_date(date_from),
                self._format_date(date_into),
            ]
        )
        params = {"unadjusted": "true" if request.unadjusted else "false"}

        self._logger.debug(f"Serialized aggregates request for {symbol} ({request.period}): {path}")
        return PreparedRequest(method="GET", path=path, params=params)

    def _format_date(self, value: datetime) -> str:
        return value.strftime(self._settings.DATE_FORMAT)
