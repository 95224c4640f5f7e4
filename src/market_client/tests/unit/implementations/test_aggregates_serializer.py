# ABOUTME: Unit tests for AggregatesRequestSerializer
# ABOUTME: Tests path and query building and that invalid requests are never serialized

from datetime import date, datetime

import pytest
from pydantic import BaseModel, ValidationError

from market_client.config.settings import ClientSettings
from market_client.exceptions import NotSupportedError, RequestValidationError
from market_client.implementations.http.aggregates_serializer import AggregatesRequestSerializer
from market_client.interfaces.request.request_serializer import AbstractRequestSerializer
from market_client.models.data.aggregation_period import AggregationPeriod
from market_client.models.data.enum import TimeFrame
from market_client.models.request.aggregates import AggregatesRequest
from market_client.models.request.prepared import PreparedRequest


@pytest.fixture
def serializer() -> AggregatesRequestSerializer:
    return AggregatesRequestSerializer(ClientSettings())


@pytest.mark.unit
class TestAggregatesRequestSerializer:
    """Test suite for serializing aggregates requests."""

    def test_implements_interface(self, serializer):
        assert isinstance(serializer, AbstractRequestSerializer)

    def test_serializes_valid_request(self, serializer, period, january_2023):
        request = AggregatesRequest("AAPL", period).set_inclusive_time_interval(*january_2023)

        prepared = serializer.serialize(request)

        assert prepared == PreparedRequest(
            method="GET",
            path="v2/aggs/ticker/AAPL/range/5/minute/2023-01-01/2023-01-31",
            params={"unadjusted": "false"},
        )

    def test_unadjusted_flag(self, serializer, period, january_2023):
        request = AggregatesRequest("AAPL", period, unadjusted=True).set_inclusive_time_interval(*january_2023)

        assert serializer.serialize(request).params == {"unadjusted": "true"}

    def test_flag_changed_after_construction_is_used(self, serializer, period, january_2023):
        request = AggregatesRequest("AAPL", period).set_inclusive_time_interval(*january_2023)

        request.unadjusted = True

        assert serializer.serialize(request).params["unadjusted"] == "true"

    def test_period_segments(self, serializer, january_2023):
        request = AggregatesRequest("MSFT", AggregationPeriod(1, TimeFrame.DAY)).set_inclusive_time_interval(
            *january_2023
        )

        assert "/range/1/day/" in serializer.serialize(request).path

    def test_symbol_is_url_quoted(self, serializer, period, january_2023):
        request = AggregatesRequest("BRK/A", period).set_inclusive_time_interval(*january_2023)

        assert serializer.serialize(request).path.startswith("v2/aggs/ticker/BRK%2FA/range/")

    def test_dates_are_rendered_in_utc(self, serializer, period, monkeypatch):
        monkeypatch.setenv("TIMEZONE", "Asia/Tokyo")
        request = AggregatesRequest("AAPL", period).set_inclusive_time_interval(
            datetime(2023, 1, 1, 8, 0), datetime(2023, 1, 2, 8, 0)
        )

        assert serializer.serialize(request).path.endswith("/2022-12-31/2023-01-01")

    def test_plain_dates_are_rendered_as_given(self, serializer, monkeypatch):
        monkeypatch.setenv("TIMEZONE", "Asia/Tokyo")
        request = AggregatesRequest("AAPL", AggregationPeriod(1, TimeFrame.DAY)).set_inclusive_time_interval(
            date(2023, 1, 1), date(2023, 1, 31)
        )

        assert serializer.serialize(request).path == "v2/aggs/ticker/AAPL/range/1/day/2023-01-01/2023-01-31"

    def test_custom_settings(self, period):
        settings = ClientSettings(AGGREGATES_PATH="/v3/bars/", DATE_FORMAT="%Y%m%d")
        request = AggregatesRequest("AAPL", period).set_inclusive_time_interval(date(2023, 1, 1), date(2023, 1, 31))

        prepared = AggregatesRequestSerializer(settings).serialize(request)

        assert prepared.path == "v3/bars/AAPL/range/5/minute/20230101/20230131"

    def test_default_settings_are_used(self, period, january_2023, monkeypatch):
        monkeypatch.setenv("AGGREGATES_PATH", "v9/aggs")
        request = AggregatesRequest("AAPL", period).set_inclusive_time_interval(*january_2023)

        prepared = AggregatesRequestSerializer().serialize(request)

        assert prepared.path.startswith("v9/aggs/AAPL/")

    def test_invalid_request_is_not_serialized(self, serializer, period):
        request = AggregatesRequest("", period)

        with pytest.raises(RequestValidationError) as exc_info:
            serializer.serialize(request)

        assert exc_info.value.field_names == ["symbol", "date_from", "date_into"]

    def test_reversed_interval_is_not_serialized(self, serializer, period, january_2023):
        start, end = january_2023
        request = AggregatesRequest("AAPL", period).set_inclusive_time_interval(end, start)

        with pytest.raises(RequestValidationError) as exc_info:
            serializer.serialize(request)

        assert exc_info.value.field_names == ["date_from", "date_into"]

    def test_unsupported_request_type(self, serializer):
        class OtherRequest(BaseModel):
            symbol: str

        with pytest.raises(NotSupportedError) as exc_info:
            serializer.serialize(OtherRequest(symbol="AAPL"))

        assert exc_info.value.code == "UNSUPPORTED_REQUEST"
        assert exc_info.value.details == {"request_type": "OtherRequest"}

    def test_logs_serialized_path(self, serializer, period, january_2023, log_messages):
        request = AggregatesRequest("AAPL", period).set_inclusive_time_interval(*january_2023)

        serializer.serialize(request)

        assert any(level == "DEBUG" and "v2/aggs/ticker/AAPL" in message for level, message in log_messages)


@pytest.mark.unit
class TestPreparedRequest:
    """Test cases for PreparedRequest."""

    def test_defaults(self):
        prepared = PreparedRequest(path="v2/aggs/ticker/AAPL")

        assert prepared.method == "GET"
        assert prepared.params == {}

    def test_is_frozen(self):
        prepared = PreparedRequest(path="v2/aggs/ticker/AAPL")

        with pytest.raises(ValidationError):
            prepared.path = "other"

    def test_empty_path_is_rejected(self):
        with pytest.raises(ValidationError):
            PreparedRequest(path="")

    def test_only_get_is_supported(self):
        with pytest.raises(ValidationError):
            PreparedRequest(method="POST", path="v2/aggs")
