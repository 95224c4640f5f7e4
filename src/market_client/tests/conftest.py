# ABOUTME: pytest configuration for market client tests
# ABOUTME: Configures timeouts, settings isolation and shared request fixtures

from datetime import UTC, datetime

import pytest
from loguru import logger

from market_client.config.settings import get_settings
from market_client.models.data.aggregation_period import AggregationPeriod
from market_client.models.data.enum import TimeFrame


def pytest_configure(config):
    """Configure pytest for market client tests."""
    config.addinivalue_line("markers", "unit: Unit tests with 20-second timeout")
    config.addinivalue_line("markers", "integration: Integration tests with 60-second timeout")
    config.addinivalue_line("markers", "config: Configuration tests")


def pytest_collection_modifyitems(config, items):
    """Modify test items to add appropriate timeouts based on test type."""
    for item in items:
        if item.get_closest_marker("timeout"):
            continue

        if item.get_closest_marker("unit"):
            item.add_marker(pytest.mark.timeout(20))
        elif item.get_closest_marker("integration"):
            item.add_marker(pytest.mark.timeout(60))


@pytest.fixture(autouse=True)
def isolated_settings():
    """Drop the cached settings so environment changes in a test take effect."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def log_messages():
    """Capture loguru records emitted during a test as (level, message) tuples."""
    records: list[tuple[str, str]] = []
    handler_id = logger.add(
        lambda message: records.append((message.record["level"].name, message.record["message"])),
        level="DEBUG",
        enqueue=False,
        catch=False,
    )
    yield records
    logger.remove(handler_id)


@pytest.fixture
def period() -> AggregationPeriod:
    return AggregationPeriod(5, TimeFrame.MINUTE)


@pytest.fixture
def january_2023() -> tuple[datetime, datetime]:
    return datetime(2023, 1, 1, tzinfo=UTC), datetime(2023, 1, 31, tzinfo=UTC)
