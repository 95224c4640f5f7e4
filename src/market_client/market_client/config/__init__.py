# ABOUTME: Configuration package initialization
# ABOUTME: Exports configuration classes and utilities for the client library

from market_client.config.settings import ClientSettings, get_settings
from market_client.config.logging import (
    LoggerConfig,
    setup_logging,
    get_logger,
)

__all__ = [
    "ClientSettings",
    "get_settings",
    "LoggerConfig",
    "setup_logging",
    "get_logger",
]
