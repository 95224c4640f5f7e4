# ABOUTME: Main configuration composition for the client library.
# ABOUTME: Assembles all configuration classes into a single, accessible object.

from functools import lru_cache

from ._base import BaseCoreSettings, RequestSettings


class ClientSettings(BaseCoreSettings, RequestSettings):
    """Represents the complete, composed configuration for the client.

    Inherits the foundational settings from `BaseCoreSettings` and the
    endpoint settings from `RequestSettings`, so the rest of the package reads
    a single object. `get_settings` provides a cached instance.
    """

    pass


@lru_cache
def get_settings() -> ClientSettings:
    """Provides a cached instance of the client settings.

    Returns:
        A single, cached instance of the ClientSettings class.
    """
    return ClientSettings()
