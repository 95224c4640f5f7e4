# ABOUTME: Base configuration classes for the market data client
# ABOUTME: Provides fundamental configuration settings and validation logic

from datetime import datetime
from pathlib import Path
from typing import Literal
import zoneinfo

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class BaseCoreSettings(BaseSettings):
    """Defines the foundational configuration for the client library.

    Settings are loaded with `pydantic-settings` from environment variables or
    a `.env` file, so the same code can run against different deployments
    without changes. More specific settings classes inherit from this one.

    Attributes:
        APP_NAME: The name of the application, used for identification in logs.
        ENV: The runtime environment.
        DEBUG: A flag to enable or disable debug mode.
        LOG_LEVEL: The minimum level for log messages to be processed.
        LOG_FORMAT: The format for log output, structured (JSON) or human-readable (txt).
        LOG_FILE_PATH: Optional log file; console only when unset.
        TIMEZONE: Timezone used to interpret naive datetimes passed to requests.
        model_config: Pydantic's configuration dictionary, specifying how settings are loaded.
    """

    # Application Identity
    APP_NAME: str = Field(
        default="MarketClient",
        description="The name of the application, used for identification in logs.",
    )

    # Environment Configuration
    ENV: Literal["development", "staging", "production"] = Field(
        default="development",
        description="The application's runtime environment. Controls features like debugging and logging verbosity.",
    )
    DEBUG: bool = Field(
        default=False,
        description="Flag to enable or disable debug mode. Should be False in production.",
    )

    # Logging Configuration
    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="The minimum level for log messages to be processed.",
    )
    LOG_FORMAT: Literal["json", "txt"] = Field(
        default="txt",
        description="The output format for logs. Use 'json' for production environments.",
    )
    LOG_FILE_PATH: Path | None = Field(
        default=None,
        description="Optional file that receives a copy of the log output. Unset means console only.",
    )

    # Globalization
    TIMEZONE: str = Field(
        default="UTC",
        description="Timezone assumed for naive datetimes. Request timestamps are stored in UTC.",
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("ENV", mode="before")
    @classmethod
    def validate_env_case_insensitive(cls, v: str) -> str:
        """Validate ENV field with case-insensitive mapping.

        Accepts common environment aliases and normalizes them:
        - dev, develop -> development
        - prod -> production
        - stage -> staging
        """
        if isinstance(v, str):
            v_lower = v.lower().strip()
            env_mapping = {
                "dev": "development",
                "develop": "development",
                "development": "development",
                "stage": "staging",
                "staging": "staging",
                "prod": "production",
                "production": "production",
            }
            return env_mapping.get(v_lower, v_lower)
        return v

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def validate_log_level_case_insensitive(cls, v: str) -> str:
        """Validate LOG_LEVEL field with case-insensitive normalization."""
        if isinstance(v, str):
            return v.upper().strip()
        return v

    @field_validator("LOG_FORMAT", mode="before")
    @classmethod
    def validate_log_format_case_insensitive(cls, v: str) -> str:
        """Validate LOG_FORMAT field with case-insensitive normalization."""
        if isinstance(v, str):
            v_lower = v.lower().strip()
            format_mapping = {
                "json": "json",
                "structured": "json",
                "txt": "txt",
                "text": "txt",
            }
            return format_mapping.get(v_lower, v_lower)
        return v

    @field_validator("TIMEZONE", mode="before")
    @classmethod
    def validate_timezone(cls, v: str) -> str:
        """Validate TIMEZONE field to ensure it's a valid IANA timezone identifier.

        Raises:
            ValueError: If the timezone is not a valid IANA timezone identifier.
        """
        if not isinstance(v, str):
            return v

        v_stripped = v.strip()

        if not v_stripped:
            raise ValueError(
                "Invalid timezone ''. Must be a valid IANA timezone identifier "
                "(e.g., 'UTC', 'America/New_York', 'Asia/Shanghai')."
            )

        try:
            zoneinfo.ZoneInfo(v_stripped)
            return v_stripped
        except (zoneinfo.ZoneInfoNotFoundError, ValueError):
            # Retry with IANA casing (e.g., "america/new_york" -> "America/New_York")
            if "/" in v_stripped:
                parts = v_stripped.split("/")
                parts[0] = parts[0].capitalize()
                for i in range(1, len(parts)):
                    parts[i] = parts[i].replace("_", " ").title().replace(" ", "_")

                proper_case_tz = "/".join(parts)

                try:
                    zoneinfo.ZoneInfo(proper_case_tz)
                    return proper_case_tz
                except (zoneinfo.ZoneInfoNotFoundError, ValueError):
                    pass

            raise ValueError(
                f"Invalid timezone '{v_stripped}'. Must be a valid IANA timezone identifier "
                f"(e.g., 'UTC', 'America/New_York', 'Asia/Shanghai')."
            )

    @property
    def tzinfo(self) -> zoneinfo.ZoneInfo:
        """The configured timezone as a `ZoneInfo` object."""
        return zoneinfo.ZoneInfo(self.TIMEZONE)


class RequestSettings(BaseSettings):
    """Settings describing how requests are turned into endpoint calls.

    Attributes:
        AGGREGATES_PATH: Path prefix of the aggregates endpoint, without surrounding slashes.
        DATE_FORMAT: `strftime` format used for the date segments of the path.
    """

    AGGREGATES_PATH: str = Field(
        default="v2/aggs/ticker",
        description="Path prefix of the aggregates endpoint.",
    )
    DATE_FORMAT: str = Field(
        default="%Y-%m-%d",
        description="strftime format for date path segments.",
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("AGGREGATES_PATH", mode="before")
    @classmethod
    def validate_aggregates_path(cls, v: str) -> str:
        """Strip surrounding whitespace and slashes; reject an empty path."""
        if isinstance(v, str):
            v = v.strip().strip("/")
            if not v:
                raise ValueError("AGGREGATES_PATH cannot be empty")
        return v

    @field_validator("DATE_FORMAT")
    @classmethod
    def validate_date_format(cls, v: str) -> str:
        """Ensure the format contains at least one directive and renders."""
        if "%" not in v:
            raise ValueError(f"Invalid DATE_FORMAT '{v}': must contain strftime directives")
        try:
            datetime(2000, 1, 2).strftime(v)
        except ValueError as e:
            raise ValueError(f"Invalid DATE_FORMAT '{v}': {e}") from e
        return v
