# ABOUTME: Loguru setup for the market data client
# ABOUTME: Derives sink configuration from ClientSettings and installs it on request

import sys
from pathlib import Path

from loguru import logger
from pydantic import BaseModel

from market_client.config.settings import ClientSettings, get_settings

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{extra[name]}</cyan> | "
    "<level>{message}</level>"
)
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {extra[name]} | {message}"


class LoggerConfig(BaseModel):
    """Sinks installed by `setup_logging`.

    The client never touches loguru handlers by itself; an application that
    wants the client's records formatted calls `setup_logging` once.
    """

    level: str = "INFO"
    serialize: bool = False
    colorize: bool = True
    diagnose: bool = False
    file_path: Path | None = None
    file_rotation: str = "100 MB"
    file_retention: str = "30 days"

    @classmethod
    def from_settings(cls, settings: ClientSettings | None = None) -> "LoggerConfig":
        """Builds the configuration from `LOG_LEVEL`, `LOG_FORMAT`, `LOG_FILE_PATH` and `DEBUG`.

        Debug mode lowers the level to DEBUG and turns on variable values in
        tracebacks.
        """
        settings = settings or get_settings()
        return cls(
            level="DEBUG" if settings.DEBUG else settings.LOG_LEVEL,
            serialize=settings.LOG_FORMAT == "json",
            diagnose=settings.DEBUG,
            file_path=settings.LOG_FILE_PATH,
        )


def setup_logging(config: LoggerConfig | None = None) -> None:
    """
    Replaces loguru's handlers with the client's console and optional file sink.

    Args:
        config: Logger configuration. If None, it is built from the cached settings.
    """
    if config is None:
        config = LoggerConfig.from_settings()

    logger.remove()
    logger.configure(extra={"name": "market_client"})

    logger.add(
        sys.stdout,
        level=config.level,
        format=CONSOLE_FORMAT,
        colorize=config.colorize and not config.serialize,
        serialize=config.serialize,
        backtrace=config.diagnose,
        diagnose=config.diagnose,
        catch=True,
    )

    if config.file_path is not None:
        config.file_path.parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            config.file_path,
            level=config.level,
            format=FILE_FORMAT,
            rotation=config.file_rotation,
            retention=config.file_retention,
            serialize=config.serialize,
            catch=True,
        )


def get_logger(name: str):
    """
    Get a logger instance with the specified name.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Logger instance bound to the specified name
    """
    return logger.bind(name=name)
