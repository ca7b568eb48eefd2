# ABOUTME: Loguru configuration for the filter pipeline library
# ABOUTME: Provides opt-in logging setup with console colorization and optional file output

import sys
from pathlib import Path
from typing import Any, Dict, Optional, Union

from loguru import logger
from pydantic import BaseModel

from filter_pipelines.config.settings import CoreSettings, get_settings
from filter_pipelines.exceptions import ConfigurationException

LIBRARY_LOGGER = "filter_pipelines"


class LoggerConfig(BaseModel):
    """Configuration for loguru logger."""

    # Console output configuration
    console_enabled: bool = True
    console_level: str = "INFO"
    console_format: str = (
        "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
        "<level>{level: <8}</level> | "
        "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
        "<level>{message}</level>"
    )
    console_colorize: bool = True
    console_serialize: bool = False
    console_backtrace: bool = True
    console_diagnose: bool = True

    # File output configuration
    file_enabled: bool = False
    file_level: str = "DEBUG"
    file_path: Union[str, Path] = "logs/filter-pipelines.log"
    file_format: str = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {name}:{function}:{line} | {message}"
    file_rotation: str = "100 MB"
    file_retention: str = "30 days"
    file_compression: str = "gz"
    file_serialize: bool = False

    # Performance settings
    enqueue: bool = False
    catch: bool = True


# Console presets per runtime environment.
ENV_PRESETS: Dict[str, Dict[str, Any]] = {
    "development": {
        "console_colorize": True,
        "console_backtrace": True,
        "console_diagnose": True,
    },
    "staging": {
        "console_colorize": False,
        "console_backtrace": True,
        "console_diagnose": False,
    },
    "production": {
        "console_colorize": False,
        "console_backtrace": False,
        "console_diagnose": False,
    },
}


def config_from_settings(settings: Optional[CoreSettings] = None) -> LoggerConfig:
    """
    Build the logger configuration described by the library settings.

    ``ENV`` selects the console preset; ``LOG_LEVEL``, ``LOG_FORMAT``,
    ``LOG_FILE_ENABLED`` and ``LOG_FILE_PATH`` apply on top of it.

    Args:
        settings: Settings to read. Defaults to `get_settings()`.

    Returns:
        The LoggerConfig `setup_logging` uses when called without one.
    """
    if settings is None:
        settings = get_settings()

    return LoggerConfig(
        **ENV_PRESETS[settings.ENV],
        console_level=settings.LOG_LEVEL,
        console_serialize=settings.LOG_FORMAT == "json",
        file_enabled=settings.LOG_FILE_ENABLED,
        file_path=settings.LOG_FILE_PATH,
        file_level=settings.LOG_LEVEL,
    )


def _check_level(level: str) -> None:
    try:
        logger.level(level)
    except ValueError as e:
        raise ConfigurationException(
            f"Unknown log level '{level}'",
            code="LOG_LEVEL_INVALID",
            details={"level": level},
        ) from e


def setup_logging(config: Optional[LoggerConfig] = None) -> None:
    """
    Setup loguru logger with the specified configuration.

    The library keeps its own records disabled until this is called, so an
    application that never configures logging sees no output from it.

    Args:
        config: Logger configuration. If None, it is built from the library
            settings by `config_from_settings`.

    Raises:
        ConfigurationException: If a configured level is not known to loguru.
    """
    if config is None:
        config = config_from_settings()

    _check_level(config.console_level)
    if config.file_enabled:
        _check_level(config.file_level)

    # Remove default handler
    logger.remove()

    if config.console_enabled:
        logger.add(
            sys.stderr,
            level=config.console_level,
            format=config.console_format,
            colorize=config.console_colorize,
            serialize=config.console_serialize,
            backtrace=config.console_backtrace,
            diagnose=config.console_diagnose,
            enqueue=config.enqueue,
            catch=config.catch,
        )

    if config.file_enabled:
        log_path = Path(config.file_path)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        logger.add(
            config.file_path,
            level=config.file_level,
            format=config.file_format,
            rotation=config.file_rotation,
            retention=config.file_retention,
            compression=config.file_compression,
            serialize=config.file_serialize,
            enqueue=config.enqueue,
            catch=config.catch,
        )

    logger.enable(LIBRARY_LOGGER)


def get_logger(name: str):
    """
    Get a logger instance with the specified name.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Logger instance bound to the specified name
    """
    return logger.bind(name=name)


def disable_logging() -> None:
    """Silence the library's records without touching application sinks."""
    logger.disable(LIBRARY_LOGGER)


def configure_for_testing() -> None:
    """Configure logging for testing environment."""
    logger.remove()
    logger.add(
        sys.stdout,
        level="TRACE",
        format="<green>{time:HH:mm:ss}</green> | <level>{level: <5}</level> | <cyan>{name}</cyan> | <level>{message}</level>",
        colorize=True,
        backtrace=False,
        diagnose=False,
        enqueue=False,
        catch=False,
    )
    logger.enable(LIBRARY_LOGGER)


def configure_for_production() -> None:
    """Configure logging for production environment: JSON records at INFO."""
    setup_logging(LoggerConfig(**ENV_PRESETS["production"], console_level="INFO", console_serialize=True))


def configure_for_development() -> None:
    """Configure logging for development environment: colored text down to DEBUG."""
    setup_logging(LoggerConfig(**ENV_PRESETS["development"], console_level="DEBUG"))
