# ABOUTME: Configuration package initialization
# ABOUTME: Exports configuration classes and logging utilities for the library

from filter_pipelines.config.settings import CoreSettings, get_settings
from filter_pipelines.config.logging import (
    ENV_PRESETS,
    LoggerConfig,
    config_from_settings,
    setup_logging,
    get_logger,
    disable_logging,
    configure_for_testing,
    configure_for_production,
    configure_for_development,
)

__all__ = [
    "CoreSettings",
    "get_settings",
    "ENV_PRESETS",
    "LoggerConfig",
    "config_from_settings",
    "setup_logging",
    "get_logger",
    "disable_logging",
    "configure_for_testing",
    "configure_for_production",
    "configure_for_development",
]
