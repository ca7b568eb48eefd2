# ABOUTME: Base configuration classes for the filter pipeline library
# ABOUTME: Provides fundamental configuration settings and validation logic

from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class BaseCoreSettings(BaseSettings):
    """Defines the foundational configuration for the library.

    Settings are loaded by `pydantic-settings` from environment variables
    prefixed with ``FILTER_PIPELINES_`` or from a ``.env`` file, so an
    application embedding the library can tune it without code changes.

    Attributes:
        ENV: The runtime environment. `setup_logging` picks the console
            preset (colors, backtraces, variable diagnosis) from it.
        LOG_LEVEL: The minimum level for log messages to be processed.
        LOG_FORMAT: Structured (json) or human-readable (txt) console output.
        LOG_FILE_ENABLED: Adds a rotating file sink when True.
        LOG_FILE_PATH: Location of the file sink.
        CHECK_CONTRACTS: When enabled, composed layers verify that middlewares
            and continuations never hand back ``None``.
        model_config: Pydantic's configuration dictionary, specifying how settings are loaded.
    """

    # Environment Configuration
    ENV: Literal["development", "staging", "production"] = Field(
        default="development",
        description="The runtime environment. Selects the console logging preset.",
    )

    # Logging Configuration
    LOG_LEVEL: Literal["TRACE", "DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="The minimum level for log messages to be processed.",
    )
    LOG_FORMAT: Literal["json", "txt"] = Field(
        default="txt",
        description="The output format for logs. Use 'json' for production environments.",
    )
    LOG_FILE_ENABLED: bool = Field(
        default=False,
        description="Write records to a rotating log file in addition to the console.",
    )
    LOG_FILE_PATH: str = Field(
        default="logs/filter-pipelines.log",
        description="Path of the log file when LOG_FILE_ENABLED is set.",
    )

    # Composition
    CHECK_CONTRACTS: bool = Field(
        default=True,
        description="Raise PipelineContractError when a middleware or continuation yields None.",
    )

    model_config = SettingsConfigDict(
        env_prefix="FILTER_PIPELINES_",
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
