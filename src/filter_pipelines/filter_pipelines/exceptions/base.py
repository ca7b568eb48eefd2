# ABOUTME: Core exception classes for the filter pipeline library
# ABOUTME: Provides structured error handling with context and error codes

from typing import Dict, Any


class FilterPipelineException(Exception):
    """Base exception class for the filter pipeline library.

    Provides structured error handling with optional error codes and contextual
    details. All custom exceptions in the library inherit from this class
    to ensure consistent error handling patterns.

    Attributes:
        message: Human-readable error message
        code: Optional error code for programmatic handling
        details: Optional dictionary containing contextual information
    """

    def __init__(self, message: str, code: str | None = None, details: Dict[str, Any] | None = None):
        """Initialize FilterPipelineException with message, optional code and details.

        Args:
            message: Human-readable error message
            code: Optional error code for programmatic handling
            details: Optional dictionary containing contextual information
        """
        self.message = message
        self.code = code
        self.details = details.copy() if details else {}
        super().__init__(self.message)


class ConfigurationException(FilterPipelineException):
    """Exception raised for configuration errors.

    Used when library configuration is invalid or missing, such as:
    - Invalid environment variable values
    - Logging sink setup failures

    Should include details about the configuration issue.
    """

    pass
