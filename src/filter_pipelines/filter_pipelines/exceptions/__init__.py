# ABOUTME: Exceptions package exports
# ABOUTME: Exports the base exception and the build/contract error types

from filter_pipelines.exceptions.base import (
    FilterPipelineException,
    ConfigurationException,
)

from filter_pipelines.exceptions.pipeline import (
    InvalidArgumentError,
    PipelineContractError,
)

__all__ = [
    "FilterPipelineException",
    "ConfigurationException",
    # Pipeline exceptions
    "InvalidArgumentError",
    "PipelineContractError",
]
