# ABOUTME: Interfaces package for the filter pipeline library
# ABOUTME: Re-exports the abstract middleware contracts

from filter_pipelines.interfaces.middleware import (
    AbstractMiddleware,
    AbstractPredicateMiddleware,
    AbstractSequenceMiddleware,
    to_delegate,
)

__all__ = [
    "AbstractMiddleware",
    "AbstractPredicateMiddleware",
    "AbstractSequenceMiddleware",
    "to_delegate",
]
