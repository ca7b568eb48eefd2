# ABOUTME: Middleware interfaces package for the filter pipeline library
# ABOUTME: Exports abstract interfaces for generic, predicate and sequence middlewares

from .middleware import AbstractMiddleware, to_delegate
from .filter import AbstractPredicateMiddleware, AbstractSequenceMiddleware

__all__ = [
    "AbstractMiddleware",
    "AbstractPredicateMiddleware",
    "AbstractSequenceMiddleware",
    "to_delegate",
]
