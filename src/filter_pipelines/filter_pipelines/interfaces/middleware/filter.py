# ABOUTME: Flavor-specific named middleware interfaces for predicate and sequence pipelines
# ABOUTME: Fix the result type of AbstractMiddleware to an awaitable predicate or sequence filter

from abc import abstractmethod
from collections.abc import Awaitable
from typing import Generic

from filter_pipelines.interfaces.middleware.middleware import AbstractMiddleware
from filter_pipelines.types import Continuation, Predicate, SequenceFilter, TContext, TEntity


class AbstractPredicateMiddleware(
    AbstractMiddleware[TContext, Awaitable[Predicate[TEntity]]],
    Generic[TContext, TEntity],
):
    """Named middleware of a predicate pipeline."""

    @abstractmethod
    def invoke(
        self, next: Continuation[TContext, Awaitable[Predicate[TEntity]]]
    ) -> Continuation[TContext, Awaitable[Predicate[TEntity]]]:
        pass


class AbstractSequenceMiddleware(
    AbstractMiddleware[TContext, Awaitable[SequenceFilter[TEntity]]],
    Generic[TContext, TEntity],
):
    """Named middleware of a sequence pipeline."""

    @abstractmethod
    def invoke(
        self, next: Continuation[TContext, Awaitable[SequenceFilter[TEntity]]]
    ) -> Continuation[TContext, Awaitable[SequenceFilter[TEntity]]]:
        pass
