# ABOUTME: Adapters turning named components and predicate factories into pipeline middlewares
# ABOUTME: Entry points for mixing class-based and function-based middlewares in one pipeline

from typing import Any

from filter_pipelines.components.predicate_sequence import PredicateSequenceMiddleware
from filter_pipelines.exceptions import InvalidArgumentError
from filter_pipelines.interfaces.middleware import to_delegate
from filter_pipelines.types import (
    PredicateFactory,
    PredicateMiddlewareFunc,
    SequenceMiddlewareFunc,
    TContext,
    TEntity,
)


def adapter_for_predicate_component(component: Any) -> PredicateMiddlewareFunc[TContext, TEntity]:
    """
    Convert a named predicate middleware to its delegate form.

    Raises:
        InvalidArgumentError: If ``component`` is None or has no ``invoke``.
    """
    if component is None:
        raise InvalidArgumentError("component")
    return to_delegate(component)


def adapter_for_sequence_component(component: Any) -> SequenceMiddlewareFunc[TContext, TEntity]:
    """
    Convert a named sequence middleware to its delegate form.

    Raises:
        InvalidArgumentError: If ``component`` is None or has no ``invoke``.
    """
    if component is None:
        raise InvalidArgumentError("component")
    return to_delegate(component)


def adapter_predicate_to_sequence(
    predicate_factory: PredicateFactory[TContext, TEntity],
) -> SequenceMiddlewareFunc[TContext, TEntity]:
    """
    Turn an async predicate factory into a sequence middleware delegate.

    The resulting layer filters the source with the predicate before handing
    it to downstream filters, or leaves downstream untouched when the factory
    yields `NULL_PREDICATE`.

    Raises:
        InvalidArgumentError: If ``predicate_factory`` is None.
    """
    return PredicateSequenceMiddleware(predicate_factory).invoke
