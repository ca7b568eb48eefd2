# ABOUTME: Predicate flavor of the composing middleware template
# ABOUTME: Combines contributed predicates with short-circuit AND, skipping the always-true identity

from typing import Generic

from filter_pipelines.components.base import ComposingMiddleware
from filter_pipelines.interfaces.middleware import AbstractPredicateMiddleware
from filter_pipelines.models.identity import NULL_PREDICATE
from filter_pipelines.types import Predicate, TContext, TEntity


def combine_predicates(predicate: Predicate[TEntity], next_predicate: Predicate[TEntity]) -> Predicate[TEntity]:
    """
    AND two predicates, evaluating ``predicate`` first.

    The always-true identity on either side is dropped, so the result is
    one of the inputs whenever the other contributes nothing.
    """
    if predicate is NULL_PREDICATE:
        return next_predicate
    if next_predicate is NULL_PREDICATE:
        return predicate

    def both(entity: TEntity) -> bool:
        return predicate(entity) and next_predicate(entity)

    return both


class PredicateMiddleware(
    ComposingMiddleware[TContext, Predicate[TEntity]],
    AbstractPredicateMiddleware[TContext, TEntity],
    Generic[TContext, TEntity],
):
    """
    Base class for predicate middlewares.

    Override ``create`` to contribute a predicate for a context, or
    ``create_async`` to control delegation yourself. The default predicate is
    `NULL_PREDICATE`, which leaves the decision to downstream layers.

    Example:
        class HttpsOnly(PredicateMiddleware[str, Path]):
            def create(self, context):
                if not context.startswith("https://"):
                    return short_circuit(lambda _: False)
                return proceed(NULL_PREDICATE)
    """

    NULL_PREDICATE = staticmethod(NULL_PREDICATE)
    identity = staticmethod(NULL_PREDICATE)
    combine = staticmethod(combine_predicates)
