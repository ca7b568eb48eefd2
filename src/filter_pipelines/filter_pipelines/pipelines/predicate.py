# ABOUTME: Predicate pipeline builder
# ABOUTME: Folds predicate middlewares around a handler yielding the always-true predicate

from collections.abc import Iterable
from typing import Any

from loguru import logger

from filter_pipelines.exceptions import InvalidArgumentError
from filter_pipelines.models.identity import NULL_PREDICATE
from filter_pipelines.onion import build_onion
from filter_pipelines.types import Predicate, PredicateFactory, TContext, TEntity

_logger = logger.bind(name=__name__)


async def _null_predicate_handler(context: Any) -> Predicate[Any]:
    return NULL_PREDICATE


def build_predicate(middlewares: Iterable[Any]) -> PredicateFactory[TContext, TEntity]:
    """
    Build a pipeline producing one predicate per context.

    The pipeline's predicate is the short-circuit AND of the predicates the
    middlewares contribute, in the order the middlewares are listed.

    Args:
        middlewares: Predicate middlewares, delegates or named, outermost first.

    Returns:
        ``context -> Awaitable[predicate]``. With no middlewares every context
        yields `NULL_PREDICATE`.

    Raises:
        InvalidArgumentError: If ``middlewares`` is None or holds a non-middleware.
    """
    if middlewares is None:
        raise InvalidArgumentError("middlewares")

    _logger.debug("Building predicate pipeline")
    return build_onion(middlewares, _null_predicate_handler)
