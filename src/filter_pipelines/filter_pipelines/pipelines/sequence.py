# ABOUTME: Sequence pipeline builder
# ABOUTME: Folds sequence middlewares around a handler yielding the pass-through filter

from collections.abc import Iterable
from typing import Any

from loguru import logger

from filter_pipelines.exceptions import InvalidArgumentError
from filter_pipelines.models.identity import NULL_SEQFILTER
from filter_pipelines.onion import build_onion
from filter_pipelines.types import SequenceFilter, SequenceFilterFactory, TContext, TEntity

_logger = logger.bind(name=__name__)


async def _null_seqfilter_handler(context: Any) -> SequenceFilter[Any]:
    return NULL_SEQFILTER


def build_sequence(middlewares: Iterable[Any]) -> SequenceFilterFactory[TContext, TEntity]:
    """
    Build a pipeline producing one sequence filter per context.

    Filters contributed by the middlewares run in listed order, each seeing
    the output of the one before.

    Args:
        middlewares: Sequence middlewares, delegates or named, outermost first.

    Returns:
        ``context -> Awaitable[sequence filter]``. With no middlewares every
        context yields `NULL_SEQFILTER`.

    Raises:
        InvalidArgumentError: If ``middlewares`` is None or holds a non-middleware.
    """
    if middlewares is None:
        raise InvalidArgumentError("middlewares")

    _logger.debug("Building sequence pipeline")
    return build_onion(middlewares, _null_seqfilter_handler)
