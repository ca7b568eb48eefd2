# ABOUTME: Sequence flavor of the composing middleware template
# ABOUTME: Chains contributed sequence filters left to right, skipping the pass-through identity

from collections.abc import Iterable
from typing import Generic

from filter_pipelines.components.base import ComposingMiddleware
from filter_pipelines.interfaces.middleware import AbstractSequenceMiddleware
from filter_pipelines.models.identity import NULL_SEQFILTER
from filter_pipelines.types import SequenceFilter, TContext, TEntity


def compose_filters(
    sequence_filter: SequenceFilter[TEntity], next_filter: SequenceFilter[TEntity]
) -> SequenceFilter[TEntity]:
    """
    Chain two filters so that ``next_filter`` sees the output of ``sequence_filter``.

    The pass-through identity on either side is dropped. Iteration stays lazy:
    nothing here materializes the source.
    """
    if sequence_filter is NULL_SEQFILTER:
        return next_filter
    if next_filter is NULL_SEQFILTER:
        return sequence_filter

    def chained(source: Iterable[TEntity]) -> Iterable[TEntity]:
        return next_filter(sequence_filter(source))

    return chained


class SequenceMiddleware(
    ComposingMiddleware[TContext, SequenceFilter[TEntity]],
    AbstractSequenceMiddleware[TContext, TEntity],
    Generic[TContext, TEntity],
):
    """
    Base class for sequence middlewares.

    Override ``create`` to contribute a filter for a context, or
    ``create_async`` to control delegation yourself. The default filter is
    `NULL_SEQFILTER`, which hands the source to downstream layers untouched.
    """

    NULL_SEQFILTER = staticmethod(NULL_SEQFILTER)
    identity = staticmethod(NULL_SEQFILTER)
    combine = staticmethod(compose_filters)
