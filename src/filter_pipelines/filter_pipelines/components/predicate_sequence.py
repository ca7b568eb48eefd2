# ABOUTME: Sequence middleware that filters the source with a per-context predicate
# ABOUTME: Lets a predicate factory take part in a sequence pipeline

from collections.abc import Awaitable, Iterable
from typing import Generic

from filter_pipelines.config.settings import get_settings
from filter_pipelines.exceptions import InvalidArgumentError, PipelineContractError
from filter_pipelines.interfaces.middleware import AbstractSequenceMiddleware
from filter_pipelines.models.identity import NULL_PREDICATE
from filter_pipelines.types import Continuation, PredicateFactory, SequenceFilter, TContext, TEntity


class PredicateSequenceMiddleware(AbstractSequenceMiddleware[TContext, TEntity], Generic[TContext, TEntity]):
    """
    Sequence middleware built from an async predicate factory.

    For each context it awaits the factory for a predicate ``p``, then awaits
    the downstream filter ``g``, and yields ``source -> g(filter(p, source))``.
    When ``p`` is `NULL_PREDICATE` the downstream filter is returned as is.
    Downstream is always consulted; this layer never short-circuits.
    """

    def __init__(self, predicate_factory: PredicateFactory[TContext, TEntity]):
        """
        Args:
            predicate_factory: ``context -> Awaitable[predicate]``. Required.

        Raises:
            InvalidArgumentError: If ``predicate_factory`` is None.
        """
        if predicate_factory is None:
            raise InvalidArgumentError("predicate_factory")
        self._predicate_factory = predicate_factory

    def invoke(
        self, next: Continuation[TContext, Awaitable[SequenceFilter[TEntity]]]
    ) -> Continuation[TContext, Awaitable[SequenceFilter[TEntity]]]:
        async def continuation(context: TContext) -> SequenceFilter[TEntity]:
            check = get_settings().CHECK_CONTRACTS

            predicate = await self._predicate_factory(context)
            if check and predicate is None:
                raise PipelineContractError("Predicate factory resolved to None")

            next_filter = await next(context)
            if check and next_filter is None:
                raise PipelineContractError(
                    f"Continuation below {self.__class__.__name__} resolved to None"
                )

            if predicate is NULL_PREDICATE:
                return next_filter

            def filtered(source: Iterable[TEntity]) -> Iterable[TEntity]:
                return next_filter(filter(predicate, source))

            return filtered

        return continuation

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._predicate_factory!r})"
