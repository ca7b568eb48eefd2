# ABOUTME: Template base for middlewares that contribute one value per context
# ABOUTME: Implements create/create_async with short-circuit and identity-skipping composition

from abc import abstractmethod
from collections.abc import Awaitable
from typing import ClassVar, Generic, Tuple, Union

from loguru import logger

from filter_pipelines.config.settings import get_settings
from filter_pipelines.exceptions import PipelineContractError
from filter_pipelines.interfaces.middleware import AbstractMiddleware
from filter_pipelines.models.creation import Creation
from filter_pipelines.types import Continuation, TContext, TValue

_logger = logger.bind(name=__name__)


class ComposingMiddleware(AbstractMiddleware[TContext, Awaitable[TValue]], Generic[TContext, TValue]):
    """
    Named middleware that contributes a value and merges it with downstream.

    Subclasses bind the flavor through ``identity`` and `combine`, then
    override one of two hooks:

    - `create` to contribute a value synchronously, optionally flagging
      ``cancelled`` to stop the pipeline at this layer;
    - `create_async` to take over the whole continuation-passing step.

    Default ``create_async`` for a context and ``next``:

    1. ``value, cancelled = create(context)``
    2. cancelled: return ``value`` without calling ``next``
    3. ``value`` is the identity: return ``await next(context)``
    4. otherwise await ``next(context)``; if that is the identity return
       ``value``, else ``combine(value, next_value)``
    """

    identity: ClassVar[object]

    def invoke(self, next: Continuation[TContext, Awaitable[TValue]]) -> Continuation[TContext, Awaitable[TValue]]:
        """Return a continuation that delegates each context to `create_async`."""

        def continuation(context: TContext) -> Awaitable[TValue]:
            return self.create_async(context, next)

        return continuation

    async def create_async(self, context: TContext, next: Continuation[TContext, Awaitable[TValue]]) -> TValue:
        """
        Produce the value of this layer and everything below it.

        Args:
            context: The pipeline invocation context, passed through unmodified.
            next: The downstream continuation. Not calling it short-circuits the rest.

        Returns:
            The composed value for this layer onward. Never None.
        """
        check = get_settings().CHECK_CONTRACTS

        value, cancelled = self.create(context)
        if check and value is None:
            raise PipelineContractError(
                f"{self.__class__.__name__}.create returned a None value",
                details={"middleware": self.__class__.__name__},
            )

        if cancelled:
            _logger.trace(f"{self.__class__.__name__} short-circuited the pipeline")
            return value

        if value is self.identity:
            return await next(context)

        next_value = await next(context)
        if check and next_value is None:
            raise PipelineContractError(
                f"Continuation below {self.__class__.__name__} resolved to None",
                details={"middleware": self.__class__.__name__},
            )

        if next_value is self.identity:
            return value
        return self.combine(value, next_value)

    def create(self, context: TContext) -> Union[Creation[TValue], Tuple[TValue, bool]]:
        """
        Contribute this layer's value. Defaults to the identity, which delegates verbatim.

        Returns:
            ``Creation(value, cancelled)`` or any ``(value, cancelled)`` pair.
        """
        return Creation(self.identity, False)

    @staticmethod
    @abstractmethod
    def combine(value: TValue, next_value: TValue) -> TValue:
        """Merge this layer's value with the downstream value; neither is the identity."""
        pass
