# ABOUTME: Abstract middleware interface defining the named middleware contract
# ABOUTME: Named middlewares expose invoke(next) and convert to the delegate form with to_delegate

from abc import ABC, abstractmethod
from typing import Any, Generic

from filter_pipelines.exceptions import InvalidArgumentError
from filter_pipelines.types import Continuation, MiddlewareFunc, TContext, TResult


class AbstractMiddleware(ABC, Generic[TContext, TResult]):
    """
    Abstract base class for named middleware implementations.

    A named middleware is interchangeable with the delegate form
    ``next -> composed``: `to_delegate` turns one into the other, and the
    composer accepts either.
    """

    @abstractmethod
    def invoke(self, next: Continuation[TContext, TResult]) -> Continuation[TContext, TResult]:
        """
        Wrap the downstream continuation with this middleware's behavior.

        Args:
            next: The rest of the pipeline. Never None. Not calling it
                short-circuits every downstream layer.

        Returns:
            A new continuation embedding this middleware. Never None.
        """
        pass

    def __repr__(self) -> str:
        """String representation of middleware."""
        return f"{self.__class__.__name__}()"


def to_delegate(middleware: Any) -> MiddlewareFunc[TContext, TResult]:
    """
    Convert a named middleware into its delegate form.

    Args:
        middleware: An `AbstractMiddleware`, or any object with a callable
            ``invoke(next)``.

    Returns:
        The bound ``invoke`` method.

    Raises:
        InvalidArgumentError: If ``middleware`` is None, a class rather than an
            instance, or has no callable ``invoke``.
    """
    if middleware is None:
        raise InvalidArgumentError("middleware")

    if isinstance(middleware, type):
        raise InvalidArgumentError(
            "middleware",
            f"{middleware.__name__} is a class; pass an instance",
            details={"type": middleware.__name__},
        )

    invoke = getattr(middleware, "invoke", None)
    if not callable(invoke):
        raise InvalidArgumentError(
            "middleware",
            f"{type(middleware).__name__} does not define a callable invoke(next)",
            details={"type": type(middleware).__name__},
        )
    return invoke
