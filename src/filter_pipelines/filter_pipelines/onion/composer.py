# ABOUTME: Onion composer folding middlewares around a terminal handler
# ABOUTME: Provides build_onion, wrap, and the context-first middleware adapters

from collections.abc import Iterable
from typing import Any, List, Optional

from loguru import logger

from filter_pipelines.config.settings import get_settings
from filter_pipelines.exceptions import InvalidArgumentError, PipelineContractError
from filter_pipelines.types import (
    ContextMiddlewareFunc,
    Continuation,
    MiddlewareFunc,
    TContext,
    TResult,
)

_logger = logger.bind(name=__name__)


def _as_delegate(middleware: Any, argument: str, index: Optional[int] = None) -> MiddlewareFunc:
    """Accept the delegate form or a named middleware; reject anything else."""
    if middleware is None:
        raise InvalidArgumentError(argument, index=index)

    label = argument if index is None else f"{argument}[{index}]"

    # A class has an unbound invoke and is itself callable; neither is a middleware.
    if isinstance(middleware, type):
        raise InvalidArgumentError(
            argument,
            f"'{label}' is the class {middleware.__name__}, not a middleware instance",
            index=index,
            details={"type": middleware.__name__},
        )

    invoke = getattr(middleware, "invoke", None)
    if callable(invoke):
        return invoke
    if callable(middleware):
        return middleware

    raise InvalidArgumentError(
        argument,
        f"'{label}' is not a middleware: got {type(middleware).__name__}",
        index=index,
        details={"type": type(middleware).__name__},
    )


def _apply(
    delegate: MiddlewareFunc[TContext, TResult],
    continuation: Continuation[TContext, TResult],
    index: Optional[int] = None,
) -> Continuation[TContext, TResult]:
    wrapped = delegate(continuation)
    if get_settings().CHECK_CONTRACTS and not callable(wrapped):
        details = {"returned": type(wrapped).__name__}
        if index is not None:
            details["index"] = index
        raise PipelineContractError(
            f"Middleware {getattr(delegate, '__qualname__', delegate)!r} returned "
            f"{type(wrapped).__name__} instead of a continuation",
            details=details,
        )
    return wrapped


def wrap(continuation: Continuation[TContext, TResult], middleware: Any) -> Continuation[TContext, TResult]:
    """
    Wrap one continuation with one middleware: a single onion step.

    Args:
        continuation: The inner continuation. Required.
        middleware: A delegate ``next -> composed`` or an object with ``invoke(next)``. Required.

    Returns:
        The continuation returned by the middleware.

    Raises:
        InvalidArgumentError: If either argument is missing or ``middleware`` is not a middleware.
        PipelineContractError: If the middleware does not return a continuation.
    """
    if continuation is None:
        raise InvalidArgumentError("continuation")

    return _apply(_as_delegate(middleware, "middleware"), continuation)


def from_context_middleware(
    middleware: ContextMiddlewareFunc[TContext, TResult],
) -> MiddlewareFunc[TContext, TResult]:
    """
    Convert a context-first middleware ``(ctx, next) -> result`` to the delegate form.

    Raises:
        InvalidArgumentError: If ``middleware`` is None or not callable.
    """
    if middleware is None or not callable(middleware):
        raise InvalidArgumentError("middleware")

    def delegate(next: Continuation[TContext, TResult]) -> Continuation[TContext, TResult]:
        def continuation(context: TContext) -> TResult:
            return middleware(context, next)

        return continuation

    return delegate


def wrap_context_middleware(
    continuation: Continuation[TContext, TResult],
    middleware: ContextMiddlewareFunc[TContext, TResult],
) -> Continuation[TContext, TResult]:
    """
    Wrap one continuation with a context-first middleware ``(ctx, next) -> result``.

    Raises:
        InvalidArgumentError: If either argument is missing.
    """
    if continuation is None:
        raise InvalidArgumentError("continuation")

    return wrap(continuation, from_context_middleware(middleware))


def build_onion(middlewares: Iterable[Any], handler: Continuation[TContext, TResult]) -> Continuation[TContext, TResult]:
    """
    Build an onion pipeline with ``handler`` at its core.

    For ``[m1, m2, ..., mn]`` the result is ``m1(m2(...mn(handler)...))``, so
    ``m1`` is entered first at invocation time. Middlewares are consumed
    eagerly; one-shot iterables are fine.

    Args:
        middlewares: Delegates or named middlewares, outermost first. Required.
        handler: The innermost continuation. Required.

    Returns:
        The pipeline entry continuation, or ``handler`` itself when
        ``middlewares`` is empty.

    Raises:
        InvalidArgumentError: If an argument is missing, or an element is None
            or not a middleware (``details["index"]`` gives its position).
        PipelineContractError: If a middleware does not return a continuation.
    """
    if middlewares is None:
        raise InvalidArgumentError("middlewares")
    if handler is None:
        raise InvalidArgumentError("handler")

    layers: List[Any] = list(middlewares)
    if not layers:
        _logger.debug("No middleware supplied, pipeline is the handler itself")
        return handler

    _logger.debug(f"Building onion pipeline with {len(layers)} middleware around {handler!r}")

    pipeline = handler
    for index in range(len(layers) - 1, -1, -1):
        delegate = _as_delegate(layers[index], "middlewares", index)
        pipeline = _apply(delegate, pipeline, index)

    return pipeline
