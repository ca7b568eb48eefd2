# ABOUTME: Creation model returned by the synchronous create() hook of composing middlewares
# ABOUTME: Pairs the layer's contribution with the short-circuit flag

from typing import Generic, NamedTuple, TypeVar

T = TypeVar("T")


class Creation(NamedTuple, Generic[T]):
    """
    Value contributed by one middleware layer.

    Attributes:
        value: The layer's predicate or sequence filter. Never None.
        cancelled: When True the layer is terminal: downstream middlewares and
            the handler are skipped and ``value`` is the pipeline result.
    """

    value: T
    cancelled: bool = False


def short_circuit(value: T) -> Creation[T]:
    """Contribute ``value`` and stop the pipeline here."""
    return Creation(value, True)


def proceed(value: T) -> Creation[T]:
    """Contribute ``value`` and let downstream layers run."""
    return Creation(value, False)
