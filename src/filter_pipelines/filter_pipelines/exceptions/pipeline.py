# ABOUTME: Pipeline-specific exception classes for build and composition errors
# ABOUTME: Separates caller mistakes (missing arguments) from broken middleware contracts

from typing import Any, Dict

from filter_pipelines.exceptions.base import FilterPipelineException


class InvalidArgumentError(FilterPipelineException, ValueError):
    """Exception raised when a required build or conversion input is missing.

    Raised synchronously, before any pipeline is constructed, such as:
    - ``build_onion(None, handler)`` or ``build_onion(middlewares, None)``
    - A ``None`` or non-callable element inside the middleware collection
    - An adapter called without the component it should convert

    ``details["argument"]`` names the offending parameter. Fold failures also
    carry ``details["index"]``, the position of the element in input order.
    """

    def __init__(
        self,
        argument: str,
        message: str | None = None,
        index: int | None = None,
        details: Dict[str, Any] | None = None,
    ):
        merged: Dict[str, Any] = {"argument": argument}
        if index is not None:
            merged["index"] = index
        if details:
            merged.update(details)

        if message is None:
            label = argument if index is None else f"{argument}[{index}]"
            message = f"'{label}' is required"

        self.argument = argument
        self.index = index
        super().__init__(message, code="INVALID_ARGUMENT", details=merged)


class PipelineContractError(FilterPipelineException, AssertionError):
    """Exception raised when user code breaks a composition invariant.

    These are programming errors rather than runtime conditions, such as:
    - A middleware returning ``None`` instead of a continuation
    - ``create`` producing a ``None`` predicate or filter
    - A downstream continuation resolving to ``None``

    The library never recovers from these; fix the offending middleware.
    """

    def __init__(self, message: str, details: Dict[str, Any] | None = None):
        super().__init__(message, code="CONTRACT_VIOLATION", details=details)
