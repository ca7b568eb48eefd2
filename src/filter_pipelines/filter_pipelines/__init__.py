# ABOUTME: Filter pipelines package initialization
# ABOUTME: Exposes the onion composer, flavor builders, middleware bases and identity elements

"""
Onion-style middleware composition for predicates and sequence filters.

Middlewares are folded around a terminal handler so the first listed
middleware is entered first. Two flavors build on the generic fold:
predicate pipelines (short-circuit AND of per-context predicates) and
sequence pipelines (left-to-right chain of per-context sequence filters).
Both produce an async factory: ``await pipeline(context)`` yields the
per-request predicate or filter.

The package's loguru records are disabled until `setup_logging` is called.
"""

from loguru import logger

from filter_pipelines.adapters import (
    adapter_for_predicate_component,
    adapter_for_sequence_component,
    adapter_predicate_to_sequence,
)
from filter_pipelines.components import (
    ComposingMiddleware,
    PredicateMiddleware,
    PredicateSequenceMiddleware,
    SequenceMiddleware,
    combine_predicates,
    compose_filters,
)
from filter_pipelines.config import get_settings, setup_logging
from filter_pipelines.exceptions import (
    FilterPipelineException,
    InvalidArgumentError,
    PipelineContractError,
)
from filter_pipelines.interfaces import (
    AbstractMiddleware,
    AbstractPredicateMiddleware,
    AbstractSequenceMiddleware,
    to_delegate,
)
from filter_pipelines.models import (
    NULL_PREDICATE,
    NULL_SEQFILTER,
    Creation,
    is_null_predicate,
    is_null_seqfilter,
    null_predicate,
    null_seqfilter,
    proceed,
    short_circuit,
)
from filter_pipelines.onion import build_onion, from_context_middleware, wrap, wrap_context_middleware
from filter_pipelines.pipelines import build_predicate, build_sequence

__version__ = "0.1.0"

logger.disable("filter_pipelines")

__all__ = [
    "AbstractMiddleware",
    "AbstractPredicateMiddleware",
    "AbstractSequenceMiddleware",
    "ComposingMiddleware",
    "Creation",
    "FilterPipelineException",
    "InvalidArgumentError",
    "NULL_PREDICATE",
    "NULL_SEQFILTER",
    "PipelineContractError",
    "PredicateMiddleware",
    "PredicateSequenceMiddleware",
    "SequenceMiddleware",
    "adapter_for_predicate_component",
    "adapter_for_sequence_component",
    "adapter_predicate_to_sequence",
    "build_onion",
    "build_predicate",
    "build_sequence",
    "combine_predicates",
    "compose_filters",
    "from_context_middleware",
    "get_settings",
    "is_null_predicate",
    "is_null_seqfilter",
    "null_predicate",
    "null_seqfilter",
    "proceed",
    "setup_logging",
    "short_circuit",
    "to_delegate",
    "wrap",
    "wrap_context_middleware",
]
