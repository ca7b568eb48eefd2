# ABOUTME: Models package exports
# ABOUTME: Exports identity elements and the Creation tagged return

from .creation import Creation, short_circuit, proceed
from .identity import (
    NULL_PREDICATE,
    NULL_SEQFILTER,
    null_predicate,
    null_seqfilter,
    is_null_predicate,
    is_null_seqfilter,
)

__all__ = [
    "Creation",
    "short_circuit",
    "proceed",
    "NULL_PREDICATE",
    "NULL_SEQFILTER",
    "null_predicate",
    "null_seqfilter",
    "is_null_predicate",
    "is_null_seqfilter",
]
