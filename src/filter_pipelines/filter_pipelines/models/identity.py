# ABOUTME: Canonical identity elements for the predicate and sequence flavors
# ABOUTME: Identity is detected by reference, so each element exists exactly once per process

from collections.abc import Iterable
from typing import Any, Optional, Type

from filter_pipelines.types import Predicate, SequenceFilter


def _always_true(entity: Any) -> bool:
    return True


def _pass_through(source: Iterable[Any]) -> Iterable[Any]:
    return source


NULL_PREDICATE: Predicate[Any] = _always_true
"""Predicate that accepts every entity. The "do nothing" predicate layer."""

NULL_SEQFILTER: SequenceFilter[Any] = _pass_through
"""Sequence filter that returns its source unchanged. The "do nothing" filter layer."""


def null_predicate(entity_type: Optional[Type[Any]] = None) -> Predicate[Any]:
    """
    Return the canonical always-true predicate.

    Type parameters are erased at runtime, so the same object is returned for
    every ``entity_type``; the argument only documents intent at call sites.
    """
    return NULL_PREDICATE


def null_seqfilter(entity_type: Optional[Type[Any]] = None) -> SequenceFilter[Any]:
    """Return the canonical pass-through sequence filter. See `null_predicate`."""
    return NULL_SEQFILTER


def is_null_predicate(predicate: Any) -> bool:
    """True only for the canonical instance, never for an equivalent function."""
    return predicate is NULL_PREDICATE


def is_null_seqfilter(sequence_filter: Any) -> bool:
    """True only for the canonical instance, never for an equivalent function."""
    return sequence_filter is NULL_SEQFILTER
