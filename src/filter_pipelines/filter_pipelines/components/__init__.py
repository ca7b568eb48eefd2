# ABOUTME: Components package with ready-made middleware bases
# ABOUTME: Exports the composing template, flavor bases, combinators and the predicate-to-sequence middleware

from .base import ComposingMiddleware
from .predicate import PredicateMiddleware, combine_predicates
from .sequence import SequenceMiddleware, compose_filters
from .predicate_sequence import PredicateSequenceMiddleware

__all__ = [
    "ComposingMiddleware",
    "PredicateMiddleware",
    "SequenceMiddleware",
    "PredicateSequenceMiddleware",
    "combine_predicates",
    "compose_filters",
]
