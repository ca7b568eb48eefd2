# ABOUTME: Pipelines package with the flavor-specific builders
# ABOUTME: Exports build_predicate and build_sequence

from .predicate import build_predicate
from .sequence import build_sequence

__all__ = ["build_predicate", "build_sequence"]
