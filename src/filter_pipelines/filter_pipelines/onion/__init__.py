# ABOUTME: Onion composition package
# ABOUTME: Exports the generic fold and single-step wrap helpers

from .composer import build_onion, wrap, wrap_context_middleware, from_context_middleware

__all__ = ["build_onion", "wrap", "wrap_context_middleware", "from_context_middleware"]
