# ABOUTME: Common type definitions shared by the composer, components and pipelines
# ABOUTME: Provides type variables and callable aliases for the onion composition algebra

from collections.abc import Awaitable, Callable, Iterable
from typing import TypeVar

TContext = TypeVar("TContext")
TResult = TypeVar("TResult")
TEntity = TypeVar("TEntity")
TValue = TypeVar("TValue")

# A continuation is one layer of the onion seen from the outside: ctx -> result.
Continuation = Callable[[TContext], TResult]

# Delegate form of a middleware: given the downstream continuation, return a new one.
MiddlewareFunc = Callable[[Continuation[TContext, TResult]], Continuation[TContext, TResult]]

# Context-first form used by most Python middleware stacks: (ctx, next) -> result.
ContextMiddlewareFunc = Callable[[TContext, Continuation[TContext, TResult]], TResult]

Predicate = Callable[[TEntity], bool]
SequenceFilter = Callable[[Iterable[TEntity]], Iterable[TEntity]]

PredicateFactory = Callable[[TContext], Awaitable[Predicate[TEntity]]]
SequenceFilterFactory = Callable[[TContext], Awaitable[SequenceFilter[TEntity]]]

PredicateMiddlewareFunc = MiddlewareFunc[TContext, Awaitable[Predicate[TEntity]]]
SequenceMiddlewareFunc = MiddlewareFunc[TContext, Awaitable[SequenceFilter[TEntity]]]
