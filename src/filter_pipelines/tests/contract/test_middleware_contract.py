# ABOUTME: Contract tests for AbstractMiddleware and the flavor-specific interfaces
# ABOUTME: Verifies every shipped middleware base honors the invoke(next) contract

from typing import List, Type

import pytest

from filter_pipelines import (
    NULL_PREDICATE,
    NULL_SEQFILTER,
    AbstractMiddleware,
    AbstractPredicateMiddleware,
    AbstractSequenceMiddleware,
    PredicateMiddleware,
    PredicateSequenceMiddleware,
    SequenceMiddleware,
    to_delegate,
)
from tests.contract.base_contract_test import ContractTestBase


class PlainPredicateMiddleware(PredicateMiddleware[object, object]):
    pass


class PlainSequenceMiddleware(SequenceMiddleware[object, object]):
    pass


async def _always(context):
    return NULL_PREDICATE


class TestMiddlewareContract(ContractTestBase[AbstractMiddleware]):
    """
    Contract tests for AbstractMiddleware.

    Every implementation must:
    - be usable through to_delegate
    - return a callable continuation from invoke
    - pass the context it receives to next unmodified
    """

    @property
    def interface_class(self) -> Type[AbstractMiddleware]:
        return AbstractMiddleware

    @property
    def implementations(self) -> List[Type[AbstractMiddleware]]:
        return [PlainPredicateMiddleware, PlainSequenceMiddleware, PredicateSequenceMiddleware]

    def create_instance(self, impl_class):
        if impl_class is PredicateSequenceMiddleware:
            return impl_class(_always)
        return impl_class()

    @pytest.mark.contract
    def test_to_delegate_returns_bound_invoke(self):
        """Verify the delegate form of each implementation is its bound invoke."""
        for middleware in self.instances():
            assert to_delegate(middleware) == middleware.invoke

    @pytest.mark.contract
    def test_invoke_returns_continuation(self):
        """Verify invoke wraps next into a callable."""
        for middleware in self.instances():
            assert callable(middleware.invoke(_always))

    @pytest.mark.contract
    @pytest.mark.asyncio
    async def test_context_reaches_next_unmodified(self):
        """Verify the default behavior forwards the exact context to next."""
        identities = {
            PlainPredicateMiddleware: NULL_PREDICATE,
            PlainSequenceMiddleware: NULL_SEQFILTER,
            PredicateSequenceMiddleware: NULL_SEQFILTER,
        }

        for impl_class in self.implementations:
            middleware = self.create_instance(impl_class)
            context = object()
            seen = []

            async def next(ctx, identity=identities[impl_class]):
                seen.append(ctx)
                return identity

            result = await middleware.invoke(next)(context)

            assert seen == [context]
            assert result is identities[impl_class]

    @pytest.mark.contract
    def test_string_representation(self):
        """Verify repr names the implementation."""
        for middleware in self.instances():
            assert middleware.__class__.__name__ in repr(middleware)


class TestPredicateMiddlewareContract(ContractTestBase[AbstractPredicateMiddleware]):
    """Contract tests for AbstractPredicateMiddleware."""

    @property
    def interface_class(self) -> Type[AbstractPredicateMiddleware]:
        return AbstractPredicateMiddleware

    @property
    def implementations(self) -> List[Type[AbstractPredicateMiddleware]]:
        return [PlainPredicateMiddleware]


class TestSequenceMiddlewareContract(ContractTestBase[AbstractSequenceMiddleware]):
    """Contract tests for AbstractSequenceMiddleware."""

    @property
    def interface_class(self) -> Type[AbstractSequenceMiddleware]:
        return AbstractSequenceMiddleware

    @property
    def implementations(self) -> List[Type[AbstractSequenceMiddleware]]:
        return [PlainSequenceMiddleware, PredicateSequenceMiddleware]

    def create_instance(self, impl_class):
        if impl_class is PredicateSequenceMiddleware:
            return impl_class(_always)
        return impl_class()
