# ABOUTME: Unit tests for AbstractMiddleware and the to_delegate conversion
# ABOUTME: Tests that named middlewares become their bound invoke and bad inputs are rejected

import pytest

from filter_pipelines import AbstractMiddleware, InvalidArgumentError, build_onion, to_delegate


class Doubling(AbstractMiddleware[int, int]):
    def invoke(self, next):
        return lambda ctx: next(ctx) * 2


class DuckTyped:
    def invoke(self, next):
        return lambda ctx: next(ctx) + 1


class TestToDelegate:
    """Test suite for to_delegate."""

    @pytest.mark.unit
    def test_returns_bound_invoke(self):
        """Test the delegate is the middleware's own invoke method."""
        middleware = Doubling()
        delegate = to_delegate(middleware)

        assert delegate == middleware.invoke
        assert delegate(lambda ctx: ctx)(5) == 10

    @pytest.mark.unit
    def test_accepts_objects_with_invoke(self):
        """Test anything exposing invoke(next) converts, not only subclasses."""
        assert to_delegate(DuckTyped())(lambda ctx: ctx)(1) == 2

    @pytest.mark.unit
    def test_delegate_and_named_forms_compose_identically(self):
        """Test a converted middleware behaves the same inside a pipeline."""
        named = build_onion([Doubling(), DuckTyped()], lambda ctx: ctx)
        delegates = build_onion([to_delegate(Doubling()), to_delegate(DuckTyped())], lambda ctx: ctx)

        assert named(3) == delegates(3) == 8

    @pytest.mark.unit
    def test_none_rejected(self):
        """Test a missing middleware raises InvalidArgumentError."""
        with pytest.raises(InvalidArgumentError) as exc_info:
            to_delegate(None)

        assert exc_info.value.argument == "middleware"

    @pytest.mark.unit
    @pytest.mark.parametrize("bad", [42, "invoke", object()])
    def test_object_without_invoke_rejected(self, bad):
        """Test objects lacking a callable invoke are rejected with their type name."""
        with pytest.raises(InvalidArgumentError) as exc_info:
            to_delegate(bad)

        assert exc_info.value.details["type"] == type(bad).__name__

    @pytest.mark.unit
    def test_class_rejected(self):
        """Test a middleware class is not mistaken for an instance."""
        with pytest.raises(InvalidArgumentError) as exc_info:
            to_delegate(Doubling)

        assert exc_info.value.details["type"] == "Doubling"
        assert "pass an instance" in exc_info.value.message


class TestAbstractMiddleware:
    """Test suite for AbstractMiddleware."""

    @pytest.mark.unit
    def test_cannot_instantiate_without_invoke(self):
        """Test subclasses must implement invoke."""

        class Incomplete(AbstractMiddleware):
            pass

        with pytest.raises(TypeError):
            Incomplete()

    @pytest.mark.unit
    def test_repr_names_class(self):
        """Test the default repr is the class name."""
        assert repr(Doubling()) == "Doubling()"
