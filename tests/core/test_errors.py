"""Tests for funcspec.core.errors module."""

import pytest

from funcspec.core.errors import (
    ArityError,
    ConfigError,
    ErrorCategory,
    ErrorContext,
    FuncSpecError,
    InvalidArgumentError,
    InvalidLiteralError,
    InvalidPredicateError,
    PredicateRejectedDefaultError,
    ShapeError,
    SpecConstructionError,
)


class TestErrorContext:
    """Test ErrorContext dataclass."""

    def test_create_empty_context(self):
        ctx = ErrorContext()
        assert ctx.function is None
        assert ctx.index is None
        assert ctx.metadata == {}

    def test_to_dict_includes_set_fields(self):
        """to_dict includes only non-None fields, index 0 included."""
        ctx = ErrorContext(function="add", index=0, metadata={"key": "value"})
        d = ctx.to_dict()
        assert d == {"function": "add", "index": 0, "key": "value"}


class TestFuncSpecError:
    def test_default_category_internal(self):
        error = FuncSpecError("boom")
        assert error.category == ErrorCategory.INTERNAL
        assert error.message == "boom"

    def test_cause_is_chained(self):
        cause = ValueError("root")
        error = FuncSpecError("wrapped", cause=cause)
        assert error.__cause__ is cause
        assert error.to_dict()["cause"] == "root"

    def test_with_context_known_and_extra_keys(self):
        error = ShapeError("bad").with_context(function="add", received=4)
        assert error.context.function == "add"
        assert error.context.metadata["received"] == 4

    def test_to_dict(self):
        d = ArityError("too many").with_context(function="f").to_dict()
        assert d["error_type"] == "ArityError"
        assert d["category"] == "SPEC"
        assert d["context"] == {"function": "f"}

    def test_repr(self):
        assert repr(ShapeError("bad")) == "ShapeError('bad', category=SPEC)"


class TestConstructionErrors:
    def test_invalid_literal_message_and_index(self):
        error = InvalidLiteralError()
        assert str(error) == "validator() expects non-null type argument at index 0"
        assert error.index == 0
        assert isinstance(error, ValueError)
        assert isinstance(error, SpecConstructionError)

    def test_invalid_predicate(self):
        error = InvalidPredicateError()
        assert str(error) == "validator() expects function type argument at index 1"
        assert isinstance(error, TypeError)

    def test_predicate_rejected_default(self):
        error = PredicateRejectedDefaultError()
        assert "returns {boolean} true" in str(error)
        assert error.category == ErrorCategory.SPEC


class TestShapeErrors:
    @pytest.mark.parametrize("cls", [ArityError, ShapeError])
    def test_are_type_errors(self, cls):
        with pytest.raises(TypeError):
            raise cls("bad")


class TestInvalidArgumentError:
    def test_message_and_fields(self):
        error = InvalidArgumentError("add", 1, "number", "string")
        assert str(error) == "add expected argument type number at index 1, received type string"
        assert error.function == "add"
        assert error.index == 1
        assert error.expected_type == "number"
        assert error.actual_type == "string"
        assert error.category == ErrorCategory.ARGUMENT

    def test_context_populated(self):
        error = InvalidArgumentError("add", 0, "number", "null")
        assert error.to_dict()["context"] == {
            "function": "add",
            "index": 0,
            "expected_type": "number",
            "actual_type": "null",
        }


class TestConfigError:
    def test_message(self):
        error = ConfigError("coercion", "sometimes")
        assert error.key == "coercion"
        assert "sometimes" in str(error)
        assert error.category == ErrorCategory.CONFIG
