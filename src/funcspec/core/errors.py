"""
Structured error types for funcspec.

Two failure tiers exist.  Construction-time failures (a malformed validator,
a malformed ``wrap`` call) are programmer errors and surface immediately.
Per-argument outcomes are never errors by default: mismatched or invalid
arguments are replaced by the position's default.  Only the opt-in strict
mode turns them into ``InvalidArgumentError``.

Manifesto:
    - **Typed Error Hierarchy:** one class per failure, grouped by tier
    - **Rich Context:** errors carry function name, index and type tags
    - **Builtin compatible:** shape errors are ``TypeError``, bad literals
      are ``ValueError``, so callers can catch either
    - **Error Chaining:** a predicate that raised is kept as ``cause``

Architecture:
    ::

        ┌──────────────────────────────────────────────────────────────┐
        │                       FuncSpecError                           │
        │               (category, context, cause)                      │
        ├──────────────────────────────────────────────────────────────┤
        │                                                               │
        │  SpecConstructionError          SpecShapeError                │
        │  (SPEC)                         (SPEC, TypeError)             │
        │       │                              │                        │
        │  InvalidLiteralError            ArityError                    │
        │  InvalidPredicateError          ShapeError                    │
        │  PredicateRejectedDefaultError                                │
        │                                                               │
        │  InvalidArgumentError           ConfigError                   │
        │  (ARGUMENT, strict mode only)   (CONFIG)                      │
        └──────────────────────────────────────────────────────────────┘

Examples:
    >>> error = InvalidArgumentError("add", 0, "number", "string")
    >>> error.context.index
    0
    >>> error.to_dict()["category"]
    'ARGUMENT'

Tags:
    error-handling, exception-hierarchy, error-context, funcspec

Doc-Types:
    - API Reference
    - Error Handling Guide
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class ErrorCategory(str, Enum):
    """
    Error categories for classification and reporting.

    Attributes:
        SPEC: Malformed validator or wrap call (programmer error)
        ARGUMENT: Rejected call-time argument (strict mode)
        CONFIG: Invalid settings
        INTERNAL: Bugs, unexpected state
    """

    SPEC = "SPEC"
    ARGUMENT = "ARGUMENT"
    CONFIG = "CONFIG"
    INTERNAL = "INTERNAL"


@dataclass
class ErrorContext:
    """
    Structured metadata attached to an error.

    Only the fields relevant to a given failure are set; ``to_dict()``
    drops the rest.

    Attributes:
        function: Name of the wrapped function
        index: Argument position (or validator() argument index)
        expected_type: Expected type tag
        actual_type: Type tag actually received
        metadata: Additional key-value pairs
    """

    function: str | None = None
    index: int | None = None
    expected_type: str | None = None
    actual_type: str | None = None

    metadata: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for logging."""
        result = {}
        for key in ["function", "index", "expected_type", "actual_type"]:
            value = getattr(self, key)
            if value is not None:
                result[key] = value
        if self.metadata:
            result.update(self.metadata)
        return result


class FuncSpecError(Exception):
    """
    Base exception for all funcspec errors.

    Subclasses set ``default_category``; every instance carries an
    ``ErrorContext`` and an optional chained ``cause``.
    """

    default_category: ErrorCategory = ErrorCategory.INTERNAL

    def __init__(
        self,
        message: str,
        *,
        category: ErrorCategory | None = None,
        context: ErrorContext | None = None,
        cause: Exception | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.category = category or self.default_category
        self.context = context or ErrorContext()
        self.cause = cause

        if cause is not None:
            self.__cause__ = cause

    def with_context(self, **kwargs: Any) -> FuncSpecError:
        """
        Add context to this error (fluent API).

        Usage:
            raise ShapeError("bad spec").with_context(function="add")
        """
        for key, value in kwargs.items():
            if key != "metadata" and hasattr(self.context, key):
                setattr(self.context, key, value)
            else:
                self.context.metadata[key] = value
        return self

    def to_dict(self) -> dict[str, Any]:
        """Convert error to dictionary for logging/serialization."""
        result = {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "category": self.category.value,
        }
        context_dict = self.context.to_dict()
        if context_dict:
            result["context"] = context_dict
        if self.cause is not None:
            result["cause"] = str(self.cause)
        return result

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r}, category={self.category.value})"


# =============================================================================
# CONSTRUCTION ERRORS (validator())
# =============================================================================


class SpecConstructionError(FuncSpecError):
    """A validator could not be built from the given literal and predicate."""

    default_category = ErrorCategory.SPEC

    def __init__(self, message: str, *, index: int | None = None, **kwargs: Any):
        super().__init__(message, **kwargs)
        self.index = index
        if index is not None:
            self.context.index = index


class InvalidLiteralError(SpecConstructionError, ValueError):
    """The default literal is absent or ``None``."""

    def __init__(self, message: str | None = None, **kwargs: Any):
        super().__init__(
            message or "validator() expects non-null type argument at index 0",
            index=0,
            **kwargs,
        )


class InvalidPredicateError(SpecConstructionError, TypeError):
    """The predicate is not callable."""

    def __init__(self, message: str | None = None, **kwargs: Any):
        super().__init__(
            message or "validator() expects function type argument at index 1",
            index=1,
            **kwargs,
        )


class PredicateRejectedDefaultError(SpecConstructionError, ValueError):
    """The predicate did not return ``True`` for its own default literal."""

    def __init__(self, message: str | None = None, **kwargs: Any):
        super().__init__(
            message or "validator requires that validationFn(literal) returns {boolean} true",
            index=1,
            **kwargs,
        )


# =============================================================================
# SHAPE ERRORS (wrap() / spec())
# =============================================================================


class SpecShapeError(FuncSpecError, TypeError):
    """The arguments given to ``wrap``/``spec`` are malformed."""

    default_category = ErrorCategory.SPEC


class ArityError(SpecShapeError):
    """Wrong number of spec arguments, or more literals than parameters."""

    pass


class ShapeError(SpecShapeError):
    """Spec arguments have the wrong types."""

    pass


# =============================================================================
# ARGUMENT ERRORS (strict mode)
# =============================================================================


class InvalidArgumentError(FuncSpecError, TypeError):
    """
    A call-time argument was rejected in strict mode.

    Raised instead of silent substitution when a wrapped function was built
    with ``strict=True``.
    """

    default_category = ErrorCategory.ARGUMENT

    def __init__(
        self,
        function: str,
        index: int,
        expected_type: str,
        actual_type: str,
        message: str | None = None,
        **kwargs: Any,
    ):
        msg = message or (
            f"{function} expected argument type {expected_type} at index {index}, "
            f"received type {actual_type}"
        )
        super().__init__(msg, **kwargs)
        self.function = function
        self.index = index
        self.expected_type = str(expected_type)
        self.actual_type = str(actual_type)
        self.context.function = function
        self.context.index = index
        self.context.expected_type = self.expected_type
        self.context.actual_type = self.actual_type


# =============================================================================
# CONFIGURATION ERRORS
# =============================================================================


class ConfigError(FuncSpecError):
    """Configuration value is invalid."""

    default_category = ErrorCategory.CONFIG

    def __init__(self, key: str, value: Any, message: str | None = None):
        self.key = key
        self.value = value
        super().__init__(message or f"Invalid configuration for {key}: {value!r}")


__all__ = [
    "ErrorCategory",
    "ErrorContext",
    "FuncSpecError",
    "SpecConstructionError",
    "InvalidLiteralError",
    "InvalidPredicateError",
    "PredicateRejectedDefaultError",
    "SpecShapeError",
    "ArityError",
    "ShapeError",
    "InvalidArgumentError",
    "ConfigError",
]
