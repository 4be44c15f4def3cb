"""
Validators: a default literal bundled with a predicate.

A ``Validator`` occupies one position in a wrapped function's spec.  Its
default fixes the expected type tag and fills in missing or rejected
arguments; its predicate decides whether a correctly typed argument is
acceptable.  All invariants are checked once, at construction.

Examples:
    >>> natural = make_validator(0, lambda n: n >= 0 and int(n) == n)
    >>> natural.expected_type
    <TypeTag.NUMBER: 'number'>
    >>> natural(4), natural(-1)
    (True, False)

Tags:
    funcspec, core, validator

Doc-Types:
    - API Reference
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from funcspec.core.errors import (
    InvalidLiteralError,
    InvalidPredicateError,
    PredicateRejectedDefaultError,
)
from funcspec.core.types import TypeTag, classify


Predicate = Callable[[Any], Any]


@dataclass(frozen=True, slots=True)
class Validator:
    """
    Immutable (predicate, expected_type, default) triple.

    Build with ``make_validator``; the constructor itself does not check
    anything.  Calling a validator calls its predicate.
    """

    predicate: Predicate
    expected_type: TypeTag
    default: Any

    is_validator = True

    @property
    def literal(self) -> Any:
        """Alias of ``default``."""
        return self.default

    def __call__(self, value: Any) -> Any:
        return self.predicate(value)

    def __repr__(self) -> str:
        name = getattr(self.predicate, "__name__", type(self.predicate).__name__)
        return f"Validator({name}, expected_type={self.expected_type.value}, default={self.default!r})"


def _always_valid(value: Any) -> bool:
    return True


def make_validator(default: Any, predicate: Predicate) -> Validator:
    """
    Build a validator from a default literal and a predicate.

    Args:
        default: Default value; also fixes the expected type tag
        predicate: Callable returning ``True`` for acceptable values

    Returns:
        Validator with ``expected_type == classify(default)``

    Raises:
        InvalidLiteralError: ``default`` is ``ABSENT`` or ``None``
        InvalidPredicateError: ``predicate`` is not callable
        PredicateRejectedDefaultError: ``predicate(default)`` is not ``True``
    """
    expected_type = classify(default)
    if expected_type in (TypeTag.UNDEFINED, TypeTag.NULL):
        raise InvalidLiteralError()

    if not callable(predicate):
        raise InvalidPredicateError()

    try:
        accepted = predicate(default)
    except Exception as e:
        raise PredicateRejectedDefaultError(cause=e) from e

    if accepted is not True:
        raise PredicateRejectedDefaultError()

    return Validator(predicate=predicate, expected_type=expected_type, default=default)


# Short alias.
validator = make_validator


def literal_validator(literal: Any) -> Validator:
    """
    Build the ephemeral validator a bare literal stands for.

    The predicate accepts everything; only the type tag is checked.  Not
    subject to ``make_validator``'s invariants, so ``None`` is allowed.
    """
    return Validator(predicate=_always_valid, expected_type=classify(literal), default=literal)


def is_validator(obj: Any) -> bool:
    """Check if ``obj`` is a ``Validator``."""
    return isinstance(obj, Validator)


__all__ = [
    "Predicate",
    "Validator",
    "is_validator",
    "literal_validator",
    "make_validator",
    "validator",
]
