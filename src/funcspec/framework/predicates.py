"""
Built-in predicates for validators.

Each predicate returns a plain ``bool`` and never raises for values of the
wrong type, so they are safe to pair with any default literal.

Examples:
    >>> natural_number = make_validator(0, non_negative_int)
    >>> class Level(str, Enum):
    ...     DEBUG = "debug"
    ...     INFO = "info"
    >>> level = make_validator("info", enum_value(Level))
"""

from __future__ import annotations

import re
from collections.abc import Callable
from datetime import date
from enum import Enum
from typing import Any

from funcspec.core.validator import Validator, make_validator


def positive_int(value: Any) -> bool:
    """Validate that a value is a positive integer (bool excluded)."""
    return isinstance(value, int) and not isinstance(value, bool) and value > 0


def non_negative_int(value: Any) -> bool:
    """Validate that a value is a non-negative integer (bool excluded)."""
    return isinstance(value, int) and not isinstance(value, bool) and value >= 0


def non_empty_str(value: Any) -> bool:
    """Validate that a value is a string with non-whitespace content."""
    return isinstance(value, str) and bool(value.strip())


def date_format(value: Any) -> bool:
    """Validate ISO date format (YYYY-MM-DD) or a ``date`` instance."""
    if isinstance(value, date):
        return True

    try:
        date.fromisoformat(value)
        return True
    except (ValueError, TypeError):
        return False


def enum_value(enum_class: type[Enum]) -> Callable[[Any], bool]:
    """Create a validator for enum values."""

    def validator(value: Any) -> bool:
        try:
            enum_class(value)
            return True
        except (ValueError, KeyError):
            return False

    validator.__name__ = f"enum_value_{enum_class.__name__}"
    return validator


def in_range(low: float, high: float) -> Callable[[Any], bool]:
    """Create a validator accepting numbers within ``[low, high]``."""

    def validator(value: Any) -> bool:
        if isinstance(value, bool):
            return False
        try:
            return low <= value <= high
        except TypeError:
            return False

    validator.__name__ = f"in_range_{low}_{high}"
    return validator


def matches(pattern: str | re.Pattern[str]) -> Callable[[Any], bool]:
    """Create a validator accepting strings that fully match ``pattern``."""
    compiled = re.compile(pattern)

    def validator(value: Any) -> bool:
        return isinstance(value, str) and compiled.fullmatch(value) is not None

    validator.__name__ = f"matches_{compiled.pattern}"
    return validator


def natural(default: int = 0) -> Validator:
    """Validator for natural numbers (0, 1, 2, ...) defaulting to ``default``."""
    return make_validator(default, non_negative_int)


__all__ = [
    "date_format",
    "enum_value",
    "in_range",
    "matches",
    "natural",
    "non_empty_str",
    "non_negative_int",
    "positive_int",
]
