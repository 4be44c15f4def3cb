"""
Coercion policies applied when an argument's type does not match its spec.

``REPLACE`` is the reference behaviour: the mismatched argument is dropped
and the position's default literal is used.  ``CONVERT`` first tries a small
table of lossless conversions (``"4"`` -> ``4``, ``"true"`` -> ``True``,
``"2024-01-31"`` -> ``date``); the converted value must still pass the
position's predicate, and anything that cannot be converted falls back to
the default exactly like ``REPLACE``.

Examples:
    >>> convert("42", TypeTag.NUMBER)
    (True, 42)
    >>> convert("abc", TypeTag.NUMBER)
    (False, None)
"""

from __future__ import annotations

import math
from collections.abc import Callable
from datetime import date, datetime
from enum import Enum
from typing import Any

from funcspec.core.types import TypeTag, classify


class CoercionPolicy(str, Enum):
    """What to do with an argument whose type tag does not match its spec."""

    REPLACE = "replace"
    CONVERT = "convert"


_TRUE_STRINGS = frozenset({"true", "1", "yes", "on"})
_FALSE_STRINGS = frozenset({"false", "0", "no", "off"})

# Sentinel for "no conversion possible"; None is a legitimate converted value elsewhere.
_FAILED = object()


def _string_to_number(value: str) -> Any:
    text = value.strip()
    if not text:
        return _FAILED
    try:
        return int(text)
    except ValueError:
        pass
    try:
        number = float(text)
    except ValueError:
        return _FAILED
    if math.isnan(number) or math.isinf(number):
        return _FAILED
    return number


def _number_to_string(value: Any) -> Any:
    return str(value)


def _string_to_boolean(value: str) -> Any:
    text = value.strip().lower()
    if text in _TRUE_STRINGS:
        return True
    if text in _FALSE_STRINGS:
        return False
    return _FAILED


def _number_to_boolean(value: Any) -> Any:
    if value == 0:
        return False
    if value == 1:
        return True
    return _FAILED


def _string_to_date(value: str) -> Any:
    text = value.strip()
    try:
        if "T" in text or " " in text:
            return datetime.fromisoformat(text)
        return date.fromisoformat(text)
    except ValueError:
        return _FAILED


def _set_to_array(value: Any) -> Any:
    try:
        return sorted(value)
    except TypeError:
        return list(value)


# (actual, expected) -> converter
_CONVERTERS: dict[tuple[TypeTag, TypeTag], Callable[[Any], Any]] = {
    (TypeTag.STRING, TypeTag.NUMBER): _string_to_number,
    (TypeTag.NUMBER, TypeTag.STRING): _number_to_string,
    (TypeTag.STRING, TypeTag.BOOLEAN): _string_to_boolean,
    (TypeTag.NUMBER, TypeTag.BOOLEAN): _number_to_boolean,
    (TypeTag.STRING, TypeTag.DATE): _string_to_date,
    (TypeTag.SET, TypeTag.ARRAY): _set_to_array,
}


def convert(value: Any, target: TypeTag) -> tuple[bool, Any]:
    """
    Try to convert ``value`` so that it classifies as ``target``.

    Returns:
        (converted, new_value); ``new_value`` is ``None`` when not converted.
    """
    converter = _CONVERTERS.get((classify(value), TypeTag(target)))
    if converter is None:
        return False, None
    result = converter(value)
    if result is _FAILED:
        return False, None
    return True, result


def supported_conversions() -> list[tuple[TypeTag, TypeTag]]:
    """List the (actual, expected) type pairs ``convert`` knows about."""
    return list(_CONVERTERS)


__all__ = ["CoercionPolicy", "convert", "supported_conversions"]
