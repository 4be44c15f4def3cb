"""
Runtime value classification.

Every decision the resolution pipeline makes starts by asking "what kind of
value is this?".  ``classify`` is the single translation point from an
arbitrary Python object into a ``TypeTag``; everything after this boundary
compares tags, never raw values.

Manifesto:
    - **Total:** classification never raises, whatever the value
    - **Intrinsic:** tags follow the runtime category, not the value's shape
    - **Comparable:** tags are string enums, ``TypeTag.NUMBER == "number"``

Features:
    - **TypeTag enum:** closed vocabulary of value categories
    - **ABSENT sentinel:** "no value supplied", distinct from ``None``
    - **classify():** value -> TypeTag

Examples:
    >>> classify(3)
    <TypeTag.NUMBER: 'number'>
    >>> classify(None) is TypeTag.NULL
    True
    >>> classify(ABSENT) is TypeTag.UNDEFINED
    True

Tags:
    funcspec, core, types, classification

Doc-Types:
    - API Reference
"""

from __future__ import annotations

import numbers
import re
from datetime import date
from enum import Enum
from typing import Any, Final


class _AbsentType:
    """Sentinel type for "no value supplied".

    There is exactly one instance, ``ABSENT``.  It is falsy and survives
    copying as itself.
    """

    _instance: _AbsentType | None = None

    def __new__(cls) -> _AbsentType:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "ABSENT"

    def __bool__(self) -> bool:
        return False

    def __copy__(self) -> _AbsentType:
        return self

    def __deepcopy__(self, memo: dict[int, Any]) -> _AbsentType:
        return self

    def __reduce__(self) -> str:
        return "ABSENT"


ABSENT: Final = _AbsentType()


class TypeTag(str, Enum):
    """
    Canonical category of a runtime value.

    Values are lower-case strings so tags render naturally in doc strings
    and error messages.

    Attributes:
        UNDEFINED: No value supplied (``ABSENT``)
        NULL: ``None``
        BOOLEAN: ``True`` / ``False``
        NUMBER: Any ``numbers.Number`` except bool
        STRING: ``str``
        BYTES: ``bytes``, ``bytearray``, ``memoryview``
        FUNCTION: Any callable not covered above (functions, classes, validators)
        ARRAY: ``list`` and ``tuple``
        SET: ``set`` and ``frozenset``
        OBJECT: Everything else, including ``dict``
        DATE: ``datetime.date`` and ``datetime.datetime``
        REGEXP: Compiled ``re.Pattern``
        ERROR: Exception instances
    """

    UNDEFINED = "undefined"
    NULL = "null"
    BOOLEAN = "boolean"
    NUMBER = "number"
    STRING = "string"
    BYTES = "bytes"
    FUNCTION = "function"
    ARRAY = "array"
    SET = "set"
    OBJECT = "object"
    DATE = "date"
    REGEXP = "regexp"
    ERROR = "error"

    def __str__(self) -> str:
        return self.value


def classify(value: Any) -> TypeTag:
    """Return the ``TypeTag`` describing ``value``'s runtime category."""
    # identity and isinstance checks only; never touch the value's own methods
    if value is ABSENT:
        return TypeTag.UNDEFINED
    if value is None:
        return TypeTag.NULL
    if isinstance(value, bool):
        return TypeTag.BOOLEAN
    if isinstance(value, numbers.Number):
        return TypeTag.NUMBER
    if isinstance(value, str):
        return TypeTag.STRING
    if isinstance(value, (bytes, bytearray, memoryview)):
        return TypeTag.BYTES
    if isinstance(value, date):
        return TypeTag.DATE
    if isinstance(value, re.Pattern):
        return TypeTag.REGEXP
    if isinstance(value, BaseException):
        return TypeTag.ERROR
    if isinstance(value, (list, tuple)):
        return TypeTag.ARRAY
    if isinstance(value, (set, frozenset)):
        return TypeTag.SET
    if callable(value):
        return TypeTag.FUNCTION
    return TypeTag.OBJECT


def is_absent(value: Any) -> bool:
    """Check if ``value`` is the ``ABSENT`` sentinel."""
    return value is ABSENT


__all__ = [
    "ABSENT",
    "TypeTag",
    "classify",
    "is_absent",
]
