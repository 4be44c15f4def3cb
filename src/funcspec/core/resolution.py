"""
Per-argument resolution pipeline.

Given one spec entry and the argument supplied for that position, decide
the value the wrapped function receives.

Flow::

    spec absent?  ──yes──▶ return arg unchanged
        │no
    arg absent?   ──yes──▶ return default
        │no
    type-check ──match──▶ validate ──ok──▶ return arg
        │mismatch            │rejected
        ▼                    ▼
     coerce ──converted──▶ validate      return default
        │not converted
        ▼
     return default

In strict mode the two "return default" exits for a present argument raise
``InvalidArgumentError`` instead.  The default mode never raises, whatever
the input; a predicate that raises is treated as a rejection.

Examples:
    >>> natural = make_validator(0, lambda n: n >= 0 and int(n) == n)
    >>> resolve("add", natural, 4, 0)
    4
    >>> resolve("add", natural, -1, 0)
    0
    >>> resolve("add", natural, "x", 0)
    0

Tags:
    funcspec, core, resolution, validation, coercion

Doc-Types:
    - API Reference
"""

from __future__ import annotations

from typing import Any

from funcspec.core.coercion import CoercionPolicy, convert
from funcspec.core.errors import InvalidArgumentError
from funcspec.core.logging import get_logger
from funcspec.core.types import TypeTag, classify
from funcspec.core.validator import Validator, literal_validator

logger = get_logger(__name__)


def _default_of(spec_entry: Any) -> Any:
    if isinstance(spec_entry, Validator):
        return spec_entry.default
    return spec_entry


def _substitute(
    fn_name: str,
    validator: Validator,
    arg_type: TypeTag,
    index: int,
    reason: str,
    strict: bool,
) -> Any:
    if strict:
        message = None
        if reason == "validation_failed":
            message = f"{fn_name} argument at index {index} failed validation"
        raise InvalidArgumentError(
            fn_name,
            index,
            validator.expected_type,
            arg_type,
            message=message,
        ).with_context(reason=reason)

    logger.debug(
        "argument_substituted",
        function=fn_name,
        index=index,
        expected_type=validator.expected_type.value,
        actual_type=arg_type.value,
        reason=reason,
    )
    return validator.default


def validate(
    fn_name: str,
    validator: Validator,
    arg: Any,
    arg_type: TypeTag,
    index: int,
    strict: bool = False,
) -> Any:
    """Run the validator's predicate; keep ``arg`` if accepted, else substitute."""
    try:
        accepted = bool(validator(arg))
    except Exception as e:
        logger.debug(
            "predicate_raised",
            function=fn_name,
            index=index,
            error=repr(e),
        )
        accepted = False

    if accepted:
        return arg
    return _substitute(fn_name, validator, arg_type, index, "validation_failed", strict)


def coerce(
    fn_name: str,
    validator: Validator,
    arg: Any,
    arg_type: TypeTag,
    index: int,
    strict: bool = False,
    policy: CoercionPolicy = CoercionPolicy.REPLACE,
) -> Any:
    """
    Handle a type mismatch.

    ``REPLACE`` substitutes the default.  ``CONVERT`` tries ``convert`` and
    validates the result; if conversion is impossible it substitutes too.
    """
    if policy is CoercionPolicy.CONVERT:
        converted, value = convert(arg, validator.expected_type)
        if converted:
            logger.debug(
                "argument_converted",
                function=fn_name,
                index=index,
                expected_type=validator.expected_type.value,
                actual_type=arg_type.value,
            )
            return validate(fn_name, validator, value, classify(value), index, strict)

    return _substitute(fn_name, validator, arg_type, index, "type_mismatch", strict)


def type_check(
    fn_name: str,
    validator: Validator,
    arg: Any,
    arg_type: TypeTag,
    index: int,
    strict: bool = False,
    policy: CoercionPolicy = CoercionPolicy.REPLACE,
) -> Any:
    """Compare ``arg_type`` to the expected type and hand off to validate or coerce."""
    if arg_type == validator.expected_type:
        return validate(fn_name, validator, arg, arg_type, index, strict)
    return coerce(fn_name, validator, arg, arg_type, index, strict, policy)


def resolve(
    fn_name: str,
    spec_entry: Any,
    arg: Any,
    index: int,
    *,
    strict: bool = False,
    coercion: CoercionPolicy = CoercionPolicy.REPLACE,
) -> Any:
    """
    Resolve one argument against its spec entry.

    Args:
        fn_name: Name of the wrapped function, for diagnostics
        spec_entry: ``Validator``, bare literal, or ``ABSENT``
        arg: Argument supplied by the caller, or ``ABSENT``
        index: Position of the argument, for diagnostics
        strict: Raise ``InvalidArgumentError`` instead of substituting
        coercion: Policy applied on type mismatch

    Returns:
        The curated argument
    """
    spec_type = classify(spec_entry)
    arg_type = classify(arg)

    if spec_type is TypeTag.UNDEFINED:
        # unspecified position: pass through, absence included
        return arg

    if arg_type is TypeTag.UNDEFINED:
        return _default_of(spec_entry)

    if isinstance(spec_entry, Validator):
        effective = spec_entry
    else:
        effective = literal_validator(spec_entry)

    return type_check(fn_name, effective, arg, arg_type, index, strict, CoercionPolicy(coercion))


__all__ = ["coerce", "resolve", "type_check", "validate"]
