"""
funcspec - runtime parameter specs for ordinary functions.

Attach a default value or a validator to each positional parameter; calling
the wrapped function substitutes defaults for missing or invalid arguments
before the body runs.

    from funcspec import make_validator, non_negative_int, specify

    natural = make_validator(0, non_negative_int)

    @specify([natural, natural])
    def add(a, b):
        return a + b

    add(-1, 2)  # 2
"""

__version__ = "0.1.0"

from funcspec.core import (
    ABSENT,
    ArityError,
    CoercionPolicy,
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
    SpecShapeError,
    TypeTag,
    Validator,
    balance,
    classify,
    is_absent,
    is_validator,
    make_validator,
    resolve,
    validator,
)
from funcspec.core.logging import configure_logging, get_logger
from funcspec.core.settings import FuncSpecSettings, get_settings
from funcspec.framework import (
    ParsedSpec,
    SpecifiedFunction,
    build_doc,
    date_format,
    enum_value,
    fn,
    in_range,
    matches,
    natural,
    non_empty_str,
    non_negative_int,
    parse_spec_args,
    positive_int,
    spec,
    specify,
    wrap,
)

__all__ = [
    "ABSENT",
    "ArityError",
    "CoercionPolicy",
    "ConfigError",
    "ErrorCategory",
    "ErrorContext",
    "FuncSpecError",
    "FuncSpecSettings",
    "InvalidArgumentError",
    "InvalidLiteralError",
    "InvalidPredicateError",
    "ParsedSpec",
    "PredicateRejectedDefaultError",
    "ShapeError",
    "SpecConstructionError",
    "SpecShapeError",
    "SpecifiedFunction",
    "TypeTag",
    "Validator",
    "balance",
    "build_doc",
    "classify",
    "configure_logging",
    "date_format",
    "enum_value",
    "fn",
    "get_logger",
    "get_settings",
    "in_range",
    "is_absent",
    "is_validator",
    "make_validator",
    "matches",
    "natural",
    "non_empty_str",
    "non_negative_int",
    "parse_spec_args",
    "positive_int",
    "resolve",
    "spec",
    "specify",
    "validator",
    "wrap",
]
