"""Core layer: classification, validators, balancing and argument resolution."""

from funcspec.core.balance import balance
from funcspec.core.coercion import CoercionPolicy, convert
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
    SpecShapeError,
)
from funcspec.core.resolution import coerce, resolve, type_check, validate
from funcspec.core.types import ABSENT, TypeTag, classify, is_absent
from funcspec.core.validator import (
    Validator,
    is_validator,
    literal_validator,
    make_validator,
    validator,
)

__all__ = [
    "ABSENT",
    "ArityError",
    "CoercionPolicy",
    "ConfigError",
    "ErrorCategory",
    "ErrorContext",
    "FuncSpecError",
    "InvalidArgumentError",
    "InvalidLiteralError",
    "InvalidPredicateError",
    "PredicateRejectedDefaultError",
    "ShapeError",
    "SpecConstructionError",
    "SpecShapeError",
    "TypeTag",
    "Validator",
    "balance",
    "classify",
    "coerce",
    "convert",
    "is_absent",
    "is_validator",
    "literal_validator",
    "make_validator",
    "resolve",
    "type_check",
    "validate",
    "validator",
]
