"""Framework layer: spec parsing, doc strings, predicates and the function wrapper."""

from funcspec.framework.docs import build_doc, describe_entry
from funcspec.framework.parser import ParsedSpec, parse_spec_args
from funcspec.framework.predicates import (
    date_format,
    enum_value,
    in_range,
    matches,
    natural,
    non_empty_str,
    non_negative_int,
    positive_int,
)
from funcspec.framework.wrapper import SpecifiedFunction, fn, spec, specify, wrap

__all__ = [
    "ParsedSpec",
    "SpecifiedFunction",
    "build_doc",
    "date_format",
    "describe_entry",
    "enum_value",
    "fn",
    "in_range",
    "matches",
    "natural",
    "non_empty_str",
    "non_negative_int",
    "parse_spec_args",
    "positive_int",
    "spec",
    "specify",
    "wrap",
]
