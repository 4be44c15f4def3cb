"""Normalisation of the positional ``spec(...)`` call shape."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Any, NamedTuple

from funcspec.core.errors import ArityError, ShapeError


class ParsedSpec(NamedTuple):
    """Normalised ``(description, literals, func)`` triple."""

    description: str
    literals: list[Any]
    func: Callable[..., Any]


def is_literal_sequence(value: Any) -> bool:
    """Check if ``value`` can serve as a literal array (list or tuple)."""
    return isinstance(value, (list, tuple))


def parse_spec_args(spec_args: Sequence[Any]) -> ParsedSpec:
    """
    Parse ``(literals, func)`` or ``(description, literals, func)``.

    Raises:
        ArityError: Fewer than 2 or more than 3 arguments
        ShapeError: Arguments of the wrong types
    """
    count = len(spec_args)
    if count < 2 or count > 3:
        raise ArityError("Insufficient # of arguments passed to spec()").with_context(
            received=count
        )

    if count == 2:
        literals, func = spec_args
        if is_literal_sequence(literals) and callable(func):
            return ParsedSpec("", list(literals), func)
    else:
        description, literals, func = spec_args
        if isinstance(description, str) and is_literal_sequence(literals) and callable(func):
            return ParsedSpec(description, list(literals), func)

    raise ShapeError("Invalid arg types passed to fn()").with_context(received=count)


__all__ = ["ParsedSpec", "is_literal_sequence", "parse_spec_args"]
