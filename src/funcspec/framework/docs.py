"""Doc-string generation for wrapped functions."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from funcspec.core.types import classify
from funcspec.core.validator import Validator


def describe_entry(entry: Any) -> str:
    """Render one spec entry as ``{tag}``, marking validators."""
    if isinstance(entry, Validator):
        return f"{{{entry.expected_type.value}}} (validated)"
    return f"{{{classify(entry).value}}}"


def build_doc(
    name: str,
    description: str,
    literals: Sequence[Any],
    param_names: Sequence[str] = (),
) -> str:
    """
    Build the doc string attached to a wrapped function.

    Example::

        function: add
        description: Add two numbers
        parameters:
        	0 a: {number}
        	1 b: {number} (validated)
    """
    lines = [
        f"function: {name}",
        f"description: {description}",
        "parameters:",
    ]
    for index, entry in enumerate(literals):
        label = str(index)
        if index < len(param_names):
            label = f"{index} {param_names[index]}"
        lines.append(f"\t{label}: {describe_entry(entry)}")

    return "\n".join(lines) + "\n"


__all__ = ["build_doc", "describe_entry"]
