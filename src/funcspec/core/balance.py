"""Length balancing for spec and argument sequences."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from funcspec.core.types import ABSENT


def balance(seq_a: Iterable[Any], seq_b: Iterable[Any]) -> tuple[int, list[Any], list[Any]]:
    """
    Pad the shorter of two sequences with ``ABSENT`` so both share a length.

    Inputs are copied, never mutated.

    Returns:
        (length, padded_a, padded_b) where length is the longer input's length
    """
    padded_a = list(seq_a)
    padded_b = list(seq_b)
    length = max(len(padded_a), len(padded_b))

    padded_a.extend([ABSENT] * (length - len(padded_a)))
    padded_b.extend([ABSENT] * (length - len(padded_b)))

    return length, padded_a, padded_b


__all__ = ["balance"]
