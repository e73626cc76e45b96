"""Collect trailing values that follow a leading mapping of named parameters."""

from __future__ import annotations

from typing import Any, Dict, Sequence

from .classifier import InputFormat
from .values import ValueKind, is_hashable, value_kind


def remaining_values(source: Sequence[Any], fmt: InputFormat) -> Sequence[Any]:
    """Return the values after the leading mapping, or an empty sequence."""
    if fmt is not InputFormat.NAMED_FROM_MAPPING:
        return ()
    return source[1:]


def collect_remaining(
    source: Sequence[Any],
    fmt: InputFormat,
    canonical: Dict[Any, Any],
    remaining_name: Any,
) -> Dict[Any, Any]:
    """Store the remaining values of *source* under *remaining_name*.

    A single remaining value, or a first remaining value that is already a
    sequence, is stored as-is. Several scalar remaining values are gathered
    into a new list. Either way the result overwrites an explicit parameter
    of the same name. *canonical* is updated in place and returned.
    """
    rest = remaining_values(source, fmt)
    if not rest or not is_hashable(remaining_name):
        return canonical

    first = rest[0]
    if len(rest) == 1 or value_kind(first) is ValueKind.SEQUENCE:
        canonical[remaining_name] = first
    else:
        canonical[remaining_name] = list(rest)
    return canonical


__all__ = ["collect_remaining", "remaining_values"]
