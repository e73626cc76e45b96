"""Decide whether a raw argument list is positional or named."""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from typing import Any, Sequence

MARKER = "-"


class InputFormat(Enum):
    """Shape of a raw argument list, computed once per call."""

    POSITIONAL = "positional"
    NAMED_FROM_MAPPING = "named_from_mapping"
    NAMED_FROM_PAIRS = "named_from_pairs"


def has_marker(value: Any) -> bool:
    """Return whether the text form of *value* starts with the marker.

    Bytes count as scalars and are not decoded: ``str(b"-a")`` is ``"b'-a'"``.
    """
    return str(value).startswith(MARKER)


def classify_input(source: Sequence[Any], positional_by_default: bool = False) -> InputFormat:
    """Classify *source* as positional or named.

    A leading mapping or a leading marker-prefixed value means named. An odd
    count can only be a flat positional list. An even count without either
    hint is ambiguous and resolved by ``positional_by_default``.

    Examples
    --------
    >>> classify_input([{"-a": 1}])
    <InputFormat.NAMED_FROM_MAPPING: 'named_from_mapping'>
    >>> classify_input(["-a", 1])
    <InputFormat.NAMED_FROM_PAIRS: 'named_from_pairs'>
    >>> classify_input(["a", "b", "c"])
    <InputFormat.POSITIONAL: 'positional'>
    >>> classify_input(["a", "b"], positional_by_default=True)
    <InputFormat.POSITIONAL: 'positional'>
    """
    if len(source) > 0:
        first = source[0]
        if isinstance(first, Mapping):
            return InputFormat.NAMED_FROM_MAPPING
        if has_marker(first):
            return InputFormat.NAMED_FROM_PAIRS
    if len(source) % 2 == 1:
        return InputFormat.POSITIONAL
    if positional_by_default:
        return InputFormat.POSITIONAL
    return InputFormat.NAMED_FROM_PAIRS


__all__ = ["InputFormat", "MARKER", "classify_input", "has_marker"]
