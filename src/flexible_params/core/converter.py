"""Convert positional or canonical named parameters into the requested shape."""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, List, Mapping, Sequence

from .values import is_hashable

DISCARDED_KEY = ""


class OutputShape(Enum):
    """Shape of the normalized result."""

    MAPPING = "mapping"
    SEQUENCE = "sequence"


def drop_discarded(params: Dict[Any, Any]) -> Dict[Any, Any]:
    """Remove the ``""`` key from *params* in place and return it."""
    params.pop(DISCARDED_KEY, None)
    return params


def positional_to_mapping(source: Sequence[Any], names: Sequence[Any]) -> Dict[Any, Any]:
    """Pair each positional value with the name at the same index.

    Values beyond the end of *names* are dropped, as are values whose name
    cannot be used as a key.
    """
    params = {name: value for name, value in zip(names, source) if is_hashable(name)}
    return drop_discarded(params)


def positional_to_sequence(source: Sequence[Any]) -> List[Any]:
    return list(source)


def named_to_mapping(canonical: Mapping[Any, Any]) -> Dict[Any, Any]:
    return drop_discarded(dict(canonical))


def named_to_sequence(canonical: Mapping[Any, Any], names: Sequence[Any]) -> List[Any]:
    """Order canonical values by *names*; missing names give ``None`` slots."""
    return [canonical.get(name) if is_hashable(name) else None for name in names]


__all__ = [
    "DISCARDED_KEY",
    "OutputShape",
    "drop_discarded",
    "named_to_mapping",
    "named_to_sequence",
    "positional_to_mapping",
    "positional_to_sequence",
]
