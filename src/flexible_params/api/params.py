"""Public normalization entry points.

Both operations share one algorithm and differ only in the output shape:

    def textfield(*args):
        params = normalize_to_mapping(
            args, False, ["name", "value", "size", "maxlength"], {"default": "value"}
        )

    def property_(*args):
        key, new_value = normalize_to_sequence(args, True, ["key", "value"])

Accepted input shapes include an empty list, a single value, several
positional values, ``name, value`` pairs with or without a leading ``-`` on
each name, and a mapping of names optionally followed by remaining values.
"""

from __future__ import annotations

from typing import Any, Dict, List, Mapping, Sequence

from ..core.converter import OutputShape
from ..core.normalizer import normalize


def normalize_to_mapping(
    source: Any,
    positional_by_default: bool = False,
    names: Sequence[Any] | Any = (),
    rename: Mapping[Any, Any] | None = None,
    remaining_name: Any = "",
    lowercase: bool = False,
) -> Dict[Any, Any]:
    """Return the parameters in *source* as a name -> value dict.

    See :func:`flexible_params.core.normalizer.normalize` for the arguments.

    Examples
    --------
    >>> normalize_to_mapping(["a", "b", "c"], False, ["x", "y", "z"])
    {'x': 'a', 'y': 'b', 'z': 'c'}
    >>> normalize_to_mapping([{"-a": 1}, "x", "y"], remaining_name="rest")
    {'a': 1, 'rest': ['x', 'y']}
    """
    return normalize(
        source,
        positional_by_default,
        names,
        rename,
        remaining_name,
        lowercase,
        shape=OutputShape.MAPPING,
    )


def normalize_to_sequence(
    source: Any,
    positional_by_default: bool = False,
    names: Sequence[Any] | Any = (),
    rename: Mapping[Any, Any] | None = None,
    remaining_name: Any = "",
    lowercase: bool = False,
) -> List[Any]:
    """Return the parameters in *source* as a list ordered by *names*.

    Positional input comes back unchanged (as a new list). Named input is
    laid out by *names*, with ``None`` where a name was not supplied.

    Examples
    --------
    >>> normalize_to_sequence(["-value", 5, "-key", "k"], False, ["key", "value"])
    ['k', 5]
    """
    return normalize(
        source,
        positional_by_default,
        names,
        rename,
        remaining_name,
        lowercase,
        shape=OutputShape.SEQUENCE,
    )


__all__ = ["normalize_to_mapping", "normalize_to_sequence"]
