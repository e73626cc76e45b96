"""Input coercion and configuration reading helpers.

The normalizer accepts loosely-typed arguments and never rejects them; the
``coerce_*`` helpers below turn whatever was supplied into the safe shape the
stages expect. ``read_pyproject_section`` reads ``[tool.flexible_params...]``
tables for the logging and registry configuration layers.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any, Dict, List, Tuple

import numpy as np

try:
    import tomllib as _tomllib
except ModuleNotFoundError:  # pragma: no cover - fallback for <3.11
    try:  # pragma: no cover - optional dependency path
        import tomli as _tomllib  # type: ignore[assignment]
    except ModuleNotFoundError:  # pragma: no cover - tomllib unavailable
        _tomllib = None  # type: ignore[assignment]


def read_pyproject_section(path: Sequence[str]) -> Dict[str, Any]:
    """Return a mapping from the requested ``pyproject.toml`` section.

    Parameters
    ----------
    path : Sequence[str]
        Nested keys to traverse in the pyproject.toml structure.
        For example, ``("tool", "flexible_params", "signatures")``
        will navigate to ``[tool.flexible_params.signatures]``.

    Returns
    -------
    Dict[str, Any]
        Dictionary containing the requested configuration section,
        or an empty dict if the file does not exist or parsing fails.
    """
    if _tomllib is None:
        return {}

    candidate = Path.cwd() / "pyproject.toml"
    if not candidate.exists():
        return {}
    try:
        with candidate.open("rb") as fh:
            data = _tomllib.load(fh)
    except (OSError, ValueError):  # pragma: no cover - permissive fallback
        return {}

    cursor: Any = data
    for key in path:
        if isinstance(cursor, dict) and key in cursor:
            cursor = cursor[key]
        else:
            return {}
    if isinstance(cursor, dict):
        return dict(cursor)
    return {}


def is_valid_source(value: Any) -> bool:
    """Return whether *value* can be read as an ordered argument list.

    Lists, tuples and numpy arrays qualify, as does any other
    ``collections.abc.Sequence`` that is not text or bytes.
    """
    if isinstance(value, (str, bytes, bytearray)):
        return False
    return isinstance(value, (list, tuple, np.ndarray, Sequence))


def coerce_source(value: Any) -> List[Any]:
    """Return a new list holding the items of *value*, or ``[]``.

    Examples
    --------
    >>> coerce_source(("a", 1))
    ['a', 1]
    >>> coerce_source("abc")
    []
    >>> coerce_source(None)
    []
    """
    if not is_valid_source(value):
        return []
    if isinstance(value, np.ndarray):
        # A 0-d array has no length; treat it like any other non-sequence.
        if value.ndim == 0:
            return []
    return list(value)


def coerce_names(value: Any) -> Tuple[Any, ...]:
    """Coerce the ``names`` argument into a tuple of parameter names.

    - ``None`` -> empty tuple
    - ``str`` -> tuple with that single name
    - a valid source sequence -> tuple of its items
    - any other value -> tuple with that single value

    Examples
    --------
    >>> coerce_names("text")
    ('text',)
    >>> coerce_names(["name", "value"])
    ('name', 'value')
    >>> coerce_names(None)
    ()
    """
    if value is None:
        return ()
    if isinstance(value, str):
        return (value,)
    if is_valid_source(value):
        return tuple(coerce_source(value))
    return (value,)


def coerce_rename(value: Any) -> Dict[Any, Any]:
    """Return a ``dict`` copy of a rename mapping, or ``{}`` for anything else."""
    if isinstance(value, Mapping):
        return dict(value)
    return {}


def coerce_remaining_name(value: Any) -> Any:
    """Treat a missing remaining-value name as the discarded ``""`` key."""
    return "" if value is None else value


__all__ = [
    "coerce_names",
    "coerce_remaining_name",
    "coerce_rename",
    "coerce_source",
    "is_valid_source",
    "read_pyproject_section",
]
