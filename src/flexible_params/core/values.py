"""Scalar/sequence classification for parameter values.

Any parameter value may itself carry several values under one name. The
distinction matters only when collecting remaining values, but it is made
explicit here so callers can branch on a ``ValueKind`` instead of probing
types ad hoc.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

import numpy as np

# Text is a scalar even though ``str`` is a Sequence.
SEQUENCE_TYPES = (list, tuple, np.ndarray)


class ValueKind(Enum):
    """Whether a parameter value is a single value or several."""

    SCALAR = "scalar"
    SEQUENCE = "sequence"


def value_kind(value: Any) -> ValueKind:
    """Return the :class:`ValueKind` of *value*.

    Examples
    --------
    >>> value_kind("x")
    <ValueKind.SCALAR: 'scalar'>
    >>> value_kind(["x", "y"])
    <ValueKind.SEQUENCE: 'sequence'>
    """
    if isinstance(value, SEQUENCE_TYPES):
        return ValueKind.SEQUENCE
    return ValueKind.SCALAR


def is_hashable(value: Any) -> bool:
    """Return whether *value* can be used as a parameter name."""
    try:
        hash(value)
    except TypeError:
        return False
    return True


__all__ = ["SEQUENCE_TYPES", "ValueKind", "is_hashable", "value_kind"]
