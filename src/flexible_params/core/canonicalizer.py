"""Key canonicalization for named parameters.

Every named key goes through the same three steps, in order:

1. one leading marker character is stripped (``"-color"`` -> ``"color"``);
2. when ``lowercase`` is set, the key is folded to lowercase;
3. the key is looked up in the rename map and replaced by its target.

A rename target of ``""`` (or ``None``) marks the parameter for deletion; the
``""`` key is dropped by the shape converter. The rename map itself is never
folded, so callers enabling ``lowercase`` must supply lowercase aliases.

When two input keys end up with the same output key the later one in input
order wins. Callers should not rely on which alias wins.
"""

from __future__ import annotations

from typing import Any, Dict, Iterator, Mapping, Sequence, Tuple

from .classifier import MARKER, InputFormat
from .values import is_hashable


def strip_marker(key: str) -> str:
    """Remove one leading marker character from *key*, if present."""
    if key.startswith(MARKER):
        return key[len(MARKER):]
    return key


def canonical_key(key: Any, rename: Mapping[Any, Any], lowercase: bool = False) -> Any:
    """Return the output key for a single raw input key.

    Examples
    --------
    >>> canonical_key("-color", {})
    'color'
    >>> canonical_key("-Color", {"color": "hue"}, lowercase=True)
    'hue'
    >>> canonical_key("default", {"default": ""})
    ''
    """
    name = strip_marker(key if isinstance(key, str) else str(key))
    if lowercase:
        name = name.lower()
    if name in rename:
        target = rename[name]
        if target is None or not is_hashable(target):
            return ""
        return target
    return name


def iter_named_pairs(source: Sequence[Any], fmt: InputFormat) -> Iterator[Tuple[Any, Any]]:
    """Yield the raw ``(key, value)`` pairs of a named argument list.

    For ``NAMED_FROM_MAPPING`` the pairs come from the leading mapping in its
    iteration order. For ``NAMED_FROM_PAIRS`` the whole list is read as
    alternating keys and values; a trailing key with no value pairs with
    ``None``.
    """
    if fmt is InputFormat.NAMED_FROM_MAPPING:
        yield from source[0].items()
        return
    for index in range(0, len(source), 2):
        value = source[index + 1] if index + 1 < len(source) else None
        yield source[index], value


def canonicalize_named(
    source: Sequence[Any],
    fmt: InputFormat,
    rename: Mapping[Any, Any],
    lowercase: bool = False,
) -> Dict[Any, Any]:
    """Build the canonical key -> value mapping for a named argument list."""
    canonical: Dict[Any, Any] = {}
    for key, value in iter_named_pairs(source, fmt):
        canonical[canonical_key(key, rename, lowercase)] = value
    return canonical


__all__ = ["canonical_key", "canonicalize_named", "iter_named_pairs", "strip_marker"]
