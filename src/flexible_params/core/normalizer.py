"""Parameter-list normalization.

``normalize`` runs the four stages in order for a single call:

1. classify the raw argument list as positional or named
   (:mod:`flexible_params.core.classifier`);
2. canonicalize named keys (:mod:`flexible_params.core.canonicalizer`);
3. fold trailing values after a leading mapping into one named slot
   (:mod:`flexible_params.core.remaining`);
4. convert to the requested output shape
   (:mod:`flexible_params.core.converter`).

Normalization is total. Loosely-typed arguments are coerced rather than
rejected, and every mismatch (missing names, short name lists, duplicate
aliases) resolves silently. No state is kept between calls and caller-owned
inputs are never mutated.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Mapping, Sequence, Union

from ..logging import diagnostic_mode
from .canonicalizer import canonicalize_named
from .classifier import InputFormat, classify_input
from .config_helpers import coerce_names, coerce_remaining_name, coerce_rename, coerce_source
from .converter import (
    OutputShape,
    drop_discarded,
    named_to_mapping,
    named_to_sequence,
    positional_to_mapping,
    positional_to_sequence,
)
from .remaining import collect_remaining

_LOGGER = logging.getLogger(__name__)

Normalized = Union[Dict[Any, Any], List[Any]]


def _empty(shape: OutputShape) -> Normalized:
    return {} if shape is OutputShape.MAPPING else []


def _coerce_shape(shape: Union[OutputShape, str]) -> OutputShape:
    if isinstance(shape, OutputShape):
        return shape
    return OutputShape(shape)


def normalize(
    source: Any,
    positional_by_default: bool = False,
    names: Union[Sequence[Any], Any] = (),
    rename: Mapping[Any, Any] | None = None,
    remaining_name: Any = "",
    lowercase: bool = False,
    *,
    shape: Union[OutputShape, str] = OutputShape.MAPPING,
) -> Normalized:
    """Normalize a raw argument list into a mapping or an ordered list.

    Parameters
    ----------
    source : sequence
        The arguments as received. Anything that is not a non-text sequence
        is treated as an empty list.
    positional_by_default : bool
        Tie-breaker used only when *source* has an even number of elements,
        no leading mapping and no leading marker.
    names : sequence or single name
        Parameter names. ``names[i]`` names position ``i`` of positional
        input and fixes the order of sequence output.
    rename : mapping, optional
        Maps marker-stripped (and, with *lowercase*, folded) input keys to
        output keys. A target of ``""`` discards the parameter.
    remaining_name : str
        Output key for the values following a leading mapping. The default
        ``""`` discards them.
    lowercase : bool
        Fold named keys to lowercase before the rename lookup.
    shape : OutputShape or {"mapping", "sequence"}
        Requested output shape. This is the only argument that is validated;
        an unknown shape raises ``ValueError``.

    Returns
    -------
    dict or list
        A new container; the values themselves are never copied or altered.
    """
    out_shape = _coerce_shape(shape)
    args = coerce_source(source)
    if not args:
        return _empty(out_shape)

    order = coerce_names(names)
    fmt = classify_input(args, bool(positional_by_default))

    if fmt is InputFormat.POSITIONAL:
        if out_shape is OutputShape.MAPPING:
            result: Normalized = positional_to_mapping(args, order)
        else:
            result = positional_to_sequence(args)
    else:
        canonical = canonicalize_named(args, fmt, coerce_rename(rename), bool(lowercase))
        collect_remaining(args, fmt, canonical, coerce_remaining_name(remaining_name))
        drop_discarded(canonical)
        if out_shape is OutputShape.MAPPING:
            result = named_to_mapping(canonical)
        else:
            result = named_to_sequence(canonical, order)

    if _LOGGER.isEnabledFor(logging.DEBUG):
        if diagnostic_mode():
            _LOGGER.debug(
                "normalized %d argument(s) as %s into %s: %r",
                len(args),
                fmt.value,
                out_shape.value,
                result,
            )
        else:
            _LOGGER.debug(
                "normalized %d argument(s) as %s into %s",
                len(args),
                fmt.value,
                out_shape.value,
            )
    return result


__all__ = ["Normalized", "normalize"]
