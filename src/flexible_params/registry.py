"""Signature registry.

Explicit, in-process lookup table from operation identifiers to the
:class:`~flexible_params.api.config.ParamSpec` that normalizes their
arguments and an optional handler that consumes the normalized result.
Callers register operations up front (or load them from
``[tool.flexible_params.signatures]`` in pyproject.toml) and then route calls
through :func:`dispatch` by identifier instead of intercepting unknown method
names.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Tuple

from .api.config import ParamSpec
from .core.config_helpers import read_pyproject_section
from .core.converter import OutputShape
from .core.normalizer import Normalized
from .logging import logging_context
from .utils.exceptions import ConfigurationError, ValidationError

_LOGGER = logging.getLogger(__name__)

_SIGNATURES: Dict[str, SignatureDescriptor] = {}

_PYPROJECT_SECTION = ("tool", "flexible_params", "signatures")


@dataclass(frozen=True)
class SignatureDescriptor:
    """Registered normalization settings and handler for one operation."""

    identifier: str
    spec: ParamSpec
    handler: Callable[[Normalized], Any] | None = field(default=None, repr=False)
    shape: OutputShape = OutputShape.MAPPING


def _coerce_registry_shape(shape: OutputShape | str) -> OutputShape:
    if isinstance(shape, OutputShape):
        return shape
    try:
        return OutputShape(shape)
    except ValueError:
        raise ValidationError(
            f"Unknown output shape {shape!r}",
            details={
                "param": "shape",
                "allowed": [member.value for member in OutputShape],
                "actual": shape,
            },
        ) from None


def register_signature(
    identifier: str,
    spec: ParamSpec,
    handler: Callable[[Normalized], Any] | None = None,
    *,
    shape: OutputShape | str = OutputShape.MAPPING,
    replace: bool = False,
) -> SignatureDescriptor:
    """Register *spec* (and optionally *handler*) under *identifier*.

    Raises
    ------
    ValidationError
        When the identifier is empty or not a string, *spec* is not a
        ``ParamSpec``, *handler* is not callable, or *shape* is unknown.
    ConfigurationError
        When *identifier* is already registered and *replace* is false.
    """
    if not isinstance(identifier, str) or not identifier:
        raise ValidationError(
            "identifier must be a non-empty string",
            details={
                "param": "identifier",
                "expected_type": "str",
                "expected_empty": False,
                "actual_type": type(identifier).__name__,
            },
        )
    if not isinstance(spec, ParamSpec):
        raise ValidationError(
            "spec must be a ParamSpec",
            details={"param": "spec", "actual_type": type(spec).__name__},
        )
    if handler is not None and not callable(handler):
        raise ValidationError(
            "handler must be callable",
            details={"param": "handler", "actual_type": type(handler).__name__},
        )
    out_shape = _coerce_registry_shape(shape)
    if identifier in _SIGNATURES and not replace:
        raise ConfigurationError(
            f"Signature '{identifier}' is already registered",
            details={"identifier": identifier, "hint": "pass replace=True to override"},
        )

    descriptor = SignatureDescriptor(
        identifier=identifier, spec=spec, handler=handler, shape=out_shape
    )
    _SIGNATURES[identifier] = descriptor
    _LOGGER.debug("registered signature %s (%s)", identifier, out_shape.value)
    return descriptor


def unregister_signature(identifier: str) -> SignatureDescriptor | None:
    """Remove and return the descriptor for *identifier*, if registered."""
    return _SIGNATURES.pop(identifier, None)


def find_signature(identifier: str) -> SignatureDescriptor | None:
    """Return the descriptor for *identifier* if present."""
    return _SIGNATURES.get(identifier)


def list_signatures() -> Tuple[SignatureDescriptor, ...]:
    """Return all registered descriptors, sorted by identifier."""
    return tuple(_SIGNATURES[key] for key in sorted(_SIGNATURES))


def clear_signatures() -> None:
    _SIGNATURES.clear()


def _require(identifier: str) -> SignatureDescriptor:
    descriptor = _SIGNATURES.get(identifier)
    if descriptor is None:
        raise ConfigurationError(
            f"No signature registered for '{identifier}'",
            details={"identifier": identifier, "registered": sorted(_SIGNATURES)},
        )
    return descriptor


def normalize_for(identifier: str, source: Any) -> Normalized:
    """Normalize *source* with the spec and shape registered for *identifier*."""
    descriptor = _require(identifier)
    with logging_context(signature=identifier, shape=descriptor.shape.value):
        return descriptor.spec.normalize(source, descriptor.shape)


def dispatch(identifier: str, *args: Any) -> Any:
    """Normalize *args* for *identifier* and pass the result to its handler.

    Raises
    ------
    ConfigurationError
        When *identifier* is unknown or was registered without a handler.
    """
    descriptor = _require(identifier)
    if descriptor.handler is None:
        raise ConfigurationError(
            f"Signature '{identifier}' has no handler",
            details={"identifier": identifier},
        )
    with logging_context(signature=identifier, shape=descriptor.shape.value):
        params = descriptor.spec.normalize(args, descriptor.shape)
        return descriptor.handler(params)


def load_pyproject_signatures(*, replace: bool = False) -> Tuple[SignatureDescriptor, ...]:
    """Register handler-less signatures from pyproject.toml.

    Each ``[tool.flexible_params.signatures.<identifier>]`` table is turned
    into a :class:`ParamSpec` via :meth:`ParamSpec.from_mapping`. Every table
    is validated before any is registered, so a failed load leaves the
    registry unchanged. Returns the registered descriptors in identifier
    order.
    """
    section = read_pyproject_section(_PYPROJECT_SECTION)
    specs = {
        identifier: ParamSpec.from_mapping(
            section[identifier],
            source="pyproject.toml:" + ".".join(_PYPROJECT_SECTION + (identifier,)),
        )
        for identifier in sorted(section)
    }
    if not replace:
        conflicts = sorted(identifier for identifier in specs if identifier in _SIGNATURES)
        if conflicts:
            raise ConfigurationError(
                f"Signature(s) {conflicts} are already registered",
                details={"identifiers": conflicts, "hint": "pass replace=True to override"},
            )
    loaded = [
        register_signature(identifier, spec, replace=replace)
        for identifier, spec in specs.items()
    ]
    if loaded:
        _LOGGER.info("loaded %d signature(s) from pyproject.toml", len(loaded))
    return tuple(loaded)


__all__ = [
    "SignatureDescriptor",
    "clear_signatures",
    "dispatch",
    "find_signature",
    "list_signatures",
    "load_pyproject_signatures",
    "normalize_for",
    "register_signature",
    "unregister_signature",
]
