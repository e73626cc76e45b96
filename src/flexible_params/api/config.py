"""Reusable normalization settings.

A function that accepts flexible arguments usually passes the same names,
aliases and remaining-value key on every call. ``ParamSpec`` bundles those
options once; ``ParamSpecBuilder`` assembles one fluently. Specs can also be
loaded from configuration tables (for example
``[tool.flexible_params.signatures.<name>]`` in pyproject.toml), in which case
the table is validated and malformed tables raise ``ConfigurationError``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Tuple

from ..core.config_helpers import coerce_names, coerce_remaining_name, coerce_rename
from ..core.converter import OutputShape
from ..core.normalizer import Normalized, normalize
from ..utils.exceptions import ConfigurationError

_CONFIG_KEYS = frozenset(
    {"names", "rename", "remaining_name", "lowercase", "positional_by_default"}
)


@dataclass(frozen=True)
class ParamSpec:
    """Normalization options for one flexible-argument function.

    Notes
    -----
    - Fields are coerced with the same lenient rules as the normalizer, so a
      single string for ``names`` becomes a one-element tuple.
    - ``rename`` is stored as a read-only mapping.
    - With ``lowercase`` set, ``rename``, ``names`` and ``remaining_name`` must
      already be lowercase; they are never folded.
    """

    names: Tuple[Any, ...] = ()
    rename: Mapping[Any, Any] = field(default_factory=dict)
    remaining_name: Any = ""
    lowercase: bool = False
    positional_by_default: bool = False

    def __post_init__(self) -> None:
        """Coerce and freeze the fields."""
        object.__setattr__(self, "names", coerce_names(self.names))
        object.__setattr__(self, "rename", MappingProxyType(coerce_rename(self.rename)))
        object.__setattr__(self, "remaining_name", coerce_remaining_name(self.remaining_name))
        object.__setattr__(self, "lowercase", bool(self.lowercase))
        object.__setattr__(self, "positional_by_default", bool(self.positional_by_default))

    def normalize(self, source: Any, shape: OutputShape | str = OutputShape.MAPPING) -> Normalized:
        return normalize(
            source,
            self.positional_by_default,
            self.names,
            self.rename,
            self.remaining_name,
            self.lowercase,
            shape=shape,
        )

    def to_mapping(self, source: Any) -> Dict[Any, Any]:
        """Normalize *source* into a name -> value dict."""
        return self.normalize(source, OutputShape.MAPPING)  # type: ignore[return-value]

    def to_sequence(self, source: Any) -> List[Any]:
        """Normalize *source* into a list ordered by ``names``."""
        return self.normalize(source, OutputShape.SEQUENCE)  # type: ignore[return-value]

    @classmethod
    def from_mapping(cls, config: Mapping[str, Any], *, source: str = "config") -> ParamSpec:
        """Build a spec from a configuration table.

        Parameters
        ----------
        config : Mapping[str, Any]
            Table with any of the keys ``names``, ``rename``,
            ``remaining_name``, ``lowercase`` and ``positional_by_default``.
        source : str
            Label for the table, included in error details.

        Raises
        ------
        ConfigurationError
            When the table has unknown keys or a value of the wrong type.
        """
        if not isinstance(config, Mapping):
            raise ConfigurationError(
                "signature configuration must be a table",
                details={"source": source, "actual_type": type(config).__name__},
            )
        unknown = sorted(set(config) - _CONFIG_KEYS)
        if unknown:
            raise ConfigurationError(
                f"Unknown signature option(s) {unknown}",
                details={"source": source, "unknown": unknown, "allowed": sorted(_CONFIG_KEYS)},
            )

        names = config.get("names", ())
        if not isinstance(names, (str, list, tuple)) or (
            not isinstance(names, str) and not all(isinstance(n, str) for n in names)
        ):
            raise ConfigurationError(
                "'names' must be a string or a list of strings",
                details={"source": source, "param": "names", "actual": names},
            )

        rename = config.get("rename", {})
        if not isinstance(rename, Mapping) or not all(
            isinstance(k, str) and isinstance(v, str) for k, v in rename.items()
        ):
            raise ConfigurationError(
                "'rename' must be a table of string keys to string targets",
                details={"source": source, "param": "rename", "actual": rename},
            )

        remaining_name = config.get("remaining_name", "")
        if not isinstance(remaining_name, str):
            raise ConfigurationError(
                "'remaining_name' must be a string",
                details={"source": source, "param": "remaining_name", "actual": remaining_name},
            )

        flags = {}
        for flag in ("lowercase", "positional_by_default"):
            value = config.get(flag, False)
            if not isinstance(value, bool):
                raise ConfigurationError(
                    f"'{flag}' must be a boolean",
                    details={"source": source, "param": flag, "actual": value},
                )
            flags[flag] = value

        return cls(names=names, rename=rename, remaining_name=remaining_name, **flags)


class ParamSpecBuilder:
    """Fluent helper to assemble a :class:`ParamSpec`."""

    def __init__(self, *names: Any) -> None:
        """Seed the builder with optional parameter names."""
        self._names: List[Any] = list(names)
        self._rename: Dict[Any, Any] = {}
        self._remaining_name: Any = ""
        self._lowercase = False
        self._positional_by_default = False

    def names(self, *names: Any) -> ParamSpecBuilder:
        """Replace the parameter names, in positional order."""
        self._names = list(names)
        return self

    def rename(self, mapping: Mapping[Any, Any]) -> ParamSpecBuilder:
        """Merge *mapping* into the rename table."""
        self._rename.update(mapping)
        return self

    def alias(self, canonical: Any, *aliases: Any) -> ParamSpecBuilder:
        """Rename every alias in *aliases* to *canonical*."""
        for name in aliases:
            self._rename[name] = canonical
        return self

    def drop(self, *keys: Any) -> ParamSpecBuilder:
        """Discard the named parameters from the result."""
        for key in keys:
            self._rename[key] = ""
        return self

    def remaining(self, name: Any) -> ParamSpecBuilder:
        """Collect values following a leading mapping under *name*."""
        self._remaining_name = name
        return self

    def lowercase(self, flag: bool = True) -> ParamSpecBuilder:
        self._lowercase = flag
        return self

    def positional_by_default(self, flag: bool = True) -> ParamSpecBuilder:
        """Guess positional rather than named when the input is ambiguous."""
        self._positional_by_default = flag
        return self

    def build(self) -> ParamSpec:
        """Return a :class:`ParamSpec` with the accumulated options."""
        return ParamSpec(
            names=tuple(self._names),
            rename=dict(self._rename),
            remaining_name=self._remaining_name,
            lowercase=self._lowercase,
            positional_by_default=self._positional_by_default,
        )


__all__ = ["ParamSpec", "ParamSpecBuilder"]
