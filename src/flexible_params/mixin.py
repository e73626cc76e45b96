"""Inheritable access to the normalization operations.

``ParamParser`` carries no state of its own; subclasses call the methods on
``self`` to tidy up their own argument lists::

    class Form(ParamParser):
        def textarea(self, *args):
            params = self.params_to_mapping(
                args, False, ["name", "text", "rows", "cols"],
                {"default": "text", "value": "text", "columns": "cols"}, "text",
            )
            ...
"""

from __future__ import annotations

from typing import Any, Dict, List, Mapping, Sequence

from .api.params import normalize_to_mapping, normalize_to_sequence
from .logging import logging_context
from .utils.deprecations import deprecate_alias


class ParamParser:
    """Mixin exposing parameter-list normalization as methods."""

    def params_to_mapping(
        self,
        source: Any,
        positional_by_default: bool = False,
        names: Sequence[Any] | Any = (),
        rename: Mapping[Any, Any] | None = None,
        remaining_name: Any = "",
        lowercase: bool = False,
    ) -> Dict[Any, Any]:
        """Return *source* as a name -> value dict (see ``normalize_to_mapping``)."""
        with logging_context(caller=type(self).__qualname__):
            return normalize_to_mapping(
                source, positional_by_default, names, rename, remaining_name, lowercase
            )

    def params_to_sequence(
        self,
        source: Any,
        positional_by_default: bool = False,
        names: Sequence[Any] | Any = (),
        rename: Mapping[Any, Any] | None = None,
        remaining_name: Any = "",
        lowercase: bool = False,
    ) -> List[Any]:
        """Return *source* as a list ordered by *names* (see ``normalize_to_sequence``)."""
        with logging_context(caller=type(self).__qualname__):
            return normalize_to_sequence(
                source, positional_by_default, names, rename, remaining_name, lowercase
            )

    def params_to_hash(self, *args: Any, **kwargs: Any) -> Dict[Any, Any]:
        """Deprecated alias for :meth:`params_to_mapping`."""
        deprecate_alias("params_to_hash", "params_to_mapping")
        return self.params_to_mapping(*args, **kwargs)

    def params_to_array(self, *args: Any, **kwargs: Any) -> List[Any]:
        """Deprecated alias for :meth:`params_to_sequence`."""
        deprecate_alias("params_to_array", "params_to_sequence")
        return self.params_to_sequence(*args, **kwargs)


__all__ = ["ParamParser"]
