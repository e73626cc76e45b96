"""Shared utilities used across flexible_params.

This module re-exports the public-facing utilities so callers can import
directly from ``flexible_params.utils`` rather than reaching into
individual helper modules.
"""

from .deprecations import clear_emitted, deprecate, deprecate_alias, emitted_keys
from .exceptions import (
    ConfigurationError,
    FlexibleParamsError,
    ValidationError,
    explain_exception,
)

__all__ = [
    "clear_emitted",
    "ConfigurationError",
    "deprecate",
    "deprecate_alias",
    "emitted_keys",
    "explain_exception",
    "FlexibleParamsError",
    "ValidationError",
]
