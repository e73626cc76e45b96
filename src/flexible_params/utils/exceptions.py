"""Custom exception hierarchy for flexible_params.

The normalizer itself is total and never raises. These exceptions cover the
configuration surface only: malformed configuration tables, bad registry
arguments and unknown signature identifiers.

All exceptions inherit from FlexibleParamsError and support structured error
payloads via the ``details`` kwarg.
"""

from __future__ import annotations

from typing import Any

__all__ = [
    "FlexibleParamsError",
    "ValidationError",
    "ConfigurationError",
    "explain_exception",
]


class FlexibleParamsError(Exception):
    """Base class for library-specific errors."""

    def __init__(self, message: str, *, details: dict[str, Any] | None = None) -> None:
        """Attach structured error details alongside the user-facing message."""
        super().__init__(message)
        self.details: dict[str, Any] | None = details

    def __repr__(self) -> str:  # pragma: no cover - repr stability check in tests
        """Return the exception representation with the message payload."""
        cls = self.__class__.__name__
        return f"{cls}({super().__str__()!r})"


class ValidationError(FlexibleParamsError):
    """Arguments to a registry or builder call failed validation."""


class ConfigurationError(FlexibleParamsError):
    """Invalid configuration table, duplicate registration or unknown signature."""


def explain_exception(e: Exception) -> str:
    """Return a human-readable multi-line description of an exception.

    Formats library-specific ``FlexibleParamsError`` instances with structured
    details for diagnostics and logging. For other exceptions, returns the
    standard string representation.

    Parameters
    ----------
    e : Exception
        The exception to format.

    Returns
    -------
    str
        Multi-line human-readable message.

    Examples
    --------
    >>> from flexible_params.utils.exceptions import ConfigurationError, explain_exception
    >>> e = ConfigurationError("unknown signature", details={"identifier": "textarea"})
    >>> print(explain_exception(e))
    ConfigurationError: unknown signature
      Details: {'identifier': 'textarea'}
    """
    if isinstance(e, FlexibleParamsError):
        lines = [f"{e.__class__.__name__}: {str(e)}"]
        if e.details is not None:
            lines.append(f"  Details: {e.details}")
        return "\n".join(lines)
    return str(e)
