"""Logging utilities for flexible_params.

This module provides structured logging context and the diagnostic-mode
switch that decides whether normalization records include parameter values.
"""

from __future__ import annotations

import contextlib
import contextvars
import functools
import logging
import os
from typing import Any, Dict, Iterator

from .core.config_helpers import read_pyproject_section

_CONTEXT_KEYS = (
    "signature",
    "shape",
    "caller",
)

_context_vars = {key: contextvars.ContextVar(key, default=None) for key in _CONTEXT_KEYS}


def coerce_bool(value: str | bool | None) -> bool:
    """Parse a boolean configuration value from env vars or pyproject.toml."""
    if isinstance(value, bool):
        return value
    if value is None:
        return False
    return str(value).strip().lower() in {"1", "true", "yes", "on", "enable"}


def diagnostic_mode() -> bool:
    """Return whether normalization logs should include parameter values.

    Reads ``FP_DIAGNOSTIC_MODE`` or ``[tool.flexible_params.logging]``
    ``diagnostic_mode`` from pyproject.toml. Env var takes precedence and is
    checked on every call; the pyproject.toml value is read once and cached
    (see :func:`clear_diagnostic_mode_cache`).
    Values may hold user data, so this is off by default.
    """
    env_value = os.environ.get("FP_DIAGNOSTIC_MODE")
    if env_value is not None:
        return coerce_bool(env_value)

    return _pyproject_diagnostic_mode()


@functools.lru_cache(maxsize=None)
def _pyproject_diagnostic_mode() -> bool:
    config = read_pyproject_section(("tool", "flexible_params", "logging"))
    return coerce_bool(config.get("diagnostic_mode")) if config else False


def clear_diagnostic_mode_cache() -> None:
    """Forget the cached pyproject.toml diagnostic setting so it is read again."""
    _pyproject_diagnostic_mode.cache_clear()


def get_logging_context() -> Dict[str, Any]:
    """Return current structured logging context."""
    return {key: var.get() for key, var in _context_vars.items() if var.get() is not None}


def update_logging_context(**kwargs: Any) -> None:
    """Update structured logging context fields present in kwargs."""
    for key, value in kwargs.items():
        if key in _context_vars:
            _context_vars[key].set(value)


@contextlib.contextmanager
def logging_context(**kwargs: Any) -> Iterator[None]:
    """Context manager to temporarily set logging context fields."""
    tokens = {}
    for key, value in kwargs.items():
        if key in _context_vars:
            tokens[key] = _context_vars[key].set(value)
    try:
        yield
    finally:
        for key, token in tokens.items():
            _context_vars[key].reset(token)


class LoggingContextFilter(logging.Filter):
    """Logging filter that injects structured context into records."""

    def filter(self, record: logging.LogRecord) -> bool:
        """Inject structured context into the log record."""
        context = get_logging_context()
        for key in _CONTEXT_KEYS:
            setattr(record, key, context.get(key))
        return True


def ensure_logging_context_filter(logger_name: str = "flexible_params") -> None:
    """Attach the context filter to the flexible_params logger once."""
    logger = logging.getLogger(logger_name)
    for existing in logger.filters:
        if isinstance(existing, LoggingContextFilter):
            return
    logger.addFilter(LoggingContextFilter())


__all__ = [
    "clear_diagnostic_mode_cache",
    "coerce_bool",
    "diagnostic_mode",
    "ensure_logging_context_filter",
    "get_logging_context",
    "logging_context",
    "LoggingContextFilter",
    "update_logging_context",
]
