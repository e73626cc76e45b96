"""Central deprecation helper implementing per-test/session semantics.

Behaviour:
- When run under pytest, deprecations are emitted on every call and recorded
  per-test so each test can observe warnings independently.
- Outside pytest, deprecations are emitted once-per-session.
- Set `FP_DEPRECATIONS=error` to elevate deprecations to exceptions (CI).
"""

from __future__ import annotations

import os
import warnings
from typing import Dict, Set

# Keys emitted for the whole interpreter session (non-test runs)
_EMITTED: Set[str] = set()

# Keys emitted per pytest test id (`PYTEST_CURRENT_TEST`)
_EMITTED_PER_TEST: Dict[str, Set[str]] = {}


def _should_raise() -> bool:
    raw = os.getenv("FP_DEPRECATIONS")
    if not raw:
        return False
    return raw.lower() in {"1", "true", "error", "raise"}


def deprecate(message: str, *, key: str | None = None, stacklevel: int = 2) -> None:
    """Emit a `DeprecationWarning` for *message*.

    Parameters
    ----------
    message:
        Human-facing deprecation message.
    key:
        Stable identifier for the deprecated symbol. If omitted, the
        message text is used.
    stacklevel:
        Forwarded to ``warnings.warn`` so the warning points at user code.
    """
    if key is None:
        key = message

    pytest_id = os.getenv("PYTEST_CURRENT_TEST")

    if _should_raise():
        if pytest_id:
            _EMITTED_PER_TEST.setdefault(pytest_id, set()).add(key)
        else:
            _EMITTED.add(key)
        raise DeprecationWarning(message)

    if pytest_id:
        warnings.warn(message, DeprecationWarning, stacklevel=stacklevel)
        _EMITTED_PER_TEST.setdefault(pytest_id, set()).add(key)
        return

    if key in _EMITTED:
        return
    warnings.warn(message, DeprecationWarning, stacklevel=stacklevel)
    _EMITTED.add(key)


def deprecate_alias(alias: str, canonical: str, *, stacklevel: int = 3) -> None:
    """Provide convenience helper for deprecated method or parameter aliases."""
    deprecate(
        "'" + alias + "' is deprecated; use '" + canonical + "'",
        key=f"alias:{alias}",
        stacklevel=stacklevel,
    )


def emitted_keys() -> set[str]:
    """Return a shallow copy of session-emitted deprecation keys."""
    return set(_EMITTED)


def clear_emitted() -> None:
    """Clear both the session-wide and per-test emitted deprecation keys."""
    _EMITTED.clear()
    _EMITTED_PER_TEST.clear()


__all__ = ["deprecate", "deprecate_alias", "emitted_keys", "clear_emitted"]
