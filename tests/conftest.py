"""Shared pytest fixtures for flexible_params tests."""

from __future__ import annotations

import pytest

from flexible_params.logging import clear_diagnostic_mode_cache, update_logging_context
from flexible_params.registry import clear_signatures
from flexible_params.utils.deprecations import clear_emitted


@pytest.fixture(autouse=True)
def isolated_state(monkeypatch, tmp_path):
    """Run every test with an empty registry, no logging context and no pyproject.toml."""
    monkeypatch.delenv("FP_DIAGNOSTIC_MODE", raising=False)
    monkeypatch.delenv("FP_DEPRECATIONS", raising=False)
    monkeypatch.chdir(tmp_path)
    clear_signatures()
    clear_emitted()
    clear_diagnostic_mode_cache()
    yield
    clear_signatures()
    clear_emitted()
    clear_diagnostic_mode_cache()
    update_logging_context(signature=None, shape=None, caller=None)


@pytest.fixture
def write_pyproject(tmp_path):
    """Write a pyproject.toml into the (current) temporary directory."""

    def _write(text: str):
        path = tmp_path / "pyproject.toml"
        path.write_text(text, encoding="utf-8")
        return path

    return _write
