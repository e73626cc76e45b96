import logging

import pytest

from flexible_params.logging import (
    LoggingContextFilter,
    coerce_bool,
    diagnostic_mode,
    ensure_logging_context_filter,
    get_logging_context,
    logging_context,
    update_logging_context,
)


def test_should_enable_diagnostic_mode_when_env_true(monkeypatch):
    monkeypatch.setenv("FP_DIAGNOSTIC_MODE", "true")
    assert diagnostic_mode() is True


def test_should_disable_diagnostic_mode_when_env_false(monkeypatch):
    monkeypatch.setenv("FP_DIAGNOSTIC_MODE", "0")
    assert diagnostic_mode() is False


def test_should_fall_back_to_pyproject_when_env_missing(monkeypatch):
    monkeypatch.setattr(
        "flexible_params.logging.read_pyproject_section", lambda _path: {"diagnostic_mode": True}
    )
    assert diagnostic_mode() is True


def test_should_read_real_pyproject_file(write_pyproject):
    write_pyproject("[tool.flexible_params.logging]\ndiagnostic_mode = 'yes'\n")
    assert diagnostic_mode() is True


def test_env_takes_precedence_over_pyproject(monkeypatch, write_pyproject):
    write_pyproject("[tool.flexible_params.logging]\ndiagnostic_mode = true\n")
    monkeypatch.setenv("FP_DIAGNOSTIC_MODE", "off")
    assert diagnostic_mode() is False


def test_should_return_false_when_config_absent():
    assert diagnostic_mode() is False


@pytest.mark.parametrize(
    "value, expected",
    [
        (True, True),
        (False, False),
        (None, False),
        ("1", True),
        ("yes", True),
        ("ON", True),
        (" enable ", True),
        ("0", False),
        ("random", False),
    ],
)
def test_should_coerce_bool_with_various_inputs(value, expected):
    assert coerce_bool(value) is expected


def test_update_logging_context_invalid_key():
    update_logging_context(invalid_key="test")
    assert "invalid_key" not in get_logging_context()


def test_should_inject_and_reset_logging_context():
    assert get_logging_context() == {}

    with logging_context(signature="textarea", shape="mapping"):
        ctx = get_logging_context()
        assert ctx["signature"] == "textarea"
        assert ctx["shape"] == "mapping"

    assert get_logging_context() == {}


def test_should_set_none_values_in_logging_context_to_clear():
    update_logging_context(caller="form.render")
    assert get_logging_context() == {"caller": "form.render"}
    with logging_context(caller=None):
        assert get_logging_context() == {}
    assert get_logging_context() == {"caller": "form.render"}


def test_should_attach_filter_once_and_inject_context():
    logger_name = "flexible_params.test"
    logger = logging.getLogger(logger_name)
    logger.filters = [f for f in logger.filters if not isinstance(f, LoggingContextFilter)]

    ensure_logging_context_filter(logger_name)
    ensure_logging_context_filter(logger_name)
    filters = [f for f in logger.filters if isinstance(f, LoggingContextFilter)]
    assert len(filters) == 1

    record = logging.LogRecord(
        name=logger.name,
        level=logging.DEBUG,
        pathname=__file__,
        lineno=0,
        msg="msg",
        args=(),
        exc_info=None,
    )
    with logging_context(signature="property"):
        assert filters[0].filter(record) is True
    assert record.signature == "property"
    assert record.shape is None

    logger.filters = [f for f in logger.filters if not isinstance(f, LoggingContextFilter)]
