from __future__ import annotations

import logging

import pytest

from sudoku_gui.utils import logging as logging_utils


@pytest.fixture(autouse=True)
def _restore_levels():
    names = ("", "urllib3", "requests")
    saved = {name: logging.getLogger(name).level for name in names}
    yield
    for name, level in saved.items():
        logging.getLogger(name).setLevel(level)


@pytest.mark.parametrize(
    "value,expected",
    [("debug", logging.DEBUG), ("WARNING", logging.WARNING), ("15", 15), (40, 40), ("", logging.INFO), ("loud", logging.INFO)],
)
def test_parse_level(value, expected) -> None:
    assert logging_utils.parse_level(value) == expected


def test_env_level_prefers_explicit_level_over_debug_flag() -> None:
    env = {"SUDOKU_LOG_LEVEL": "error", "SUDOKU_DEBUG": "1"}

    assert logging_utils.env_level(env) == logging.ERROR
    assert logging_utils.env_level({"SUDOKU_DEBUG": "yes"}) == logging.DEBUG
    assert logging_utils.env_level({"SUDOKU_DEBUG": "0"}) is None
    assert logging_utils.env_level({}) is None


def test_configure_root_uses_default_without_env() -> None:
    level = logging_utils.configure_root(logging.WARNING, environ={})

    assert level == logging.WARNING
    assert logging.getLogger().level == logging.WARNING


def test_apply_debug_preference_honours_env_override() -> None:
    assert logging_utils.apply_debug_preference(True, environ={}) == logging.DEBUG
    assert logging.getLogger("urllib3").level == logging.DEBUG

    assert logging_utils.apply_debug_preference(False, environ={}) == logging.INFO
    assert logging.getLogger("urllib3").level == logging.WARNING

    forced = logging_utils.apply_debug_preference(True, environ={"SUDOKU_LOG_LEVEL": "ERROR"})
    assert forced == logging.ERROR


def test_env_requests_debug() -> None:
    assert logging_utils.env_requests_debug({"SUDOKU_DEBUG": "true"}) is True
    assert logging_utils.env_requests_debug({"SUDOKU_LOG_LEVEL": "INFO"}) is False
    assert logging_utils.env_requests_debug({}) is False
