from __future__ import annotations

import pytest

from sudoku_gui.viewmodels.settings_vm import DEFAULT_API_BASE_URL, SettingsVM


def test_defaults_are_valid() -> None:
    vm = SettingsVM()

    assert vm.api_base_url == DEFAULT_API_BASE_URL
    assert vm.request_timeout_s == 10
    assert vm.retries == 2
    assert vm.poll_interval_ms == 50
    assert vm.is_valid()


def test_apply_dict_coerces_values() -> None:
    vm = SettingsVM()

    vm.apply_dict(
        {
            "api_base_url": " https://solver.example.com/ ",
            "request_timeout_s": "5",
            "retries": 0,
            "debug_logging": "yes",
        }
    )

    assert vm.api_base_url == "https://solver.example.com"
    assert vm.request_timeout_s == 5
    assert vm.retries == 0
    assert vm.debug_logging is True


@pytest.mark.parametrize(
    "payload",
    [
        {"api_base_url": "ftp://solver"},
        {"api_base_url": ""},
        {"request_timeout_s": "soon"},
        {"request_timeout_s": 0},
        {"retries": -1},
        {"retries": True},
        {"unknown": 1},
    ],
)
def test_apply_dict_rejects_invalid_values(payload) -> None:
    vm = SettingsVM()

    with pytest.raises(ValueError):
        vm.apply_dict(payload)
    assert vm.to_dict()["api_base_url"] == DEFAULT_API_BASE_URL


def test_apply_dict_requires_mapping() -> None:
    with pytest.raises(ValueError):
        SettingsVM().apply_dict(["api_base_url"])  # type: ignore[arg-type]


def test_from_env_reads_sudoku_variables() -> None:
    vm = SettingsVM.from_env(
        {
            "SUDOKU_API_URL": "http://10.0.0.5:9000",
            "SUDOKU_API_KEY": "k",
            "SUDOKU_REQUEST_TIMEOUT_S": "3",
            "SUDOKU_RETRIES": "1",
            "SUDOKU_POLL_INTERVAL_MS": "20",
            "UNRELATED": "x",
        }
    )

    assert vm.api_base_url == "http://10.0.0.5:9000"
    assert vm.api_key == "k"
    assert vm.request_timeout_s == 3
    assert vm.retries == 1
    assert vm.poll_interval_ms == 20


def test_from_env_without_variables_uses_defaults() -> None:
    vm = SettingsVM.from_env({})

    assert vm.to_dict()["api_base_url"] == DEFAULT_API_BASE_URL


def test_property_setters_validate() -> None:
    vm = SettingsVM()

    vm.api_base_url = "http://localhost:8081/"
    assert vm.api_base_url == "http://localhost:8081"

    with pytest.raises(ValueError):
        vm.poll_interval_ms = 0


def test_load_falls_back_to_defaults_on_bad_environment(caplog) -> None:
    with caplog.at_level("WARNING"):
        vm = SettingsVM.load({"SUDOKU_RETRIES": "many", "SUDOKU_API_URL": "http://solver:9000"})

    assert vm.retries == 2
    assert vm.api_base_url == DEFAULT_API_BASE_URL
    assert "SUDOKU_" in caplog.text


def test_load_uses_valid_environment() -> None:
    vm = SettingsVM.load({"SUDOKU_API_URL": "http://solver:9000"})

    assert vm.api_base_url == "http://solver:9000"
