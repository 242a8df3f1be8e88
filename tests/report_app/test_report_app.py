"""Unit tests for report_app module (env helpers, selection options, launch args)."""

from __future__ import annotations

import os

import pytest

from genotables.report.report_config import ReportConfigData
from genotables.report_app import report_app
from genotables.tables.filters import SELECTION_ALL


def test_env_bool_unset_returns_default():
    """_env_bool returns default when env var is unset."""
    key = "_TEST_REPORT_APP_UNSET_XYZ"
    assert key not in os.environ
    assert report_app._env_bool(key, True) is True
    assert report_app._env_bool(key, False) is False


def test_env_bool_truthy_values():
    """_env_bool returns True for 1, true, yes, on."""
    key = "_TEST_REPORT_APP_BOOL_XYZ"
    for val in ("1", "true", "True", "yes", " on "):
        try:
            os.environ[key] = val
            assert report_app._env_bool(key, False) is True
        finally:
            os.environ.pop(key, None)


def test_env_bool_falsy_values():
    """_env_bool returns False for 0, false, no, off."""
    key = "_TEST_REPORT_APP_BOOL_XYZ"
    for val in ("0", "false", "False", "no", "off"):
        try:
            os.environ[key] = val
            assert report_app._env_bool(key, True) is False
        finally:
            os.environ.pop(key, None)


def test_env_bool_invalid_returns_default():
    """_env_bool returns default for invalid value."""
    key = "_TEST_REPORT_APP_INVALID_XYZ"
    try:
        os.environ[key] = "maybe"
        assert report_app._env_bool(key, True) is True
        assert report_app._env_bool(key, False) is False
    finally:
        os.environ.pop(key, None)


def test_env_int_unset_returns_default():
    """_env_int returns default when env var is unset."""
    key = "_TEST_REPORT_APP_INT_UNSET_XYZ"
    assert key not in os.environ
    assert report_app._env_int(key, 8080) == 8080


def test_env_int_valid_returns_parsed():
    """_env_int returns parsed int for valid value."""
    key = "_TEST_REPORT_APP_INT_XYZ"
    try:
        os.environ[key] = "123"
        assert report_app._env_int(key, 0) == 123
    finally:
        os.environ.pop(key, None)


def test_env_int_invalid_returns_default():
    """_env_int returns default for invalid value."""
    key = "_TEST_REPORT_APP_INT_INVALID_XYZ"
    try:
        os.environ[key] = "not_a_number"
        assert report_app._env_int(key, 99) == 99
    finally:
        os.environ.pop(key, None)


@pytest.fixture
def captured_run(monkeypatch):
    """Replace ui.run so main() records its arguments instead of starting a server."""
    calls: list[dict] = []
    monkeypatch.setattr(report_app.ui, "run", lambda **kwargs: calls.append(kwargs))
    for key in ("HOST", "PORT", "GENOTABLES_GUI_NATIVE", "GENOTABLES_GUI_RELOAD"):
        monkeypatch.delenv(key, raising=False)
    return calls


def test_main_uses_host_and_port_from_env(captured_run, monkeypatch):
    monkeypatch.setenv("HOST", "127.0.0.9")
    monkeypatch.setenv("PORT", "9123")
    report_app.main()
    assert len(captured_run) == 1
    kwargs = captured_run[0]
    assert kwargs["host"] == "127.0.0.9"
    assert kwargs["port"] == 9123
    assert kwargs["native"] is False
    assert kwargs["reload"] is False
    assert "window_size" not in kwargs


def test_main_web_defaults(captured_run):
    report_app.main()
    kwargs = captured_run[0]
    assert kwargs["host"] == "0.0.0.0"
    assert kwargs["port"] == 8080
    assert kwargs["title"] == "genotables report"


def test_main_reload_from_env(captured_run, monkeypatch):
    monkeypatch.setenv("GENOTABLES_GUI_RELOAD", "1")
    report_app.main()
    assert captured_run[0]["reload"] is True


def test_load_selection_options_from_variant_table(variants_tsv):
    options = report_app.load_selection_options(ReportConfigData(variants_file=str(variants_tsv)))
    assert options["sample"] == [SELECTION_ALL, "S1", "S2"]
    assert options["type"] == [SELECTION_ALL, "INDEL", "SNP"]


def test_load_selection_options_missing_table(tmp_path):
    cfg = ReportConfigData(variants_file=str(tmp_path / "missing.tsv"))
    assert report_app.load_selection_options(cfg) == {"sample": [SELECTION_ALL], "type": [SELECTION_ALL]}
