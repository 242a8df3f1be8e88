"""Unit tests for ReportConfig load/save (always against tmp_path, never user config)."""

from __future__ import annotations

import json

import pytest

from genotables.report.report_config import SCHEMA_VERSION, ReportConfig, ReportConfigData, parse_seed
from genotables.tables.filters import SELECTION_ALL


def test_load_missing_file_returns_defaults(tmp_path):
    cfg = ReportConfig.load(config_path=tmp_path / "report_config.json")
    assert cfg.data == ReportConfigData()
    assert cfg.data.random_seed is None
    assert not cfg.path.exists()


def test_load_missing_file_create_if_missing_writes_defaults(tmp_path):
    path = tmp_path / "sub" / "report_config.json"
    ReportConfig.load(config_path=path, create_if_missing=True)
    assert json.loads(path.read_text())["schema_version"] == SCHEMA_VERSION


def test_save_then_load_round_trip(tmp_path):
    path = tmp_path / "report_config.json"
    cfg = ReportConfig(path=path)
    cfg.data.random_seed = 42
    cfg.data.sample_n = 3
    cfg.data.genes_of_interest = ["TP53"]
    cfg.save()

    loaded = ReportConfig.load(config_path=path)
    assert loaded.data.random_seed == 42
    assert loaded.data.sample_n == 3
    assert loaded.data.genes_of_interest == ["TP53"]


def test_invalid_json_uses_defaults(tmp_path):
    path = tmp_path / "report_config.json"
    path.write_text("{not json", encoding="utf-8")
    assert ReportConfig.load(config_path=path).data == ReportConfigData()


def test_non_dict_json_uses_defaults(tmp_path):
    path = tmp_path / "report_config.json"
    path.write_text("[1, 2]", encoding="utf-8")
    assert ReportConfig.load(config_path=path).data == ReportConfigData()


def test_schema_mismatch_resets_or_keeps(tmp_path):
    path = tmp_path / "report_config.json"
    path.write_text(json.dumps({"schema_version": 999, "sample_n": 9}), encoding="utf-8")

    assert ReportConfig.load(config_path=path).data.sample_n == ReportConfigData().sample_n

    kept = ReportConfig.load(config_path=path, reset_on_version_mismatch=False)
    assert kept.data.sample_n == 9
    assert kept.data.schema_version == SCHEMA_VERSION


def test_from_json_dict_tolerates_bad_values_and_unknown_keys(caplog):
    data = ReportConfigData.from_json_dict({
        "schema_version": SCHEMA_VERSION,
        "sample_n": "many",
        "sample_frac": 3.0,
        "random_seed": "x",
        "genes_of_interest": "TP53",
        "colour": "red",
    })
    defaults = ReportConfigData()
    assert data.sample_n == defaults.sample_n
    assert data.sample_frac == 1.0
    assert data.random_seed is None
    assert data.genes_of_interest == defaults.genes_of_interest
    assert "Unknown key 'colour'" in caplog.text


def test_selections_default_to_all_and_round_trip(tmp_path):
    defaults = ReportConfigData()
    assert defaults.selections == {"sample": SELECTION_ALL, "type": SELECTION_ALL}

    path = tmp_path / "report_config.json"
    cfg = ReportConfig(path=path)
    cfg.data.selections = {"sample": "S2", "type": SELECTION_ALL}
    cfg.save()
    assert ReportConfig.load(config_path=path).data.selections == {"sample": "S2", "type": SELECTION_ALL}


def test_from_json_dict_bad_selections_use_defaults():
    data = ReportConfigData.from_json_dict({"schema_version": SCHEMA_VERSION, "selections": ["S1"]})
    assert data.selections == ReportConfigData().selections


def test_parse_seed():
    assert parse_seed(None) is None
    assert parse_seed("") is None
    assert parse_seed("  ") is None
    assert parse_seed("7") == 7
    assert parse_seed(12.0) == 12
    for bad in ("abc", "1.5", -1):
        with pytest.raises(ValueError):
            parse_seed(bad)
