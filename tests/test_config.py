"""Tests for TOML configuration loading."""

from risktrack import config as config_module
from risktrack.config import ReportConfig, load_config


def test_defaults(monkeypatch, tmp_path):
    monkeypatch.setattr(config_module, "DEFAULT_CONFIG_PATHS", [tmp_path / "absent.toml"])
    cfg = load_config()
    assert cfg == ReportConfig()
    assert cfg.format == "terminal"
    assert [lv.name for lv in cfg.risk_levels] == ["Extreme", "High", "Moderate", "Low"]


def test_explicit_file(tmp_path):
    path = tmp_path / "risktrack.toml"
    path.write_text(
        '[report]\n'
        'format = "markdown"\n'
        'project_name = "Depot"\n'
        'api_url = "http://localhost:5000"\n'
        'project_id = 3\n'
        '\n'
        '[[report.risk_levels]]\n'
        'name = "Extreme"\n'
        'min_rating = 20\n'
        'max_rating = 25\n'
        'color = "#DC3545"\n'
        '\n'
        '[[report.risk_levels]]\n'
        'name = "Low"\n'
        'min_rating = 0\n'
        'max_rating = 19\n'
        'color = "#28A745"\n'
    )
    cfg = load_config(path)
    assert cfg.format == "markdown"
    assert cfg.project_name == "Depot"
    assert cfg.project_id == 3
    assert [lv.name for lv in cfg.risk_levels] == ["Extreme", "Low"]
    assert cfg.risk_levels[0].min_rating == 20


def test_search_paths(monkeypatch, tmp_path):
    path = tmp_path / "found.toml"
    path.write_text('[report]\nformat = "json"\n')
    monkeypatch.setattr(
        config_module, "DEFAULT_CONFIG_PATHS", [tmp_path / "absent.toml", path]
    )
    assert load_config().format == "json"


def test_missing_explicit_file_falls_back(monkeypatch, tmp_path):
    monkeypatch.setattr(config_module, "DEFAULT_CONFIG_PATHS", [])
    assert load_config(tmp_path / "nope.toml") == ReportConfig()
