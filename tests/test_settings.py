# Copyright 2026 DivineRank
# SPDX-License-Identifier: MIT
"""Tests for the configuration loader: YAML, environment overrides and fallbacks."""

from __future__ import annotations

import pytest

from divinerank.core import settings

ENV_VARS = (
    "DIVINERANK_MAX_REROLLS",
    "DIVINERANK_FALLBACK_SCORE",
    "DIVINERANK_MAX_WORKERS",
    "DIVINERANK_TZ",
    "DIVINERANK_LOG_LEVEL",
    "DIVINERANK_DEBUG",
    "DIVINERANK_CONFIG",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    yield
    settings._CONFIG_CACHE = None


@pytest.fixture
def config_file(tmp_path):
    def _write(text: str):
        path = tmp_path / "config.yaml"
        path.write_text(text, encoding="utf-8")
        return path

    return _write


def test_missing_file_uses_defaults(tmp_path):
    cfg = settings.load_config(reload=True, path=tmp_path / "absent.yaml")
    assert cfg.quota.max_rerolls == 7
    assert cfg.scoring.fallback_score == 5.0
    assert (cfg.scoring.resonance_low, cfg.scoring.resonance_high) == (0.8, 1.2)
    assert cfg.scoring.power_iterations == 20
    assert cfg.scoring.max_workers == 1
    assert cfg.default_timezone == "UTC"
    assert cfg.log_level == "INFO"
    assert cfg.debug is False
    assert cfg.weights.default == {}


def test_yaml_values(config_file):
    path = config_file(
        """
app:
  default_timezone: Asia/Shanghai
  log_level: warning
quota:
  max_rerolls: 3
scoring:
  fallback_score: 4.0
  max_workers: 4
weights:
  reroll:
    Behavioral: 0.6
    entropy: "not a number"
"""
    )
    cfg = settings.load_config(reload=True, path=path)
    assert cfg.quota.max_rerolls == 3
    assert cfg.scoring.fallback_score == 4.0
    assert cfg.scoring.max_workers == 4
    assert cfg.default_timezone == "Asia/Shanghai"
    assert cfg.log_level == "WARNING"
    assert cfg.weights.reroll == {"behavioral": 0.6}


def test_env_overrides_yaml(config_file, monkeypatch):
    path = config_file("quota:\n  max_rerolls: 3\n")
    monkeypatch.setenv("DIVINERANK_MAX_REROLLS", "9")
    monkeypatch.setenv("DIVINERANK_TZ", "Europe/Paris")
    monkeypatch.setenv("DIVINERANK_FALLBACK_SCORE", "2.5")
    cfg = settings.load_config(reload=True, path=path)
    assert cfg.quota.max_rerolls == 9
    assert cfg.default_timezone == "Europe/Paris"
    assert cfg.scoring.fallback_score == 2.5


def test_invalid_env_value_is_ignored(config_file, monkeypatch, caplog):
    path = config_file("quota:\n  max_rerolls: 3\n")
    monkeypatch.setenv("DIVINERANK_MAX_REROLLS", "lots")
    cfg = settings.load_config(reload=True, path=path)
    assert cfg.quota.max_rerolls == 3
    assert "DIVINERANK_MAX_REROLLS" in caplog.text


def test_config_path_from_env(config_file, monkeypatch):
    path = config_file("quota:\n  max_rerolls: 2\n")
    monkeypatch.setenv("DIVINERANK_CONFIG", str(path))
    assert settings.load_config(reload=True).quota.max_rerolls == 2


def test_malformed_yaml_falls_back(config_file, caplog):
    path = config_file("quota: [unclosed\n")
    cfg = settings.load_config(reload=True, path=path)
    assert cfg.quota.max_rerolls == 7
    assert "Failed to load config" in caplog.text


def test_non_mapping_yaml_falls_back(config_file):
    path = config_file("- just\n- a list\n")
    assert settings.load_config(reload=True, path=path).quota.max_rerolls == 7


def test_inverted_resonance_band_uses_defaults(config_file, caplog):
    path = config_file("scoring:\n  resonance_low: 1.5\n  resonance_high: 0.5\n")
    cfg = settings.load_config(reload=True, path=path)
    assert (cfg.scoring.resonance_low, cfg.scoring.resonance_high) == (0.8, 1.2)
    assert "resonance_low" in caplog.text


def test_negative_values_are_floored(config_file, monkeypatch):
    path = config_file("quota:\n  max_rerolls: -4\n")
    monkeypatch.setenv("DIVINERANK_MAX_WORKERS", "0")
    cfg = settings.load_config(reload=True, path=path)
    assert cfg.quota.max_rerolls == 0
    assert cfg.scoring.max_workers == 1


def test_debug_forces_debug_log_level(tmp_path, monkeypatch):
    monkeypatch.setenv("DIVINERANK_DEBUG", "true")
    cfg = settings.load_config(reload=True, path=tmp_path / "absent.yaml")
    assert cfg.debug is True
    assert cfg.log_level == "DEBUG"


def test_config_is_cached(tmp_path, monkeypatch):
    first = settings.load_config(reload=True, path=tmp_path / "absent.yaml")
    monkeypatch.setenv("DIVINERANK_MAX_REROLLS", "1")
    assert settings.load_config() is first
    assert settings.get_max_rerolls() == 7
    assert settings.load_config(reload=True, path=tmp_path / "absent.yaml").quota.max_rerolls == 1
