"""
Tests for environment-driven settings.
"""

from __future__ import annotations

from seismo_damage.config import get_settings
from seismo_damage.config.env import DEFAULT_API_PORT, DEFAULT_PREDICTION_TIMEOUT_SEC, DEFAULT_PREDICTION_URL

ENV_VARS = (
    "API_HOST",
    "API_PORT",
    "PREDICTION_URL",
    "PREDICTION_TIMEOUT_SEC",
    "PREDICTION_SEED",
    "LOG_LEVEL",
    "LOG_FORMAT",
)


def _clear(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def test_defaults(monkeypatch):
    _clear(monkeypatch)
    s = get_settings()
    assert s.api_host == "0.0.0.0"
    assert s.api_port == DEFAULT_API_PORT == 3001
    assert s.prediction_url == DEFAULT_PREDICTION_URL
    assert s.prediction_timeout_sec == DEFAULT_PREDICTION_TIMEOUT_SEC
    assert s.prediction_seed is None
    assert s.log_level == "INFO"
    assert s.log_format == "json"


def test_overrides(monkeypatch):
    _clear(monkeypatch)
    monkeypatch.setenv("API_HOST", "127.0.0.1")
    monkeypatch.setenv("API_PORT", "8080")
    monkeypatch.setenv("PREDICTION_SEED", "42")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    s = get_settings()
    assert s.api_host == "127.0.0.1"
    assert s.api_port == 8080
    assert s.prediction_seed == 42
    assert s.log_level == "DEBUG"


def test_malformed_values_fall_back(monkeypatch):
    _clear(monkeypatch)
    monkeypatch.setenv("API_PORT", "eighty")
    monkeypatch.setenv("PREDICTION_TIMEOUT_SEC", "-1")
    monkeypatch.setenv("PREDICTION_SEED", "random")
    s = get_settings()
    assert s.api_port == 3001
    assert s.prediction_timeout_sec == DEFAULT_PREDICTION_TIMEOUT_SEC
    assert s.prediction_seed is None
