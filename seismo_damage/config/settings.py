"""
Application settings.

Responsibilities:
- Read configuration through config.env (environment variables and .env).
- Provide defaults for every optional value.
- Expose a typed, immutable Settings object for the CLI, API server and client.
"""

from __future__ import annotations

from dataclasses import dataclass

from seismo_damage.config import env


@dataclass(frozen=True)
class Settings:
    api_host: str
    api_port: int
    prediction_url: str
    prediction_timeout_sec: float
    prediction_seed: int | None
    log_level: str
    log_format: str


def get_settings() -> Settings:
    """
    Return the current application settings.

    Re-reads the environment on every call so tests can monkeypatch variables.
    """
    return Settings(
        api_host=env.get_api_host(),
        api_port=env.get_api_port(),
        prediction_url=env.get_prediction_url(),
        prediction_timeout_sec=env.get_prediction_timeout(),
        prediction_seed=env.get_prediction_seed(),
        log_level=env.get_log_level(),
        log_format=env.get_log_format(),
    )
