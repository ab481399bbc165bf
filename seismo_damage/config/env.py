"""
Environment variable loading for Seismo Damage.

- API_HOST / API_PORT: bind address of the prediction service (default 0.0.0.0:3001)
- PREDICTION_URL: endpoint the analysis client posts to
- PREDICTION_TIMEOUT_SEC: client timeout (httpx default 5s)
- PREDICTION_SEED: optional seed for the service noise generator
- Loads .env from project root when available.
"""

from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv

# Project root: config is seismo_damage/config/, root is 2 levels up
_CONFIG_DIR = Path(__file__).resolve().parent
_PACKAGE_DIR = _CONFIG_DIR.parent
_ROOT = _PACKAGE_DIR.parent
_ENV_PATH = _ROOT / ".env"

DEFAULT_API_HOST = "0.0.0.0"
DEFAULT_API_PORT = 3001
DEFAULT_PREDICTION_URL = "http://localhost:3001/predict"
DEFAULT_PREDICTION_TIMEOUT_SEC = 5.0


def load_seismo_env() -> None:
    """Load .env from project root. Existing environment variables win. Safe to call multiple times."""
    if _ENV_PATH.exists():
        load_dotenv(_ENV_PATH, override=False)


def _env_str(name: str, default: str) -> str:
    return (os.getenv(name) or "").strip() or default


def _env_float(name: str, default: float) -> float:
    raw = (os.getenv(name) or "").strip()
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def _env_int(name: str, default: int | None) -> int | None:
    raw = (os.getenv(name) or "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def get_api_host() -> str:
    load_seismo_env()
    return _env_str("API_HOST", DEFAULT_API_HOST)


def get_api_port() -> int:
    load_seismo_env()
    port = _env_int("API_PORT", DEFAULT_API_PORT)
    return port if port is not None else DEFAULT_API_PORT


def get_prediction_url() -> str:
    """Return PREDICTION_URL, or the local service default."""
    load_seismo_env()
    return _env_str("PREDICTION_URL", DEFAULT_PREDICTION_URL)


def get_prediction_timeout() -> float:
    load_seismo_env()
    timeout = _env_float("PREDICTION_TIMEOUT_SEC", DEFAULT_PREDICTION_TIMEOUT_SEC)
    return timeout if timeout > 0 else DEFAULT_PREDICTION_TIMEOUT_SEC


def get_prediction_seed() -> int | None:
    """Return PREDICTION_SEED as int; None (unseeded noise) when unset or malformed."""
    load_seismo_env()
    return _env_int("PREDICTION_SEED", None)


def get_log_level() -> str:
    load_seismo_env()
    return _env_str("LOG_LEVEL", "INFO").upper()


def get_log_format() -> str:
    load_seismo_env()
    return _env_str("LOG_FORMAT", "json").lower()
