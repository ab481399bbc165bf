"""
Configuration management for Seismo Damage.

Loads settings from environment variables and an optional .env file at the
repository root. Exposes a single source of truth for service configuration.
"""

from seismo_damage.config.settings import Settings, get_settings  # noqa: F401

__all__ = ["Settings", "get_settings"]
