"""
Structured logging for Seismo Damage.

JSON logs with timestamp, level and event_type. Use get_logger() in every module.
"""

from seismo_damage.seismo_logging.logger import configure_logging, get_logger

__all__ = ["configure_logging", "get_logger"]
