"""
Structured logging for the engines, client, API server and CLI.

Every record is one line on stderr (stdout carries CLI reports):
    {"event_type": "prediction_served", "level": "info", "logger": "...", "timestamp": "...", ...}

Level and renderer come from LOG_LEVEL / LOG_FORMAT, read through
config.env so values in .env apply as well as process environment.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog

from seismo_damage.config.env import get_log_format, get_log_level


def _rename_event(logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:
    """structlog's positional 'event' becomes event_type."""
    if "event" in event_dict and "event_type" not in event_dict:
        event_dict["event_type"] = event_dict.pop("event")
    return event_dict


def _level_value(level: str) -> int:
    value = logging.getLevelName(level.strip().upper())
    return value if isinstance(value, int) else logging.INFO


def configure_logging(level: str | None = None, fmt: str | None = None) -> None:
    """
    (Re)configure structlog.

    level and fmt default to LOG_LEVEL and LOG_FORMAT. Loggers returned by
    get_logger() after this call use the new settings.
    """
    level = level or get_log_level()
    fmt = (fmt or get_log_format()).lower()
    if fmt == "json":
        renderer: Any = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.format_exc_info,
            structlog.processors.TimeStamper(fmt="iso", utc=True, key="timestamp"),
            _rename_event,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(_level_value(level)),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )


if not structlog.is_configured():
    configure_logging()


def get_logger(name: str) -> structlog.BoundLogger:
    """
    Return a structured logger bound to the module name.

        logger = get_logger(__name__)
        logger.info("analytics_pipeline_done", mode="scientific", damage=85)
    """
    return structlog.get_logger(name).bind(logger=name)
