"""
Application-level exceptions.

- InvalidInputError: analysis inputs that cannot be parsed (non-numeric
  magnitude/PGA, bad floor count). Unknown soil/material strings are NOT errors.
- RemoteUnavailableError: the prediction service could not be used (network
  error, timeout, non-2xx, malformed body). Recovered by the pipeline.
"""

from __future__ import annotations


class SeismoError(Exception):
    """Base class for all Seismo Damage errors."""


class InvalidInputError(SeismoError, ValueError):
    """Raised when an analysis input field is missing or not usable."""

    def __init__(self, message: str, field: str | None = None):
        super().__init__(message)
        self.field = field


class RemoteUnavailableError(SeismoError):
    """Raised by the prediction client when the remote model cannot produce a score."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code
