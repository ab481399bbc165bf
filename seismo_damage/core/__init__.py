"""
Core utilities — exception hierarchy shared by engines, client and API server.
"""

from seismo_damage.core.exceptions import (
    InvalidInputError,
    RemoteUnavailableError,
    SeismoError,
)

__all__ = ["SeismoError", "InvalidInputError", "RemoteUnavailableError"]
