"""
ASGI application entrypoint.

Run with: uvicorn seismo_damage.api_server.app:app --host 0.0.0.0 --port 3001
"""

from seismo_damage.api_server.server import app

__all__ = ["app"]
