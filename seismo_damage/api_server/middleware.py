"""
HTTP middleware — permissive CORS headers and request logging.

Every response from the prediction service carries the same CORS headers,
including errors and preflight replies, so browser front-ends on any origin
can call it.
"""

from __future__ import annotations

import time
from typing import Awaitable, Callable

from fastapi import FastAPI, Request, Response

from seismo_damage.seismo_logging import get_logger

logger = get_logger(__name__)

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, POST, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
}


async def cors_and_logging(request: Request, call_next: Callable[[Request], Awaitable[Response]]) -> Response:
    start = time.perf_counter()
    response = await call_next(request)
    for name, value in CORS_HEADERS.items():
        response.headers[name] = value
    logger.info(
        "http_request",
        method=request.method,
        path=request.url.path,
        status_code=response.status_code,
        duration_ms=round((time.perf_counter() - start) * 1000, 2),
    )
    return response


def install_middleware(app: FastAPI) -> None:
    app.middleware("http")(cors_and_logging)
