"""
Render every failure as `{"error": "<message>"}`.

Services raise `fastapi.HTTPException(status_code, detail)`; these handlers
replace FastAPI's default `{"detail": ...}` body with this API's error shape.
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from . import cors

NOT_FOUND = "Not Found"
INTERNAL_SERVER_ERROR = "Internal Server Error"

logger = logging.getLogger(__name__)


def error_response(status_code: int, message: str, headers: dict[str, str] | None = None) -> JSONResponse:
    return JSONResponse({"error": message}, status_code=status_code, headers=headers)


async def http_exception_handler(_: Request, exc: StarletteHTTPException) -> JSONResponse:
    # A known path with an unsupported method is reported like any unknown route.
    if exc.status_code == 405:
        return error_response(404, NOT_FOUND)
    return error_response(exc.status_code, str(exc.detail), headers=exc.headers)


async def unhandled_exception_handler(request: Request, _: Exception) -> JSONResponse:
    logger.exception("unhandled_error method=%s path=%s", request.method, request.url.path)
    # Runs outside the CORS middleware, so headers are attached here.
    return error_response(500, INTERNAL_SERVER_ERROR, headers=dict(cors.CORS_HEADERS))


def install(app: FastAPI) -> None:
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
