"""
Permissive CORS for browser clients on any origin.

Starlette's CORSMiddleware only answers preflights that carry
`Access-Control-Request-Method` and only decorates requests with an `Origin`
header. This API answers every OPTIONS request and decorates every JSON
response, so it uses its own small middleware instead.
"""

from __future__ import annotations

from fastapi import FastAPI, Request, Response
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint

JSON_CONTENT_TYPE = "application/json"

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, POST, PUT, DELETE, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
}


def preflight_response() -> Response:
    return Response(
        status_code=200,
        headers={"content-type": JSON_CONTENT_TYPE, **CORS_HEADERS},
    )


def apply_cors_headers(response: Response) -> Response:
    for name, value in CORS_HEADERS.items():
        response.headers[name] = value
    return response


def is_json_response(response: Response) -> bool:
    content_type = response.headers.get("content-type", "")
    return content_type.split(";", 1)[0].strip().lower() == JSON_CONTENT_TYPE


async def cors_middleware(request: Request, call_next: RequestResponseEndpoint) -> Response:
    # Preflight is answered before routing, whatever the path.
    if request.method == "OPTIONS":
        return preflight_response()

    response = await call_next(request)
    if is_json_response(response):
        apply_cors_headers(response)
    return response


def install(app: FastAPI) -> None:
    app.add_middleware(BaseHTTPMiddleware, dispatch=cors_middleware)
