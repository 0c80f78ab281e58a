"""
Demo page endpoints (home page, welcome text, server time, data echo).
"""

from __future__ import annotations

import json
from datetime import datetime

from fastapi import APIRouter
from fastapi.responses import HTMLResponse, PlainTextResponse, Response

from core import config
from core.cors import JSON_CONTENT_TYPE
from core.http import utc_now_iso

from . import content

router = APIRouter()


@router.get("/", response_class=HTMLResponse)
async def home() -> Response:
    """
    HTML overview by default; `BLOG_HOME_PAGE=text` serves the plain welcome instead.
    """
    if config.home_page_variant() == "text":
        return PlainTextResponse(content.welcome_text())
    return HTMLResponse(content.home_page_html())


@router.get("/welcome", response_class=PlainTextResponse)
async def welcome() -> str:
    return content.welcome_text()


@router.get("/time", response_class=PlainTextResponse)
async def server_time() -> str:
    return content.server_time_text(datetime.now())


@router.get("/data")
async def data() -> Response:
    payload = content.data_payload(
        timestamp=utc_now_iso(),
        environment=config.deployment_environment(),
    )
    return Response(json.dumps(payload, indent=2), media_type=JSON_CONTENT_TYPE)
