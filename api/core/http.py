"""
Request/response helpers shared by the feature routers.
"""

from __future__ import annotations

import json
from datetime import datetime, timezone
from typing import Any

from fastapi import Request


async def parse_json_body(request: Request) -> Any | None:
    """
    Decode the request body as JSON.

    Returns None when there is no body or it is not valid JSON; callers
    decide which 400 that maps to. Content-Type is not checked.
    """
    raw = await request.body()
    if not raw.strip():
        return None
    try:
        return json.loads(raw)
    except (ValueError, RecursionError):
        # JSONDecodeError and UnicodeDecodeError are ValueError; deep nesting exhausts the stack.
        return None


def isoformat_utc(moment: datetime) -> str:
    """
    ISO-8601 with millisecond precision and a trailing "Z", e.g. 2025-05-01T10:00:00.000Z.
    """
    utc = moment.astimezone(timezone.utc)
    return utc.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def utc_now_iso() -> str:
    return isoformat_utc(datetime.now(timezone.utc))
