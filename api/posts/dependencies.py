"""
Dependencies for post routes.
"""

from __future__ import annotations

from fastapi import Request

from .repository import PostStore


def get_post_store(request: Request) -> PostStore:
    store = getattr(request.app.state, "post_store", None)
    if store is None:
        raise RuntimeError("Post store is not initialized. Build the app with create_app().")
    return store
