"""
Post business logic.

Kept free of request parsing: routers hand over the decoded JSON body (or
None when it did not parse) and get back `Post` records or an HTTPException.
"""

from __future__ import annotations

import logging
import uuid
from typing import Any

from fastapi import HTTPException, status

from core.http import utc_now_iso

from .repository import PostNotFoundError, PostStore
from .schemas import DEFAULT_AUTHOR, Post

POST_NOT_FOUND = "Post not found"
TITLE_AND_CONTENT_REQUIRED = "Title and content are required"
INVALID_REQUEST_BODY = "Invalid request body"

logger = logging.getLogger(__name__)


def generate_id() -> str:
    return str(uuid.uuid4())


def _not_found() -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=POST_NOT_FOUND)


def _text_field(body: dict, name: str) -> str | None:
    """
    The submitted value when it is a non-empty string, else None.
    """
    value = body.get(name)
    if isinstance(value, str) and value:
        return value
    return None


def _is_missing_body(body: Any) -> bool:
    """
    True for an unparsed body and for JSON null, false, 0 and "".

    Arrays and objects count as present even when empty.
    """
    if body is None:
        return True
    return not isinstance(body, (dict, list)) and not body


def list_posts(store: PostStore) -> list[Post]:
    return store.list()


def get_post(store: PostStore, post_id: str) -> Post:
    post = store.find_by_id(post_id)
    if post is None:
        raise _not_found()
    return post


def create_post(store: PostStore, body: Any) -> Post:
    if not isinstance(body, dict):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=TITLE_AND_CONTENT_REQUIRED)

    title = _text_field(body, "title")
    content = _text_field(body, "content")
    if title is None or content is None:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=TITLE_AND_CONTENT_REQUIRED)

    post = Post(
        id=generate_id(),
        title=title,
        content=content,
        author=_text_field(body, "author") or DEFAULT_AUTHOR,
        created_at=utc_now_iso(),
    )
    store.append(post)
    logger.info("post_created id=%s author=%s", post.id, post.author)
    return post


def update_post(store: PostStore, post_id: str, body: Any) -> Post:
    """
    Replace a post with a new record built from the old one.

    Fields missing from the body, or submitted as an empty or non-string
    value, keep their current value. A JSON body that is not an object
    (e.g. `[1]`) changes no fields. `updatedAt` is always refreshed.
    """
    with store.locked():
        existing = store.find_by_id(post_id)
        if existing is None:
            raise _not_found()

        if _is_missing_body(body):
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=INVALID_REQUEST_BODY)
        if not isinstance(body, dict):
            body = {}

        updated = existing.model_copy(
            update={
                "title": _text_field(body, "title") or existing.title,
                "content": _text_field(body, "content") or existing.content,
                "author": _text_field(body, "author") or existing.author,
                "updated_at": utc_now_iso(),
            }
        )
        store.replace(post_id, updated)

    logger.info("post_updated id=%s", post_id)
    return updated


def delete_post(store: PostStore, post_id: str) -> Post:
    try:
        removed = store.remove(post_id)
    except PostNotFoundError as exc:
        raise _not_found() from exc

    logger.info("post_deleted id=%s", post_id)
    return removed
