"""
Blog post API endpoints.

Routes are matched in declaration order: exact paths first, then the
`/api/posts/{post_id}` templates.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Request, status
from starlette.convertors import Convertor, register_url_convertor

from core.http import parse_json_body

from . import service
from .dependencies import get_post_store
from .repository import PostStore


class PostIdConvertor(Convertor):
    """
    One or more ASCII word characters or hyphens. Anything else is not a post route.
    """

    regex = "[A-Za-z0-9_-]+"

    def convert(self, value: str) -> str:
        return value

    def to_string(self, value: str) -> str:
        return value


register_url_convertor("post_id", PostIdConvertor())

POST_ITEM_PATH = "/api/posts/{post_id:post_id}"

router = APIRouter()


@router.get("/api/posts")
async def list_posts(store: PostStore = Depends(get_post_store)) -> dict:
    posts = service.list_posts(store)
    return {"posts": [post.to_dict() for post in posts]}


@router.post("/api/posts", status_code=status.HTTP_201_CREATED)
async def create_post(request: Request, store: PostStore = Depends(get_post_store)) -> dict:
    body = await parse_json_body(request)
    post = service.create_post(store, body)
    return {"post": post.to_dict()}


@router.get(POST_ITEM_PATH)
async def get_post(post_id: str, store: PostStore = Depends(get_post_store)) -> dict:
    post = service.get_post(store, post_id)
    return {"post": post.to_dict()}


@router.put(POST_ITEM_PATH)
async def update_post(post_id: str, request: Request, store: PostStore = Depends(get_post_store)) -> dict:
    body = await parse_json_body(request)
    post = service.update_post(store, post_id, body)
    return {"post": post.to_dict()}


@router.delete(POST_ITEM_PATH)
async def delete_post(post_id: str, store: PostStore = Depends(get_post_store)) -> dict:
    """
    Permanently remove a post and echo it back.
    """
    post = service.delete_post(store, post_id)
    return {"message": "Post deleted successfully", "post": post.to_dict()}
