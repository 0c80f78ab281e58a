"""Tests for post business rules, without HTTP."""

from __future__ import annotations

import pytest
from fastapi import HTTPException

from posts import service
from posts.repository import PostStore


class TestCreatePost:
    def test_defaults_author(self, store: PostStore) -> None:
        post = service.create_post(store, {"title": "Hi", "content": "World"})
        assert post.author == "Anonymous"
        assert store.find_by_id(post.id) == post

    def test_blank_author_defaults(self, store: PostStore) -> None:
        post = service.create_post(store, {"title": "Hi", "content": "World", "author": ""})
        assert post.author == "Anonymous"

    @pytest.mark.parametrize(
        "body",
        [
            None,
            [],
            "text",
            {},
            {"title": "Hi"},
            {"content": "World"},
            {"title": "", "content": "World"},
            {"title": 42, "content": "World"},
        ],
    )
    def test_rejects_incomplete_bodies(self, store: PostStore, body: object) -> None:
        with pytest.raises(HTTPException) as exc_info:
            service.create_post(store, body)
        assert exc_info.value.status_code == 400
        assert exc_info.value.detail == service.TITLE_AND_CONTENT_REQUIRED
        assert len(store) == 2

    def test_ids_are_unique(self, store: PostStore) -> None:
        ids = {service.create_post(store, {"title": "t", "content": "c"}).id for _ in range(20)}
        assert len(ids) == 20


class TestUpdatePost:
    def test_builds_replacement_record(self, store: PostStore) -> None:
        original = service.get_post(store, "1")

        updated = service.update_post(store, "1", {"content": "Fresh"})

        assert updated is not original
        assert updated.content == "Fresh"
        assert updated.title == original.title
        assert updated.created_at == original.created_at
        assert updated.updated_at is not None
        assert original.updated_at is None
        assert store.find_by_id("1") == updated

    def test_non_string_values_fall_back(self, store: PostStore) -> None:
        updated = service.update_post(store, "2", {"title": None, "author": 7})
        assert updated.title == "Working with Deno KV"
        assert updated.author == "Deno Fan"

    def test_missing_post_is_404(self, store: PostStore) -> None:
        with pytest.raises(HTTPException) as exc_info:
            service.update_post(store, "missing", {"title": "x"})
        assert exc_info.value.status_code == 404

    @pytest.mark.parametrize("body", [[1], "x", 3, True, []])
    def test_non_object_body_changes_nothing(self, store: PostStore, body: object) -> None:
        original = service.get_post(store, "2")
        updated = service.update_post(store, "2", body)
        assert updated.model_dump(exclude={"updated_at"}) == original.model_dump(exclude={"updated_at"})
        assert updated.updated_at is not None

    @pytest.mark.parametrize("body", [None, False, 0, ""])
    def test_missing_or_falsy_body_is_400(self, store: PostStore, body: object) -> None:
        with pytest.raises(HTTPException) as exc_info:
            service.update_post(store, "2", body)
        assert exc_info.value.status_code == 400

    def test_invalid_body_is_400(self, store: PostStore) -> None:
        with pytest.raises(HTTPException) as exc_info:
            service.update_post(store, "1", None)
        assert exc_info.value.status_code == 400
        assert exc_info.value.detail == service.INVALID_REQUEST_BODY


class TestDeletePost:
    def test_delete_then_get(self, store: PostStore) -> None:
        removed = service.delete_post(store, "2")
        assert removed.id == "2"
        with pytest.raises(HTTPException) as exc_info:
            service.get_post(store, "2")
        assert exc_info.value.status_code == 404

    def test_delete_missing_is_404(self, store: PostStore) -> None:
        with pytest.raises(HTTPException) as exc_info:
            service.delete_post(store, "missing")
        assert exc_info.value.detail == service.POST_NOT_FOUND
