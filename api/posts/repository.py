"""
In-memory post storage.

`PostStore` is owned by the application (`app.state.post_store`) and handed
to routes through `dependencies.get_post_store`, so tests can build their own.
Nothing is persisted; a restart brings back the seed posts only.
"""

from __future__ import annotations

import threading
from collections.abc import Iterable, Iterator
from contextlib import contextmanager

from .schemas import Post

SEED_POSTS: tuple[Post, ...] = (
    Post(
        id="1",
        title="Introduction to Deno Deploy",
        content="Deno Deploy is a distributed hosting service for Deno applications...",
        author="Deno User",
        created_at="2025-05-01T10:00:00Z",
    ),
    Post(
        id="2",
        title="Working with Deno KV",
        content="Deno KV provides a simple key-value storage solution...",
        author="Deno Fan",
        created_at="2025-05-02T14:30:00Z",
    ),
)


class PostNotFoundError(LookupError):
    def __init__(self, post_id: str) -> None:
        super().__init__(f"Post {post_id!r} not found.")
        self.post_id = post_id


class PostStore:
    """
    Ordered collection of posts, kept in insertion order.

    Every operation takes the same re-entrant lock. Callers that need a
    read-modify-write sequence to be atomic wrap it in `locked()`.
    """

    def __init__(self, posts: Iterable[Post] = ()) -> None:
        self._lock = threading.RLock()
        self._posts: list[Post] = []
        for post in posts:
            self.append(post)

    @contextmanager
    def locked(self) -> Iterator[None]:
        with self._lock:
            yield

    def __len__(self) -> int:
        with self._lock:
            return len(self._posts)

    def list(self) -> list[Post]:
        with self._lock:
            return list(self._posts)

    def find_by_id(self, post_id: str) -> Post | None:
        with self._lock:
            for post in self._posts:
                if post.id == post_id:
                    return post
            return None

    def _index_of(self, post_id: str) -> int:
        for index, post in enumerate(self._posts):
            if post.id == post_id:
                return index
        raise PostNotFoundError(post_id)

    def append(self, post: Post) -> None:
        with self._lock:
            if any(existing.id == post.id for existing in self._posts):
                raise ValueError(f"Post id {post.id!r} already exists.")
            self._posts.append(post)

    def replace(self, post_id: str, new_post: Post) -> None:
        with self._lock:
            self._posts[self._index_of(post_id)] = new_post

    def remove(self, post_id: str) -> Post:
        with self._lock:
            return self._posts.pop(self._index_of(post_id))


def build_store(*, seed: bool = True) -> PostStore:
    return PostStore(SEED_POSTS if seed else ())
