"""
Post record (pydantic), serialized with camelCase keys.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_AUTHOR = "Anonymous"


class Post(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str = Field(..., min_length=1)
    title: str
    content: str
    author: str = DEFAULT_AUTHOR
    created_at: str = Field(..., alias="createdAt")
    # Only set once a post has been updated.
    updated_at: str | None = Field(default=None, alias="updatedAt")

    def to_dict(self) -> dict:
        return self.model_dump(by_alias=True, exclude_none=True)
